# MIT License (see LICENSE)
"""
Stateless 2D geometry primitives.

Everything the island model and the runway search need from plane geometry:
- angle_between: direction of a directed segment in degrees.
- segment_intersection: the touching/crossing point of two closed segments.
- proper_crossing: strict interior crossing test.
- point_in_polygon: closed-region containment (boundary counts as inside).
- bounding_box: axis-aligned extent of a vertex set.

Tolerances are absolute distances in the units of the input coordinates;
all of them default to the package-wide EPS.
"""
from __future__ import annotations

import numpy as np

from ..constants import EPS
from ..types import BoundingBox
from ..util import cross2, dot2, f64, norm, norm2


def distance(a: np.ndarray, b: np.ndarray) -> float:
    """Euclidean distance between two points."""
    return float(np.hypot(b[0] - a[0], b[1] - a[1]))


def angle_between(origin: np.ndarray, target: np.ndarray) -> float:
    """
    Angle of the vector target - origin, in degrees.

    Measured counterclockwise from the positive x-axis, in the range
    (-180, 180]. Undefined (returns 0.0) when the points coincide.
    """
    deg = float(np.degrees(np.arctan2(target[1] - origin[1], target[0] - origin[0])))
    if deg <= -180.0:
        deg += 360.0
    return deg


def orientation(a: np.ndarray, b: np.ndarray, c: np.ndarray, eps: float = EPS) -> int:
    """
    Side of point c relative to the directed line a -> b.

    Returns +1 (left), -1 (right) or 0 when c lies within eps of the line.
    """
    ab = b - a
    length = norm(ab)
    if length < eps:
        return 0
    # Signed distance of c from the line
    d = cross2(ab, c - a) / length
    if d > eps:
        return 1
    if d < -eps:
        return -1
    return 0


def proper_crossing(
    p1: np.ndarray, p2: np.ndarray, q1: np.ndarray, q2: np.ndarray, eps: float = EPS
) -> bool:
    """
    True if segments p1p2 and q1q2 cross at a point interior to both.

    Touching at an endpoint, grazing a vertex and collinear overlap are
    not proper crossings.
    """
    o1 = orientation(p1, p2, q1, eps)
    o2 = orientation(p1, p2, q2, eps)
    o3 = orientation(q1, q2, p1, eps)
    o4 = orientation(q1, q2, p2, eps)
    return o1 * o2 < 0 and o3 * o4 < 0


def _collinear_touch(
    p1: np.ndarray, p2: np.ndarray, q1: np.ndarray, q2: np.ndarray, eps: float
) -> np.ndarray | None:
    """Single shared point of two parallel segments, if they meet in exactly one."""
    r = p2 - p1
    rr = norm2(r)
    if rr < eps * eps:
        return None
    # Not on the same line
    if abs(cross2(r, q1 - p1)) / np.sqrt(rr) > eps:
        return None

    t0 = dot2(q1 - p1, r) / rr
    t1 = dot2(q2 - p1, r) / rr
    lo = max(0.0, min(t0, t1))
    hi = min(1.0, max(t0, t1))
    span = (hi - lo) * np.sqrt(rr)
    if span < -eps or span > eps:
        # Disjoint or overlapping along a stretch
        return None
    t = min(max((lo + hi) * 0.5, 0.0), 1.0)
    touch = p1 + t * r
    # The shared point is an endpoint of both segments; return it exactly
    ends = (p1, p2, q1, q2)
    return min(ends, key=lambda e: norm2(e - touch)).copy()


def segment_intersection(
    p1: np.ndarray, p2: np.ndarray, q1: np.ndarray, q2: np.ndarray, eps: float = EPS
) -> np.ndarray | None:
    """
    Intersection point of closed segments p1p2 and q1q2.

    The solve is anchored at the endpoint of p1p2 nearer to q1q2, and the
    point is rebuilt from whichever endpoint it lies closest to. Rounding
    error then scales with the distance to that endpoint, not with the
    length of a long probe segment, so a hit at a shared vertex comes back
    as that vertex.

    Args:
        p1, p2: Endpoints of the first segment.
        q1, q2: Endpoints of the second segment.
        eps: Distance tolerance for touching endpoints and parallelism.

    Returns:
        The crossing point for a transversal crossing, the shared point
        when the segments only touch, or None when they are disjoint or
        collinear and overlapping along a stretch.
    """
    s = q2 - q1
    len_s = norm(s)
    len_r = distance(p1, p2)
    if len_r < eps or len_s < eps:
        return None

    mid_q = (q1 + q2) * 0.5
    if norm2(p2 - mid_q) < norm2(p1 - mid_q):
        o, r = p2, p1 - p2
    else:
        o, r = p1, p2 - p1

    denom = cross2(r, s)
    # Sideways extent of q1q2 relative to the line through p1p2
    if abs(denom) / len_r <= eps:
        return _collinear_touch(p1, p2, q1, q2, eps)

    qo = q1 - o
    t = cross2(qo, s) / denom
    u = cross2(qo, r) / denom

    tol_t = eps / len_r
    tol_u = eps / len_s
    if t < -tol_t or t > 1.0 + tol_t or u < -tol_u or u > 1.0 + tol_u:
        return None

    t = min(max(t, 0.0), 1.0)
    u = min(max(u, 0.0), 1.0)
    if t * len_r <= min(u, 1.0 - u) * len_s:
        return o + t * r
    if u <= 0.5:
        return q1 + u * s
    return q2 - (1.0 - u) * s


def point_segment_distance(p: np.ndarray, a: np.ndarray, b: np.ndarray) -> float:
    """Shortest distance from point p to the closed segment ab."""
    ab = b - a
    ab2 = norm2(ab)
    if ab2 < 1e-24:
        return distance(p, a)
    t = min(max(dot2(p - a, ab) / ab2, 0.0), 1.0)
    return distance(p, a + t * ab)


def point_in_polygon(vertices: np.ndarray, x: float, y: float, eps: float = EPS) -> bool:
    """
    Closed-region containment test for a simple polygon.

    Points within eps of an edge count as inside. Otherwise uses even-odd
    ray casting along the +x horizontal ray, so either winding works.

    Args:
        vertices: Array [N, 2] of polygon vertices in cyclic order.
        x, y: Query point.

    Returns:
        True if (x, y) lies inside the polygon or on its boundary.
    """
    verts = vertices
    xs = verts[:, 0]
    ys = verts[:, 1]
    xe = np.roll(xs, -1)
    ye = np.roll(ys, -1)

    # Boundary check: vectorized point-to-edge distance
    dx = xe - xs
    dy = ye - ys
    len2 = dx * dx + dy * dy
    with np.errstate(divide="ignore", invalid="ignore"):
        t = np.where(len2 > 0.0, ((x - xs) * dx + (y - ys) * dy) / len2, 0.0)
    t = np.clip(t, 0.0, 1.0)
    cx = xs + t * dx - x
    cy = ys + t * dy - y
    if bool(np.any(cx * cx + cy * cy <= eps * eps)):
        return True

    # Even-odd crossing count; edges not straddling y are masked out
    straddle = (ys > y) != (ye > y)
    with np.errstate(divide="ignore", invalid="ignore"):
        x_cross = xs + (y - ys) * dx / dy
    hits = straddle & (x < x_cross)
    return bool(np.count_nonzero(hits) % 2 == 1)


def bounding_box(vertices) -> BoundingBox:
    """Axis-aligned bounding box of a vertex set."""
    verts = f64(vertices)
    return BoundingBox(
        float(np.min(verts[:, 0])),
        float(np.min(verts[:, 1])),
        float(np.max(verts[:, 0])),
        float(np.max(verts[:, 1])),
    )
