# MIT License (see LICENSE)
"""
Polygon model of an island.

An Island is an ordered cycle of vertices V0..Vn-1 (n >= 3) with edge Ei
joining Vi to V(i+1) mod n. It is immutable after construction: the vertex
array is stored read-only and derived data (bounds, area) is cached.

The model answers three questions for the runway search:
  - contains_point(x, y): is the point in the closed region?
  - contains_segment(i, j): does the chord Vi-Vj lie entirely inside?
  - intersections(p, q): where does segment pq meet the boundary?

Simplicity (no self-intersection) is the caller's responsibility and is
not checked; only cheap structural problems raise ValueError.
"""
from __future__ import annotations
from dataclasses import dataclass
from functools import cached_property
from typing import Iterator

import numpy as np

from .constants import EPS
from .geometry.primitives import (
    bounding_box,
    point_in_polygon,
    point_segment_distance,
    proper_crossing,
    segment_intersection,
)
from .types import BoundingBox
from .util import dot2, f64, norm, norm2


@dataclass(frozen=True, eq=False)
class Island:
    """
    Simple polygon bounding an island.

    Attributes:
        vertices: Array of vertices [N, 2]. Either winding is accepted.
                  Converted to a read-only float64 array on init.

    Raises:
        ValueError: If fewer than 3 vertices are given, the array is not
                    [N, 2], a coordinate is not finite, or two consecutive
                    vertices coincide.
    """
    vertices: np.ndarray

    def __post_init__(self) -> None:
        """Validate and freeze the vertex array."""
        verts = f64(self.vertices)
        if verts.ndim != 2 or verts.shape[1] != 2:
            raise ValueError(f"Island vertices must have shape (N, 2), got {verts.shape}")
        if len(verts) < 3:
            raise ValueError(f"Island must have at least 3 vertices, got {len(verts)}")
        if not np.all(np.isfinite(verts)):
            raise ValueError("Island vertices must be finite")

        step = np.roll(verts, -1, axis=0) - verts
        gaps = np.hypot(step[:, 0], step[:, 1])
        bad = np.flatnonzero(gaps < EPS)
        if len(bad):
            i = int(bad[0])
            raise ValueError(
                f"Consecutive vertices {i} and {(i + 1) % len(verts)} coincide"
            )

        verts.setflags(write=False)
        object.__setattr__(self, "vertices", verts)

    # -------------------------------------------------------------------------
    # Structure
    # -------------------------------------------------------------------------

    @property
    def n(self) -> int:
        """Number of vertices."""
        return len(self.vertices)

    def __len__(self) -> int:
        return self.n

    def __getitem__(self, i: int) -> np.ndarray:
        """Vertex i (index taken modulo n), as a writable copy."""
        return self.vertices[i % self.n].copy()

    def edges(self) -> Iterator[tuple[int, np.ndarray, np.ndarray]]:
        """Yield (i, Vi, V(i+1) mod n) for every edge."""
        verts = self.vertices
        n = self.n
        for i in range(n):
            yield i, verts[i], verts[(i + 1) % n]

    def adjacent(self, i: int, j: int) -> bool:
        """True if vertices i and j are joined by an edge."""
        return (i - j) % self.n in (1, self.n - 1)

    @cached_property
    def bounds(self) -> BoundingBox:
        return bounding_box(self.vertices)

    @cached_property
    def signed_area(self) -> float:
        """Shoelace area; positive for counterclockwise winding."""
        x = self.vertices[:, 0]
        y = self.vertices[:, 1]
        return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    @property
    def is_ccw(self) -> bool:
        return self.signed_area > 0.0

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def contains_point(self, x: float, y: float) -> bool:
        """True if (x, y) lies in the closed region bounded by the island."""
        return point_in_polygon(self.vertices, x, y)

    def contains_segment(self, i: int, j: int) -> bool:
        """
        Check whether the chord between vertices i and j lies inside.

        Decision rule:
          1. Adjacent vertices: the chord is an edge, so it is inside.
          2. Any edge not sharing a vertex with the chord that properly
             crosses it puts part of the chord outside.
          3. Otherwise the chord can only leave the island where it touches
             the boundary, i.e. at its endpoints or at vertices lying on
             it. Every piece between consecutive touch points must have
             its midpoint inside.

        Args:
            i, j: Vertex indices (taken modulo n).

        Returns:
            True if the whole closed chord is inside the island.
        """
        n = self.n
        i %= n
        j %= n
        if i == j:
            return False
        if self.adjacent(i, j):
            return True

        verts = self.vertices
        p = verts[i]
        q = verts[j]

        for k, a, b in self.edges():
            k_next = (k + 1) % n
            if k in (i, j) or k_next in (i, j):
                continue
            if proper_crossing(p, q, a, b):
                return False

        # Chord parameters of every boundary touch, endpoints included
        pq = q - p
        pq2 = norm2(pq)
        touches = [0.0, 1.0]
        for k in range(n):
            if k in (i, j):
                continue
            v = verts[k]
            if point_segment_distance(v, p, q) <= EPS:
                touches.append(dot2(v - p, pq) / pq2)
        touches.sort()

        tol = EPS / np.sqrt(pq2)
        for t0, t1 in zip(touches, touches[1:]):
            if t1 - t0 <= tol:
                continue
            m = p + 0.5 * (t0 + t1) * pq
            if not self.contains_point(m[0], m[1]):
                return False
        return True

    def intersections(self, p, q) -> list[np.ndarray]:
        """
        Points where segment pq meets the island boundary.

        Hits within EPS of either endpoint are dropped (the segment is
        treated as open), and hits within EPS of one another are merged,
        so a crossing through a vertex is reported once.

        Args:
            p: Start of the query segment.
            q: End of the query segment.

        Returns:
            Hit points ordered by increasing distance from q.
        """
        p = f64(p)
        q = f64(q)
        hits: list[np.ndarray] = []
        for _, a, b in self.edges():
            hit = segment_intersection(p, q, a, b)
            if hit is None:
                continue
            if norm(hit - p) <= EPS or norm(hit - q) <= EPS:
                continue
            if any(norm(hit - h) <= EPS for h in hits):
                continue
            hits.append(hit)
        hits.sort(key=lambda h: norm(h - q))
        return hits
