# MIT License (see LICENSE)
"""
Longest-runway search over an island polygon.

The search enumerates every unordered pair of vertices (handshake order,
a < b). Each chord that lies inside the island is extended along its own
line at both ends until it meets the boundary, and the longest extended
chord wins.

Extension of one endpoint ("anchor") works by shooting a long segment from
the anchor away from the other endpoint, taking the boundary hit closest
to the anchor, and accepting it only if the midpoint between anchor and
hit is inside the island. The midpoint guard rejects hits reached through
exterior space, e.g. across a concavity.

Complexity is O(n^3): O(n^2) chords times O(n) per containment or
intersection query.
"""
from __future__ import annotations
import contextlib
import logging
from typing import Iterator

import numpy as np

from .constants import EPS, MIN_EXTENSION
from .geometry.primitives import angle_between, distance
from .island import Island
from .profiler import Profiler
from .types import Segment
from .util import f64

logger = logging.getLogger(__name__)


class AirportCalculator:
    """
    Finds the longest straight runway that fits inside an island.

    The calculator only borrows the island; it keeps no state between
    calls, so several calculators may share one island.

    Args:
        island: The polygon to search.
        strict: Tie-break. False keeps the last of several equally long
                candidates (>= comparison), True keeps the first (>).
        profiler: Optional Profiler receiving "contains" and "extend" timings.

    Raises:
        TypeError: If island is not an Island.
    """

    def __init__(self, island: Island, *, strict: bool = False,
                 profiler: Profiler | None = None) -> None:
        if not isinstance(island, Island):
            raise TypeError(f"AirportCalculator needs an Island, got {type(island)}")
        self.island = island
        self.strict = strict
        self.profiler = profiler

    def _section(self, name: str):
        if self.profiler is None:
            return contextlib.nullcontext()
        return self.profiler.section(name)

    @property
    def extension_length(self) -> float:
        """
        Length of the probe segment used when extending an endpoint.

        Twice the bounding-box diagonal, so the probe always leaves the
        island. Linear in the island size to keep far-point rounding small.
        """
        b = self.island.bounds
        return max(2.0 * b.diagonal, MIN_EXTENSION)

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def candidates(self) -> Iterator[Segment]:
        """
        Yield every extended inside chord in handshake order.

        For each vertex pair (a, b) with a < b whose chord lies inside the
        island, the start is extended first and the end is then extended
        away from the new start.
        """
        island = self.island
        verts = island.vertices
        n = island.n
        for a in range(n):
            for b in range(a + 1, n):
                with self._section("contains"):
                    inside = island.contains_segment(a, b)
                if not inside:
                    continue
                with self._section("extend"):
                    start = self.extend(verts[a], verts[b], True)
                    end = self.extend(start, verts[b], False)
                yield Segment(start, end)

    def calculate(self) -> Segment | None:
        """
        Find the longest possible runway on the island.

        Returns:
            A maximal segment lying wholly inside the island, or None if no
            vertex chord fits.
        """
        best_length = float("-inf")
        best: Segment | None = None
        count = 0

        for seg in self.candidates():
            count += 1
            length = seg.length
            if length > best_length or (not self.strict and length >= best_length):
                best_length = length
                best = seg

        if best is None:
            logger.debug("no runway found on island with %d vertices", self.island.n)
            return None

        logger.debug(
            "runway length %.6f from %d inside chords (%d vertices)",
            best_length, count, self.island.n,
        )
        return best

    # -------------------------------------------------------------------------
    # Extension
    # -------------------------------------------------------------------------

    def extend(self, a, b, extend_start: bool) -> np.ndarray:
        """
        Push one endpoint of segment ab outward to the island boundary.

        Args:
            a: First endpoint.
            b: Second endpoint.
            extend_start: Extend a (away from b) if True, else b (away from a).

        Returns:
            The boundary point reached, or the unchanged endpoint when there
            is no boundary hit or the path to it leaves the island.
        """
        a = f64(a)
        b = f64(b)
        anchor, other = (a, b) if extend_start else (b, a)
        if distance(anchor, other) <= EPS:
            return anchor

        theta = np.radians(angle_between(other, anchor))
        length = self.extension_length
        far = anchor + length * np.array([np.cos(theta), np.sin(theta)], dtype=np.float64)

        hit = self.closest_intersection(far, anchor)
        if hit is None:
            return anchor

        mid = (anchor + hit) * 0.5
        if not self.island.contains_point(mid[0], mid[1]):
            return anchor
        return hit

    def closest_intersection(self, far, anchor) -> np.ndarray | None:
        """
        Boundary hit on segment far-anchor that is nearest to anchor.

        Hits within EPS of the anchor are ignored. Equal distances resolve
        to the earliest edge in vertex order.

        Returns:
            The nearest hit, or None if the segment meets no edge.
        """
        anchor = f64(anchor)
        best: np.ndarray | None = None
        best_dist = float("inf")
        for hit in self.island.intersections(far, anchor):
            d = distance(hit, anchor)
            if d <= EPS:
                continue
            if d < best_dist:
                best = hit
                best_dist = d
        return best


def find_runway(vertices, *, strict: bool = False) -> Segment | None:
    """Build an Island from a vertex list and return its longest runway."""
    return AirportCalculator(Island(vertices), strict=strict).calculate()
