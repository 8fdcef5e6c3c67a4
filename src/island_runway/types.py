# MIT License (see LICENSE)
"""
Core value types for the runway search.

Defines the immutable data structures passed between the geometry
primitives, the island model and the calculator:
- Segment: a closed line segment between two distinct points.
- BoundingBox: the axis-aligned rectangle spanning a vertex set.

Points themselves are plain float64 numpy arrays of shape (2,).
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .constants import EPS
from .util import f64, norm, unit


# =============================================================================
# Segment
# =============================================================================

@dataclass(frozen=True)
class Segment:
    """
    Closed line segment between two points.

    Attributes:
        start: First endpoint [x, y].
        end: Second endpoint [x, y].

    Note:
        Endpoints are converted to float64 numpy arrays on init, so tuples
        are accepted. The segment is ordered but most queries (length,
        almost_equal) ignore orientation.
    """
    start: np.ndarray | tuple[float, float]
    end: np.ndarray | tuple[float, float]

    def __post_init__(self) -> None:
        """Store endpoints as float64 arrays."""
        object.__setattr__(self, "start", f64(self.start))
        object.__setattr__(self, "end", f64(self.end))

    @property
    def length(self) -> float:
        """Euclidean distance between the endpoints."""
        return norm(self.end - self.start)

    @property
    def midpoint(self) -> np.ndarray:
        return (self.start + self.end) * 0.5

    @property
    def direction(self) -> np.ndarray:
        """Unit vector from start to end (zero vector if degenerate)."""
        return unit(self.end - self.start)

    def reversed(self) -> Segment:
        return Segment(self.end, self.start)

    def as_tuple(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """Plain-float representation ((x1, y1), (x2, y2))."""
        return (
            (float(self.start[0]), float(self.start[1])),
            (float(self.end[0]), float(self.end[1])),
        )

    def almost_equal(self, other: Segment, eps: float = EPS) -> bool:
        """True if both endpoints match within eps, in either orientation."""
        def close(p: np.ndarray, q: np.ndarray) -> bool:
            return norm(p - q) <= eps

        same = close(self.start, other.start) and close(self.end, other.end)
        flipped = close(self.start, other.end) and close(self.end, other.start)
        return same or flipped

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return bool(np.array_equal(self.start, other.start) and np.array_equal(self.end, other.end))

    def __hash__(self) -> int:
        return hash(self.as_tuple())


# =============================================================================
# Bounding box
# =============================================================================

@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned bounding box (min_x, min_y, max_x, max_y).
    """
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def diagonal(self) -> float:
        return float(np.hypot(self.width, self.height))

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)
