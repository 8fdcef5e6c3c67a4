# MIT License (see LICENSE)
"""
island_runway - Longest straight runway inside a simple polygon.

This package computes the longest line segment that fits entirely inside a
simple (non-self-intersecting) polygon describing an island, including
segments that touch the boundary.

Main entry points:
    - Island: Immutable polygon model with containment queries.
    - AirportCalculator: Runway search over an Island.
    - find_runway: One-call convenience wrapper.
    - Segment: Result type (None means no runway fits).

Submodules:
    - geometry: Stateless plane geometry primitives.
    - checks: Verification helpers for runway results.
    - profiler: Optional timing of search phases.

Example:
    from island_runway import Island, AirportCalculator

    island = Island([(0, 0), (10, 0), (10, 10), (0, 10)])
    runway = AirportCalculator(island).calculate()
    print(runway.length)  # 14.142...
"""
from .calculator import AirportCalculator, find_runway
from .constants import EPS
from .island import Island
from .types import BoundingBox, Segment

__all__ = [
    # Search
    "AirportCalculator",
    "find_runway",
    # Model
    "Island",
    # Values
    "Segment",
    "BoundingBox",
    "EPS",
]
