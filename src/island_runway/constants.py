# MIT License (see LICENSE)
"""
Numeric constants shared by the geometry kernel.

All near-equality decisions (coincident intersection points, zero
distances, near-parallel segments) use the single tolerance EPS so that
equality stays transitive across the whole search.
"""
from __future__ import annotations

# Comparison tolerance, in the units of the input coordinates.
EPS: float = 1e-7

# Lower bound on the ray length used when extending a chord. Keeps the far
# point outside the island for sub-unit polygons.
MIN_EXTENSION: float = 1.0
