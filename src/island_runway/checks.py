# MIT License (see LICENSE)
"""
Verification helpers for runway results.

Used for checking search correctness in tests and benchmarks. A runway must
lie inside its island and be at least as long as every vertex chord that
lies inside.
"""
from __future__ import annotations

import numpy as np

from .constants import EPS
from .geometry.primitives import proper_crossing
from .island import Island
from .types import Segment


def segment_inside(island: Island, segment: Segment, samples: int = 33) -> bool:
    """
    Check that a segment lies in the closed region of the island.

    Both endpoints and evenly spaced interior samples must be contained,
    and no island edge may properly cross the segment.

    Args:
        island: The polygon.
        segment: Candidate runway.
        samples: Number of points tested along the segment (>= 2).

    Returns:
        True if every check passes.
    """
    p, q = segment.start, segment.end
    for t in np.linspace(0.0, 1.0, max(samples, 2)):
        pt = p + t * (q - p)
        if not island.contains_point(pt[0], pt[1]):
            return False
    for _, a, b in island.edges():
        if proper_crossing(p, q, a, b):
            return False
    return True


def inside_chord_lengths(island: Island) -> list[float]:
    """Lengths of all vertex chords (i < j) that lie inside the island."""
    verts = island.vertices
    out = []
    for i in range(island.n):
        for j in range(i + 1, island.n):
            if island.contains_segment(i, j):
                out.append(float(np.hypot(*(verts[j] - verts[i]))))
    return out


def is_maximal(island: Island, segment: Segment, eps: float = EPS) -> bool:
    """True if the segment is no shorter than any inside vertex chord."""
    lengths = inside_chord_lengths(island)
    return all(segment.length >= length - eps for length in lengths)
