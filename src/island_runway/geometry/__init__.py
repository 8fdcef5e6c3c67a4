# MIT License (see LICENSE)
"""
Plane geometry primitives used by the island model and runway search.

This subpackage provides:
    - Directions: angle_between.
    - Segments: segment_intersection, proper_crossing, orientation.
    - Containment: point_in_polygon, point_segment_distance.
    - Extents: bounding_box, distance.

Typical usage:
    from island_runway.geometry import segment_intersection, point_in_polygon

    hit = segment_intersection(p1, p2, q1, q2)
    if hit is not None and point_in_polygon(vertices, *hit):
        ...
"""
from .primitives import (
    angle_between,
    bounding_box,
    distance,
    orientation,
    point_in_polygon,
    point_segment_distance,
    proper_crossing,
    segment_intersection,
)

__all__ = [
    # Directions
    "angle_between",
    # Segments
    "segment_intersection",
    "proper_crossing",
    "orientation",
    # Containment
    "point_in_polygon",
    "point_segment_distance",
    # Extents
    "bounding_box",
    "distance",
]
