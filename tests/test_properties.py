import numpy as np
import pytest

from island_runway import AirportCalculator, Island
from island_runway.checks import is_maximal, segment_inside
from island_runway.geometry import point_in_polygon

from conftest import L_SHAPE, star_polygon


def rotate(verts: np.ndarray, angle: float) -> np.ndarray:
    c, s = np.cos(angle), np.sin(angle)
    rot = np.array([[c, -s], [s, c]], dtype=np.float64)
    return verts @ rot.T


@pytest.mark.parametrize("scale", [1.0, 1e3, 1e4, 1e5])
@pytest.mark.parametrize("seed", [1, 7, 42, 12345])
def test_random_star_runway_inside_and_maximal(seed, scale):
    """Runways on random star-shaped islands stay inside and beat every vertex chord."""
    rng = np.random.default_rng(seed)
    island = Island(star_polygon(rng, 12) * scale)
    runway = AirportCalculator(island).calculate()

    assert runway is not None
    for end in (runway.start, runway.end):
        assert point_in_polygon(island.vertices, end[0], end[1])
    assert segment_inside(island, runway, samples=65)
    assert is_maximal(island, runway)


@pytest.mark.parametrize("scale", [1e4, 1e5])
def test_vertex_ends_stay_on_vertices_at_large_scale(scale):
    """Endpoints that are not extended are exactly island vertices."""
    rng = np.random.default_rng(7)
    for _ in range(10):
        island = Island(star_polygon(rng, 9) * scale)
        calc = AirportCalculator(island)
        corners = {tuple(v) for v in island.vertices}
        for a in range(island.n):
            for b in range(a + 1, island.n):
                if not island.contains_segment(a, b):
                    continue
                start = calc.extend(island.vertices[a], island.vertices[b], True)
                # Moved endpoints must have moved by more than rounding noise
                if tuple(start) not in corners:
                    assert np.hypot(*(start - island.vertices[a])) > 1e-6 * scale
                assert point_in_polygon(island.vertices, start[0], start[1])


@pytest.mark.parametrize("seed", [3, 99])
def test_rigid_motion_preserves_runway_length(seed):
    rng = np.random.default_rng(seed)
    verts = star_polygon(rng, 10)
    base = AirportCalculator(Island(verts)).calculate()

    shifted = AirportCalculator(Island(verts + np.array([250.0, -75.0]))).calculate()
    turned = AirportCalculator(Island(rotate(verts, 0.7))).calculate()

    assert shifted.length == pytest.approx(base.length, abs=1e-6)
    assert turned.length == pytest.approx(base.length, abs=1e-6)


def test_rotated_l_shape_maps_runway():
    verts = np.asarray(L_SHAPE, dtype=np.float64)
    base = AirportCalculator(Island(verts)).calculate()
    turned = AirportCalculator(Island(rotate(verts, np.pi / 6))).calculate()
    assert turned.length == pytest.approx(base.length, abs=1e-6)


def test_winding_does_not_change_length():
    rng = np.random.default_rng(2024)
    verts = star_polygon(rng, 9)
    ccw = AirportCalculator(Island(verts)).calculate()
    cw = AirportCalculator(Island(verts[::-1])).calculate()
    assert cw.length == pytest.approx(ccw.length, abs=1e-7)


def test_shared_island_gives_same_result():
    """Several calculators over one island agree."""
    rng = np.random.default_rng(5)
    island = Island(star_polygon(rng, 8))
    results = [AirportCalculator(island).calculate() for _ in range(3)]
    assert all(r == results[0] for r in results)
