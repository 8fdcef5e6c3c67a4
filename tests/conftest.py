import numpy as np
import pytest

from island_runway.island import Island


SQUARE = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
RECTANGLE = [(0.0, 0.0), (20.0, 0.0), (20.0, 5.0), (0.0, 5.0)]
TRIANGLE = [(0.0, 0.0), (10.0, 0.0), (0.0, 10.0)]
L_SHAPE = [(0.0, 0.0), (10.0, 0.0), (10.0, 4.0), (4.0, 4.0), (4.0, 10.0), (0.0, 10.0)]
STRIP = [(0.0, 0.0), (100.0, 0.0), (100.0, 1.0), (0.0, 1.0)]


def regular_polygon(n: int, radius: float = 1.0) -> np.ndarray:
    """Regular n-gon inscribed in a circle, first vertex pointing up."""
    k = np.arange(n)
    theta = np.pi / 2 + 2 * np.pi * k / n
    return np.stack([radius * np.cos(theta), radius * np.sin(theta)], axis=1)


def star_polygon(rng: np.random.Generator, n: int) -> np.ndarray:
    """Random star-shaped (hence simple) polygon around the origin, CCW."""
    # One vertex per angular sector keeps every gap below pi
    theta = (np.arange(n) + rng.uniform(0.1, 0.9, n)) * 2 * np.pi / n
    r = rng.uniform(0.5, 1.5, n)
    return np.stack([r * np.cos(theta), r * np.sin(theta)], axis=1)


@pytest.fixture
def l_shape() -> Island:
    return Island(L_SHAPE)


@pytest.fixture
def square() -> Island:
    return Island(SQUARE)
