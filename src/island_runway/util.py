# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

Provides low-level 2D vector operations used by the geometry kernel.
All functions operate on 2D vectors represented as numpy arrays of shape (2,).
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.
    
    Used throughout the codebase so that tuple/list inputs for points
    and vertex lists share one numeric precision.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector. Avoids sqrt for performance."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, eps: float = 1e-12) -> np.ndarray:
    """
    Return a unit (normalized) vector in the same direction as v.
    
    Returns zero vector if |v| < eps to avoid division by zero.
    """
    n = norm(v)
    if n < eps:
        return np.zeros(2, dtype=np.float64)
    return v / n


def cross2(a: np.ndarray, b: np.ndarray) -> float:
    """
    2D cross product (scalar result): a × b = ax*by - ay*bx.
    
    Positive result means b is counterclockwise from a.
    """
    return float(a[0] * b[1] - a[1] * b[0])


def dot2(a: np.ndarray, b: np.ndarray) -> float:
    """2D dot product as a plain float."""
    return float(a[0] * b[0] + a[1] * b[1])
