import numpy as np

from island_runway import find_runway

for n in (3, 4, 5, 6, 8, 12):
    k = np.arange(n)
    theta = 2 * np.pi * k / n
    verts = np.stack([np.cos(theta), np.sin(theta)], axis=1)
    runway = find_runway(verts)
    print(f"n={n:2d}  runway={runway.length:.6f}")
