"""
Microbenchmark: time per calculate() vs number of island vertices.
Run:
  python benchmarks/bench_calculate.py
"""
import time
import numpy as np
from island_runway import AirportCalculator, Island
from island_runway.checks import segment_inside
from island_runway.profiler import Profiler


def star_island(rng: np.random.Generator, n: int) -> Island:
    theta = (np.arange(n) + rng.uniform(0.1, 0.9, n)) * 2 * np.pi / n
    r = rng.uniform(0.5, 1.5, n)
    return Island(np.stack([r * np.cos(theta), r * np.sin(theta)], axis=1))


def run(n: int, repeats: int = 3):
    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)
    island = star_island(rng, n)
    prof = Profiler()
    calc = AirportCalculator(island, profiler=prof)

    t0 = time.perf_counter()
    for _ in range(repeats):
        runway = calc.calculate()
    t1 = time.perf_counter()

    assert runway is not None and segment_inside(island, runway)
    return (t1 - t0) / repeats, runway.length, prof.stats.summary()


if __name__ == "__main__":
    for n in [8, 16, 32, 64]:
        per_call, length, summary = run(n)
        print(f"N={n:4d}  calculate={1e3*per_call:9.2f} ms  runway={length:.4f}")
        for k in ["contains", "extend"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
