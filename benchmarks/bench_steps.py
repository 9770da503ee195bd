"""
Microbenchmark: time per update vs number of particles.
Run:
  python benchmarks/bench_steps.py
"""
import time

from particle_sim.particle_life import build_particle_life
from particle_sim.profiler import Profiler


def run(kinds: int, per_kind: int, steps: int = 20, cache: bool = False):
    prof = Profiler()
    system = build_particle_life(
        seed=12345,
        kinds=kinds,
        per_kind=per_kind,
        cache_external_forces=cache,
        profiler=prof,
    )

    # warmup
    for _ in range(3):
        system.update(1 / 60)
    prof.reset()

    t0 = time.perf_counter()
    for _ in range(steps):
        system.update(1 / 60)
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()


if __name__ == "__main__":
    for per_kind in [2, 5, 10, 20]:
        n = 6 * per_kind
        for cache in (False, True):
            per_step, summary = run(6, per_kind, cache=cache)
            print(f"N={n:4d} cache={cache!s:5}  step={1e3*per_step:9.3f} ms  steps/s={1/per_step:8.1f}")
            for k in ["forces", "integrate", "swap"]:
                if k in summary:
                    print(" ", k, summary[k])
        print()
