"""
Microbenchmark: time per step vs number of particles.
Run:
  python benchmarks/bench_steps.py
"""
import time

from particle_life import Simulation, SimulationConfig
from particle_life.profiler import Profiler


def run(per_family: int, index_kind: str, steps: int = 30):
    prof = Profiler()
    config = SimulationConfig(
        family_count=8,
        particle_count=per_family,
        position_range=(-600.0, 600.0),
        spatial_index=index_kind,
        seed=12345,  # determinism
    )
    with Simulation(config, profiler=prof) as sim:
        sim.spawn_particles()

        # warmup
        for _ in range(3):
            sim.step()
        prof.stats.clear()

        t0 = time.perf_counter()
        sim.run(steps)
        t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()


if __name__ == "__main__":
    for n in [8, 32, 64, 128]:
        for kind in ["kdtree", "grid"]:
            per_step, summary = run(n, kind)
            print(f"N={8 * n:5d} index={kind:6s} step={1e3 * per_step:8.3f} ms  steps/s={1 / per_step:8.1f}")
            for k in ["integrate", "index", "interact"]:
                if k in summary:
                    print(" ", k, summary[k])
        print()
