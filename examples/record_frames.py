# examples/record_frames.py
import json

from particle_life import Simulation, SimulationConfig
from particle_life.renderer import BufferedRenderer

config = SimulationConfig(family_count=3, particle_count=40, seed=11, fast_mode=True,
                          position_range=(-300.0, 300.0))
renderer = BufferedRenderer()

with Simulation(config) as sim:
    sim.spawn_particles()
    for _ in range(120):
        sim.step()
        if sim.step_count % 10 == 0:
            renderer.render_simulation(sim)

with open("frames.json", "w", encoding="utf-8") as f:
    json.dump(renderer.frames, f)
print("recorded", len(renderer.frames), "frames")
