# examples/headless_run.py
from particle_life import Simulation, SimulationConfig
from particle_life.core import mean_speed
from particle_life.logging_setup import setup_logging

config = SimulationConfig(family_count=6, particle_count=64, seed=7, log_interval=60)
setup_logging(config.log_level, config.log_file)

with Simulation(config) as sim:
    sim.spawn_particles()
    sim.run(300)
    print("t:", sim.time)
    print("steps:", sim.step_count)
    print("mean speed:", mean_speed(sim.particles))
