# examples/blended_family.py
# Blend two generated families and compare how family 0 perceives each.
import numpy as np

from particle_life.model import SimulationParameters

params = SimulationParameters.random(4, np.random.default_rng(3))
a, b = params.families[1], params.families[2]
child = a.combine(b, (0.5, 0.5))

print("child ancestry:", child.ancestry)
for d in (0.1, 0.25, 0.5, 0.75, 1.0):
    fa = params.families[0].attraction(a, d)
    fb = params.families[0].attraction(b, d)
    fc = params.families[0].attraction(child, d)
    print(f"d={d:.2f}  parentA={fa:+.3f}  parentB={fb:+.3f}  child={fc:+.3f}")
