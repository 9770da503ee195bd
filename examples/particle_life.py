# examples/particle_life.py
import logging

from particle_sim.logging_config import setup_logging
from particle_sim.particle_life import build_particle_life, kind_counts

setup_logging(logging.INFO)

system = build_particle_life(seed=0, kinds=6, per_kind=30, extent=500.0)

# One simulated second at 60 frames per second
for _ in range(60):
    system.update(1 / 60)

particles = system.particles()
print("t:", system.time, "steps:", system.steps)
print("kinds:", kind_counts(particles))
for p in particles[:5]:
    print(p.props, p.position, p.velocity)
