from particle_sim import ParticleSystem, Particle, ConstantForces
from particle_sim.core import linear_momentum

# Two equal masses pulled together by a constant pair force
a = Particle(props="a", mass=1.0, position=(-1.0, 0.0))
b = Particle(props="b", mass=1.0, position=(+1.0, 0.0))
system = ParticleSystem(ConstantForces(internal=1.0), [a, b])

p0 = linear_momentum(system.particles())
for _ in range(5):
    system.update(0.1)

for p in system.particles():
    print(p.props, "pos", p.position, "vel", p.velocity)
print("momentum before", p0, "after", linear_momentum(system.particles()))
