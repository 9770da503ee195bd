# MIT License (see LICENSE)
"""
particle_sim - A 2D pairwise-force particle simulator.

This package advances a set of point particles that interact through
caller-defined pairwise forces, using a double-buffered all-pairs step.

Main entry points:
    - ParticleSystem: Owns the particle buffers and runs update(dt).
    - Particle: A point mass with position, velocity and a props tag.
    - ForceModel: Interface for external and pairwise forces.
    - FixedVector, vector: Fixed-size numeric vectors.

Submodules:
    - core: Force model interface, integrators and invariants.
    - particle_life: Kind-based attraction/repulsion model and scene builder.
    - profiler: Per-phase timing.
    - logging_config: Optional logging setup for applications.

Example:
    from particle_sim import ParticleSystem, Particle, ConstantForces

    system = ParticleSystem(
        ConstantForces(internal=1.0),
        [Particle(0, 1.0, position=(-1, 0)), Particle(0, 1.0, position=(1, 0))],
    )
    system.update(0.1)
"""
from .vector import FixedVector, vector
from .types import Particle
from .core.forces import ForceModel, NoForces, ConstantForces
from .system import ParticleSystem, ParticleView, calculate_delta_velocity

__all__ = [
    # Simulation
    "ParticleSystem",
    "ParticleView",
    "calculate_delta_velocity",
    "Particle",
    # Forces
    "ForceModel",
    "NoForces",
    "ConstantForces",
    # Vectors
    "FixedVector",
    "vector",
]
