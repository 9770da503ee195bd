# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Force models: the ForceModel interface plus trivial NoForces and
      ConstantForces implementations.
    - Integrators: explicit Euler position update.
    - Invariants: momentum, kinetic energy and centre of mass.

Typical usage:
    from particle_sim.core import ConstantForces, linear_momentum

    model = ConstantForces(internal=1.0)
    p_total = linear_momentum(system.particles())
"""
from .forces import ForceModel, NoForces, ConstantForces
from .integrators import euler_step, integrate_positions
from .invariants import kinetic_energy, linear_momentum, center_of_mass

__all__ = [
    # Forces
    "ForceModel",
    "NoForces",
    "ConstantForces",
    # Integrators
    "euler_step",
    "integrate_positions",
    # Invariants
    "kinetic_energy",
    "linear_momentum",
    "center_of_mass",
]
