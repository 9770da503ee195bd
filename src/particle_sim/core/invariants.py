# MIT License (see LICENSE)
"""
Utilities for calculating physical invariants and conserved quantities.

Used for verifying simulation correctness. With zero external force the pair
term hands out equal and opposite impulses to equal masses, so the total
linear momentum of such a system should stay put from step to step.
"""
from __future__ import annotations
from typing import Sequence

from ..types import Particle
from ..vector import FixedVector


def kinetic_energy(particles: Sequence[Particle]) -> float:
    """
    Calculate the total kinetic energy of a set of particles.

    T = Σ 0.5 · m · v²
    """
    ke = 0.0
    for p in particles:
        ke += 0.5 * p.mass * p.velocity.square_length()
    return ke


def linear_momentum(particles: Sequence[Particle]) -> FixedVector:
    """
    Calculate the total linear momentum of a set of particles.

    P = Σ m · v
    """
    total = FixedVector.zeros(2)
    for p in particles:
        total = total + p.momentum
    return total


def center_of_mass(particles: Sequence[Particle]) -> FixedVector:
    """
    Mass-weighted mean position.

    Raises:
        ValueError: If there are no particles.
    """
    if len(particles) == 0:
        raise ValueError("center_of_mass needs at least one particle")
    weighted = FixedVector.zeros(2)
    total_mass = 0.0
    for p in particles:
        weighted = weighted + p.position * p.mass
        total_mass += p.mass
    return weighted / total_mass
