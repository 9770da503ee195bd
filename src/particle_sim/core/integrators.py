# MIT License (see LICENSE)
"""
Position integration for particles.

The particle system resolves forces into velocity changes first, so the only
thing left to integrate is the kinematic equation dx/dt = v. That is done
with a single explicit Euler step:

    x(t+dt) = x(t) + v(t+dt)·dt

Using the already-updated velocity makes the overall scheme semi-implicit
(symplectic) Euler.

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations
from typing import Iterable

from ..types import Particle


def euler_step(particle: Particle, dt: float) -> None:
    """
    Advance a particle's position by dt at its current velocity.

    Args:
        particle: Particle to move (position replaced in-place).
        dt: Timestep in seconds. Zero leaves the particle where it is,
            a negative value moves it backwards.
    """
    particle.position = particle.position + particle.velocity * dt


def integrate_positions(particles: Iterable[Particle], dt: float) -> None:
    """Apply euler_step to every particle."""
    for p in particles:
        euler_step(p, dt)
