# MIT License (see LICENSE)
"""
Force model interface for the particle system.

A ForceModel is the caller's policy for how particles push on each other. The
system asks it two questions while resolving a step:

- external_force(p, dt): the force acting on one particle on its own (drag,
  jitter, uniform fields). Returned as a 2D vector.
- internal_force(target, other, dt): the signed magnitude of the pair
  interaction along the line from target to other. Positive values pull
  target toward other, negative values push it away.

Both are called synchronously from the O(N²) pair loop, so implementations
should be cheap and must not block.
"""
from __future__ import annotations
from abc import ABC, abstractmethod

from ..types import Particle
from ..vector import FixedVector, as_vector


class ForceModel(ABC):
    """
    Abstract base class for force models.

    Subclasses implement the two force queries. The system only relies on
    the method names, so any object providing them can be used instead.
    """

    @abstractmethod
    def external_force(self, particle: Particle, delta_time: float) -> FixedVector:
        """
        Force acting on a single particle, independent of its neighbours.

        Args:
            particle: The particle being evaluated.
            delta_time: Length of the current step in seconds.
        """
        ...

    @abstractmethod
    def internal_force(self, target: Particle, other: Particle, delta_time: float) -> float:
        """
        Pairwise interaction magnitude along target → other.

        Args:
            target: The particle whose velocity change is being computed.
            other: The neighbour it interacts with.
            delta_time: Length of the current step in seconds.
        """
        ...


class NoForces(ForceModel):
    """Model with no forces at all. Particles coast at constant velocity."""

    def external_force(self, particle: Particle, delta_time: float) -> FixedVector:
        return FixedVector.zeros(2)

    def internal_force(self, target: Particle, other: Particle, delta_time: float) -> float:
        return 0.0


class ConstantForces(ForceModel):
    """
    The same external force on every particle and the same interaction
    magnitude for every pair.

    Handy for analytic checks: with external=(0, 0) the pair term is
    symmetric, so equal masses receive equal and opposite velocity changes.
    """

    def __init__(self, external: FixedVector | tuple[float, float] = (0.0, 0.0), internal: float = 0.0):
        self.external = as_vector(external, 2)
        self.internal = float(internal)

    def external_force(self, particle: Particle, delta_time: float) -> FixedVector:
        return self.external

    def internal_force(self, target: Particle, other: Particle, delta_time: float) -> float:
        return self.internal
