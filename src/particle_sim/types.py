# MIT License (see LICENSE)
"""
Core type definitions for the particle simulation.

Defines Particle, the point mass the system advances. Motion follows
Newtonian mechanics for a point in 2D:
  - dx/dt = v
  - dv/dt = F/m
"""
from __future__ import annotations
import copy
import dataclasses
from dataclasses import dataclass
from typing import Any

from .vector import FixedVector, as_vector


@dataclass
class Particle:
    """
    A point mass with a caller-defined tag.

    Attributes:
        props: Opaque per-kind data (an int kind index in the particle life
               model). Deep-copied whenever the particle is cloned.
        mass: Mass, must be strictly positive. Division by mass is not
              guarded inside the force loop.
        position: Position [x, y].
        velocity: Velocity [vx, vy].

    Note:
        Position and velocity are converted to float64 FixedVectors on init,
        so tuples are accepted. Both are immutable values: updating a particle
        means assigning a new vector, never editing one in place.
    """
    props: Any
    mass: float
    position: FixedVector | tuple[float, float] = (0.0, 0.0)
    velocity: FixedVector | tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        self.mass = float(self.mass)
        self.position = as_vector(self.position, 2)
        self.velocity = as_vector(self.velocity, 2)

    @property
    def inv_mass(self) -> float:
        """Inverse mass (1/m)."""
        return 1.0 / self.mass

    @property
    def momentum(self) -> FixedVector:
        """Linear momentum m·v."""
        return self.velocity * self.mass

    def clone(self) -> "Particle":
        """Independent copy. Vectors are immutable and can be shared."""
        return dataclasses.replace(self, props=copy.deepcopy(self.props))
