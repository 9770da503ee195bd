# MIT License (see LICENSE)
"""
"Particle life": a force model where particle kinds attract or repel each other.

Each particle carries an integer kind in `props`. For every pair of kinds an
InteractionTable stores two coefficients (repulsion, attraction), and the pair
force follows a piecewise response of the distance r between the particles:

    r < D_0            repulsion · (r - D_0)                        (< 0, push apart)
    D_0 ≤ r < D_1      attraction · (r - D_0)                       (rising pull)
    D_1 ≤ r < D_MAX    attraction · (D_1 - D_0) · (D_MAX - r) / (D_MAX - D_1)
    r ≥ D_MAX          0

On top of that every particle feels linear drag and a uniform random jitter.
All randomness comes from one explicit numpy Generator owned by the model, so
a run is fully determined by its seed.

Typical usage:
    from particle_sim.particle_life import build_particle_life

    system = build_particle_life(seed=7)
    for _ in range(600):
        system.update(1 / 60)
"""
from __future__ import annotations
import logging
from typing import Iterable, Mapping

import numpy as np

from .constants import (
    D_0, D_1, D_MAX,
    DEFAULT_KINDS, DEFAULT_PER_KIND, DEFAULT_EXTENT,
    DEFAULT_DRAG, DEFAULT_RANDOMNESS,
)
from .core.forces import ForceModel
from .system import ParticleSystem
from .types import Particle
from .vector import FixedVector

logger = logging.getLogger(__name__)

KindPair = tuple[int, int]


def _as_generator(rng: np.random.Generator | int | None) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


class InteractionTable:
    """
    Symmetric lookup of (repulsion, attraction) coefficients per kind pair.

    Only one orientation of a pair needs to be stored: looking up (a, b)
    falls back to (b, a).
    """

    def __init__(self, coefficients: Mapping[KindPair, tuple[float, float]] | None = None):
        self._coefficients: dict[KindPair, tuple[float, float]] = {}
        for pair, value in (coefficients or {}).items():
            self.set(pair[0], pair[1], value[0], value[1])

    @classmethod
    def random(cls, kinds: int, rng: np.random.Generator | int | None = None) -> "InteractionTable":
        """
        Table with uniform [0, 1) coefficients for every pair k0 ≤ k1.

        Args:
            kinds: Number of particle kinds.
            rng: Generator or seed driving the draws.
        """
        rng = _as_generator(rng)
        table = cls()
        for k0 in range(kinds):
            for k1 in range(k0, kinds):
                repulsion, attraction = rng.uniform(0.0, 1.0, size=2)
                table.set(k0, k1, float(repulsion), float(attraction))
        return table

    def set(self, k0: int, k1: int, repulsion: float, attraction: float) -> None:
        self._coefficients[(k0, k1)] = (float(repulsion), float(attraction))

    def get(self, k0: int, k1: int) -> tuple[float, float]:
        """
        Coefficients for the kind pair, in either orientation.

        Raises:
            KeyError: If neither (k0, k1) nor (k1, k0) has been defined.
        """
        value = self._coefficients.get((k0, k1))
        if value is None:
            value = self._coefficients.get((k1, k0))
        if value is None:
            raise KeyError(f"No interaction defined for kinds {k0} and {k1}")
        return value

    def __getitem__(self, pair: KindPair) -> tuple[float, float]:
        return self.get(pair[0], pair[1])

    def __contains__(self, pair: KindPair) -> bool:
        return pair in self._coefficients or (pair[1], pair[0]) in self._coefficients

    def __len__(self) -> int:
        return len(self._coefficients)


def interaction_response(
    coefficients: tuple[float, float],
    distance: float,
    d0: float = D_0,
    d1: float = D_1,
    d_max: float = D_MAX,
) -> float:
    """
    Piecewise pair magnitude at a given distance (see module docstring).

    The response is continuous at d0, d1 and d_max.
    """
    repulsion, attraction = coefficients
    if distance < d0:
        return repulsion * (distance - d0)
    if distance < d1:
        return attraction * (distance - d0)
    if distance < d_max:
        return attraction * (d1 - d0) * (d_max - distance) / (d_max - d1)
    return 0.0


class ParticleLifeForces(ForceModel):
    """
    Kind-based attraction/repulsion with drag and random jitter.

    Attributes:
        interactions: Coefficients per kind pair.
        drag: Linear drag coefficient; external force includes -drag·v.
        randomness: Half-width of the uniform jitter added to the external
                    force on each axis. Zero disables jitter.
        rng: Generator used for jitter.
        d0, d1, d_max: Distance bands of the pair response.
    """

    def __init__(
        self,
        interactions: InteractionTable,
        drag: float = DEFAULT_DRAG,
        randomness: float = DEFAULT_RANDOMNESS,
        rng: np.random.Generator | int | None = None,
        d0: float = D_0,
        d1: float = D_1,
        d_max: float = D_MAX,
    ):
        if not d0 < d1 < d_max:
            raise ValueError(f"Distance bands must satisfy d0 < d1 < d_max, got {d0}, {d1}, {d_max}")
        self.interactions = interactions
        self.drag = float(drag)
        self.randomness = float(randomness)
        self.rng = _as_generator(rng)
        self.d0 = d0
        self.d1 = d1
        self.d_max = d_max

    def jitter(self) -> FixedVector:
        """One uniform sample in [-randomness, randomness)² from the model's generator."""
        if self.randomness == 0.0:
            return FixedVector.zeros(2)
        r = self.randomness
        return FixedVector(self.rng.uniform(-r, r, size=2))

    def external_force(self, particle: Particle, delta_time: float) -> FixedVector:
        return -particle.velocity * self.drag + self.jitter()

    def internal_force(self, target: Particle, other: Particle, delta_time: float) -> float:
        coefficients = self.interactions.get(target.props, other.props)
        distance = (other.position - target.position).length()
        return interaction_response(coefficients, distance, self.d0, self.d1, self.d_max)


def spawn_particles(
    kinds: int,
    per_kind: int,
    extent: float,
    rng: np.random.Generator | int | None = None,
    mass: float = 1.0,
) -> list[Particle]:
    """
    Population of `per_kind` resting particles for each kind.

    Positions are uniform in [0, extent)². Particles are ordered by kind.
    """
    rng = _as_generator(rng)
    particles = []
    for kind in range(kinds):
        for _ in range(per_kind):
            position = rng.uniform(0.0, extent, size=2)
            particles.append(Particle(props=kind, mass=mass, position=position))
    return particles


def build_particle_life(
    seed: int | None = 0,
    kinds: int = DEFAULT_KINDS,
    per_kind: int = DEFAULT_PER_KIND,
    extent: float = DEFAULT_EXTENT,
    drag: float = DEFAULT_DRAG,
    randomness: float = DEFAULT_RANDOMNESS,
    **system_options,
) -> ParticleSystem:
    """
    Ready-to-run particle life system.

    One seeded Generator draws the population, then the interaction table,
    then drives the jitter during the run, so equal seeds give equal runs.

    Args:
        seed: Seed for the shared Generator.
        kinds: Number of particle kinds.
        per_kind: Particles per kind.
        extent: Side of the square spawn region.
        drag: Linear drag coefficient.
        randomness: Jitter half-width.
        **system_options: Forwarded to ParticleSystem (neighbours, profiler, ...).
    """
    rng = np.random.default_rng(seed)
    particles = spawn_particles(kinds, per_kind, extent, rng)
    table = InteractionTable.random(kinds, rng)
    model = ParticleLifeForces(table, drag=drag, randomness=randomness, rng=rng)
    logger.info("Particle life scene: %d kinds x %d particles, seed=%s", kinds, per_kind, seed)
    return ParticleSystem(model, particles, **system_options)


def kind_counts(particles: Iterable[Particle]) -> dict[int, int]:
    """Number of particles of each kind."""
    counts: dict[int, int] = {}
    for p in particles:
        counts[p.props] = counts.get(p.props, 0) + 1
    return counts
