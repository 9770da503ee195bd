# MIT License (see LICENSE)
"""
The particle system and its step loop.

ParticleSystem owns two particle buffers and a force model. Each call to
update(dt) reads only the current buffer and writes the next one:

    1. Force resolution: for every particle, sum the velocity change
       contributed by each neighbour (calculate_delta_velocity) and store a
       clone with the new velocity in the next buffer.
    2. Integration: move every particle in the next buffer by v·dt.
    3. Swap: empty the stale buffer and exchange the two roles.

Because phase 1 never sees a half-updated neighbour, the result does not
depend on iteration order. The pair loop is a naive O(N²) pass with no
broadphase.

Structure:
    - User builds a ForceModel and a list of Particles.
    - User creates ParticleSystem(model, particles).
    - User calls system.update(dt) in a loop and reads system.particles().
"""
from __future__ import annotations
import contextlib
import logging
import math
from collections.abc import Sequence
from typing import Iterable

from .constants import DEGENERATE_SQR_DISTANCE
from .core.forces import ForceModel
from .core.integrators import integrate_positions
from .profiler import Profiler
from .types import Particle
from .util import check_mass_enabled
from .vector import FixedVector

logger = logging.getLogger(__name__)

# "all": every other particle is a neighbour.
# "preceding": the loop stops at the particle itself, so only lower indices
#              contribute. Kept for reproducing old runs; not momentum-balanced.
NEIGHBOUR_MODES = ("all", "preceding")


def calculate_delta_velocity(
    model: ForceModel,
    p0: Particle,
    p1: Particle,
    delta_time: float,
) -> FixedVector:
    """
    Velocity change of p0 caused by its interaction with p1 over one step.

    The pair is split along the unit normal n (p0 → p1) and the tangent
    t = perp(n):

        dv_t = (f0·t / m0) · dt
        dv_n = ((n0 + n1)/(m0 + m1) - n1/m1 + n0/m0 + f10·(1/m0 + 1/m1)) · dt / 2

    where f0, f1 are the external forces on p0 and p1, n0 = f0·n, n1 = f1·n
    and f10 is the internal pair magnitude. The first normal term is the
    shared centre-of-mass acceleration; the halving balances it against the
    mirrored (p1, p0) evaluation.

    Args:
        model: Force model providing external_force and internal_force.
        p0: Particle whose velocity change is computed.
        p1: Neighbour particle.
        delta_time: Step length in seconds.

    Returns:
        normal·dv_n + tangent·dv_t, or the exact zero vector when the two
        positions are closer than sqrt(DEGENERATE_SQR_DISTANCE).
    """
    delta = p1.position - p0.position
    sqr_len = delta.square_length()
    if sqr_len < DEGENERATE_SQR_DISTANCE:
        return FixedVector.zeros(2)

    normal = delta / math.sqrt(sqr_len)
    tangent = normal.perp()

    f0 = model.external_force(p0, delta_time)
    f1 = model.external_force(p1, delta_time)
    f10 = model.internal_force(p0, p1, delta_time)

    dv_t = f0.dot(tangent) / p0.mass * delta_time

    n0 = f0.dot(normal)
    n1 = f1.dot(normal)
    im0 = 1.0 / p0.mass
    im1 = 1.0 / p1.mass
    dvc = (n0 + n1) / (p0.mass + p1.mass)
    dv_n = (dvc - n1 * im1 + n0 * im0 + f10 * (im0 + im1)) * delta_time / 2.0

    return normal * dv_n + tangent * dv_t


class _StepForceCache(ForceModel):
    """
    Memoizes external_force per particle for the duration of one step.

    Particles are keyed by identity; they all live in the current buffer,
    which is not modified while the step runs.
    """

    def __init__(self, model: ForceModel) -> None:
        self._model = model
        self._external: dict[int, FixedVector] = {}

    def external_force(self, particle: Particle, delta_time: float) -> FixedVector:
        key = id(particle)
        force = self._external.get(key)
        if force is None:
            force = self._model.external_force(particle, delta_time)
            self._external[key] = force
        return force

    def internal_force(self, target: Particle, other: Particle, delta_time: float) -> float:
        return self._model.internal_force(target, other, delta_time)


class ParticleView(Sequence):
    """
    Read-only sequence over the current particle buffer.

    The view reflects the buffer it was taken from and is only meaningful
    until the next ParticleSystem.update(). The particles it yields belong to
    the system and must not be modified.
    """

    __slots__ = ("_buffer",)

    def __init__(self, buffer: list[Particle]) -> None:
        self._buffer = buffer

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._buffer[index])
        return self._buffer[index]

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"ParticleView({len(self._buffer)} particles)"


class ParticleSystem:
    """
    Double-buffered N-body particle simulation.

    Attributes:
        force_model: Policy supplying external and internal forces.
        neighbours: Pair iteration mode, "all" (default) or "preceding".
        cache_external_forces: Evaluate external_force once per particle per
                               step instead of once per pair evaluation.
                               Stochastic models then draw one sample per
                               particle per step.
        profiler: Optional Profiler timing the forces/integrate/swap phases.
        time: Total simulated time.
        steps: Number of completed update() calls.
    """

    def __init__(
        self,
        force_model: ForceModel,
        particles: Iterable[Particle],
        *,
        neighbours: str = "all",
        cache_external_forces: bool = False,
        check_mass: bool | None = None,
        profiler: Profiler | None = None,
    ) -> None:
        """
        Build a system from a force model and an initial population.

        Args:
            force_model: Any object with external_force/internal_force.
            particles: Initial particles. Their count is fixed for the
                       lifetime of the system.
            neighbours: Pair iteration mode, see NEIGHBOUR_MODES.
            cache_external_forces: See class attributes.
            check_mass: Reject non-positive masses up front. Defaults to the
                        PARTICLE_SIM_CHECK_MASS environment flag (on).
            profiler: Optional Profiler instance.

        Raises:
            ValueError: Unknown neighbour mode, or a non-positive mass while
                        mass checking is enabled.
            TypeError: An element of `particles` is not a Particle.
        """
        if neighbours not in NEIGHBOUR_MODES:
            raise ValueError(f"Unknown neighbour mode: {neighbours}")
        if check_mass is None:
            check_mass = check_mass_enabled()

        current = list(particles)
        for i, p in enumerate(current):
            if not isinstance(p, Particle):
                raise TypeError(f"Expected Particle at index {i}, got {type(p).__name__}")
            if check_mass and not p.mass > 0:
                raise ValueError(f"Particle {i} has non-positive mass {p.mass}")

        self.force_model = force_model
        self.neighbours = neighbours
        self.cache_external_forces = cache_external_forces
        self.profiler = profiler
        self.time = 0.0
        self.steps = 0

        self._current: list[Particle] = current
        self._next: list[Particle] = []

        logger.info(
            "ParticleSystem created with %d particles (neighbours=%s, cache_external_forces=%s)",
            len(current), neighbours, cache_external_forces,
        )

    def __len__(self) -> int:
        return len(self._current)

    def particles(self) -> ParticleView:
        """Read-only view of the current state, valid until the next update()."""
        return ParticleView(self._current)

    def calculate_delta_velocity(self, p0: Particle, p1: Particle, delta_time: float) -> FixedVector:
        """Velocity change of p0 due to p1 under this system's force model."""
        return calculate_delta_velocity(self.force_model, p0, p1, delta_time)

    def _section(self, name: str):
        if self.profiler is None:
            return contextlib.nullcontext()
        return self.profiler.section(name)

    def _resolve_forces(self, source: list[Particle], target: list[Particle], dt: float) -> None:
        """Fill `target` with clones of `source` carrying updated velocities."""
        model = self.force_model
        if self.cache_external_forces:
            model = _StepForceCache(model)
        stop_at_self = self.neighbours == "preceding"

        for i, p0 in enumerate(source):
            dv = FixedVector.zeros(2)
            for j, p1 in enumerate(source):
                if i == j:
                    if stop_at_self:
                        break
                    continue
                dv = dv + calculate_delta_velocity(model, p0, p1, dt)

            clone = p0.clone()
            clone.velocity = clone.velocity + dv
            target.append(clone)

    def update(self, delta_time: float) -> None:
        """
        Advance the simulation by one step of length delta_time.

        delta_time may be zero (nothing changes) or negative (the step runs
        backwards). NaN or inf produced by invalid inputs is not trapped and
        propagates into particle state.
        """
        dt = float(delta_time)
        source = self._current
        target = self._next
        target.clear()

        with self._section("forces"):
            self._resolve_forces(source, target, dt)

        with self._section("integrate"):
            integrate_positions(target, dt)

        with self._section("swap"):
            source.clear()
            self._current, self._next = target, source

        self.time += dt
        self.steps += 1
        logger.debug("step %d: dt=%g, t=%g", self.steps, dt, self.time)
