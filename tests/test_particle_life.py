# MIT License (see LICENSE)
import math

import numpy as np
import pytest

from particle_sim.constants import D_0, D_1, D_MAX
from particle_sim.particle_life import (
    InteractionTable,
    ParticleLifeForces,
    build_particle_life,
    interaction_response,
    kind_counts,
    spawn_particles,
)
from particle_sim.system import ParticleSystem
from particle_sim.types import Particle
from particle_sim.vector import vector


def test_response_bands():
    """
    r < D_0:          repulsion · (r - D_0)
    D_0 ≤ r < D_1:    attraction · (r - D_0)
    D_1 ≤ r < D_MAX:  attraction · (D_1 - D_0) · (D_MAX - r) / (D_MAX - D_1)
    r ≥ D_MAX:        0
    """
    coeffs = (0.5, 0.25)
    assert interaction_response(coeffs, 10.0) == 0.5 * (10.0 - D_0)
    assert interaction_response(coeffs, 45.0) == 0.25 * (45.0 - D_0)
    assert interaction_response(coeffs, 90.0) == 0.25 * (D_1 - D_0) * (D_MAX - 90.0) / (D_MAX - D_1)
    assert interaction_response(coeffs, D_MAX) == 0.0
    assert interaction_response(coeffs, 1e6) == 0.0


def test_response_is_continuous_at_band_edges():
    coeffs = (0.8, 0.3)
    for edge in (D_0, D_1, D_MAX):
        below = interaction_response(coeffs, edge - 1e-9)
        above = interaction_response(coeffs, edge + 1e-9)
        assert math.isclose(below, above, abs_tol=1e-6)


def test_close_particles_repel():
    assert interaction_response((1.0, 1.0), 5.0) < 0.0


def test_table_lookup_is_symmetric():
    table = InteractionTable({(0, 2): (0.1, 0.9)})
    assert table.get(0, 2) == (0.1, 0.9)
    assert table.get(2, 0) == (0.1, 0.9)
    assert table[(2, 0)] == (0.1, 0.9)
    assert (2, 0) in table
    assert (1, 1) not in table


def test_table_missing_pair_raises():
    table = InteractionTable({(0, 0): (1.0, 1.0)})
    with pytest.raises(KeyError, match="kinds 0 and 1"):
        table.get(0, 1)


def test_random_table_covers_all_pairs():
    kinds = 4
    table = InteractionTable.random(kinds, rng=1)
    assert len(table) == kinds * (kinds + 1) // 2
    for k0 in range(kinds):
        for k1 in range(kinds):
            repulsion, attraction = table.get(k0, k1)
            assert 0.0 <= repulsion < 1.0
            assert 0.0 <= attraction < 1.0


def test_random_table_is_seeded():
    a = InteractionTable.random(3, rng=42)
    b = InteractionTable.random(3, rng=np.random.default_rng(42))
    assert all(a.get(i, j) == b.get(i, j) for i in range(3) for j in range(3))


def test_external_force_drag_without_jitter():
    model = ParticleLifeForces(InteractionTable(), drag=0.5, randomness=0.0)
    p = Particle(props=0, mass=1.0, velocity=(2.0, -4.0))
    assert model.external_force(p, 0.1) == vector(-1.0, 2.0)


def test_jitter_is_bounded_and_reproducible():
    a = ParticleLifeForces(InteractionTable(), drag=0.0, randomness=2.0, rng=7)
    b = ParticleLifeForces(InteractionTable(), drag=0.0, randomness=2.0, rng=7)
    p = Particle(props=0, mass=1.0)
    for _ in range(50):
        fa = a.external_force(p, 0.1)
        fb = b.external_force(p, 0.1)
        assert fa == fb
        assert all(-2.0 <= c < 2.0 for c in fa)


def test_internal_force_uses_kinds_and_distance():
    table = InteractionTable({(0, 1): (0.5, 0.2)})
    model = ParticleLifeForces(table, randomness=0.0)
    a = Particle(props=0, mass=1.0, position=(0.0, 0.0))
    b = Particle(props=1, mass=1.0, position=(30.0, 40.0))  # distance 50
    assert math.isclose(model.internal_force(a, b, 0.1), 0.2 * (50.0 - D_0))
    assert math.isclose(model.internal_force(b, a, 0.1), 0.2 * (50.0 - D_0))


def test_missing_interaction_propagates_from_update():
    model = ParticleLifeForces(InteractionTable({(0, 0): (1.0, 1.0)}), randomness=0.0)
    particles = [
        Particle(props=0, mass=1.0, position=(0.0, 0.0)),
        Particle(props=1, mass=1.0, position=(10.0, 0.0)),
    ]
    system = ParticleSystem(model, particles)
    with pytest.raises(KeyError):
        system.update(0.1)


def test_bad_distance_bands():
    with pytest.raises(ValueError):
        ParticleLifeForces(InteractionTable(), d0=60.0, d1=30.0)


def test_spawn_particles():
    particles = spawn_particles(kinds=3, per_kind=5, extent=100.0, rng=0)
    assert len(particles) == 15
    assert kind_counts(particles) == {0: 5, 1: 5, 2: 5}
    assert [p.props for p in particles] == sorted(p.props for p in particles)
    for p in particles:
        assert 0.0 <= p.position.x < 100.0
        assert 0.0 <= p.position.y < 100.0
        assert p.velocity == vector(0.0, 0.0)
        assert p.mass == 1.0


def test_scene_is_deterministic_per_seed():
    a = build_particle_life(seed=3, kinds=3, per_kind=4)
    b = build_particle_life(seed=3, kinds=3, per_kind=4)
    for _ in range(5):
        a.update(1 / 60)
        b.update(1 / 60)
    for pa, pb in zip(a.particles(), b.particles()):
        assert pa.position == pb.position
        assert pa.velocity == pb.velocity


def test_scene_keeps_population():
    system = build_particle_life(seed=0, kinds=4, per_kind=5, extent=200.0)
    for _ in range(10):
        system.update(1 / 30)
    particles = system.particles()
    assert len(particles) == 20
    assert kind_counts(particles) == {0: 5, 1: 5, 2: 5, 3: 5}
    assert all(np.isfinite(np.asarray(p.position)).all() for p in particles)


def test_scene_forwards_system_options():
    system = build_particle_life(seed=1, kinds=2, per_kind=2, neighbours="preceding")
    assert system.neighbours == "preceding"
