import numpy as np
import pytest

from particle_sim.types import Particle
from particle_sim.vector import FixedVector, vector


def test_tuples_become_float_vectors():
    p = Particle(props=3, mass=2, position=(1, 2), velocity=[0.5, -0.5])
    assert isinstance(p.position, FixedVector)
    assert isinstance(p.velocity, FixedVector)
    assert p.position.dtype == np.float64
    assert p.mass == 2.0
    assert p.inv_mass == 0.5
    assert p.momentum == vector(1.0, -1.0)


def test_defaults_at_rest_at_origin():
    p = Particle(props=None, mass=1.0)
    assert p.position == vector(0.0, 0.0)
    assert p.velocity == vector(0.0, 0.0)


def test_rejects_wrong_dimension():
    with pytest.raises(ValueError):
        Particle(props=0, mass=1.0, position=(1.0, 2.0, 3.0))


def test_clone_is_independent():
    """Props are deep-copied; changing the clone leaves the original alone."""
    p = Particle(props={"kind": 1, "tags": ["a"]}, mass=1.0, position=(1.0, 1.0))
    c = p.clone()

    c.props["tags"].append("b")
    c.velocity = c.velocity + vector(1.0, 0.0)
    c.position = vector(5.0, 5.0)

    assert p.props == {"kind": 1, "tags": ["a"]}
    assert p.velocity == vector(0.0, 0.0)
    assert p.position == vector(1.0, 1.0)
    assert c.mass == p.mass
