# MIT License (see LICENSE)
"""
Small helpers shared across the package.

Provides float64 array conversion for vector storage and the environment
switches that tune runtime checks without code changes.
"""
from __future__ import annotations
import os

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets callers pass tuples or lists wherever a vector is expected.
    """
    return np.array(x, dtype=np.float64)


def env_flag(name: str, default: bool = True) -> bool:
    """
    Read a boolean switch from the environment.

    "0", "false", "no" and "off" (any case) turn the flag off, any other
    non-empty value turns it on. An unset or empty variable gives `default`.
    """
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw not in ("0", "false", "no", "off")


def check_mass_enabled() -> bool:
    """Check if particle masses are validated when a system is built."""
    return env_flag("PARTICLE_SIM_CHECK_MASS", default=True)
