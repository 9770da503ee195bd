# MIT License (see LICENSE)
"""
Fixed-length numeric vectors.

FixedVector is the single vector type used for every position, velocity and
force in the simulation. Its size N is fixed when the vector is built and the
underlying storage is a read-only numpy array, so a vector behaves as a value:
arithmetic always returns a new vector and copies never share state.

The element type follows numpy's dtype rules. Particle state is always
float64; integer vectors are allowed for general use, and true division
promotes them to float just like numpy does.

Example:
    from particle_sim.vector import vector

    a = vector(1.0, 2.0)
    b = vector(3.0, -1.0)
    (a + b) * 0.5        # FixedVector([2.0, 0.5])
    a.dot(b)             # 1.0
    b.normalized()       # unit vector along b
"""
from __future__ import annotations
import math
import numbers
from typing import Iterable, Iterator

import numpy as np

from .util import f64


class FixedVector:
    """
    Immutable vector of exactly N scalar components.

    Elementwise operators require both operands to have the same size. Python
    has no static size parameter, so mismatches are reported at run time with
    a ValueError rather than being ruled out by the type.

    Attributes:
        size: Number of components (N).
        dtype: numpy dtype of the components (T).
    """

    __slots__ = ("_data",)

    # Keep numpy scalars from broadcasting over us: `np.float64(2) * v`
    # must fall through to __rmul__ and stay a FixedVector.
    __array_ufunc__ = None

    def __init__(self, components: Iterable | np.ndarray, dtype=None):
        if isinstance(components, FixedVector):
            data = np.array(components._data, dtype=dtype)
        elif isinstance(components, np.ndarray):
            data = np.array(components, dtype=dtype)
        else:
            data = np.array(tuple(components), dtype=dtype)
        if data.ndim != 1:
            raise ValueError(f"FixedVector needs a flat sequence, got shape {data.shape}")
        data.flags.writeable = False
        self._data = data

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "FixedVector":
        """Adopt a freshly computed array without copying it."""
        obj = cls.__new__(cls)
        data.flags.writeable = False
        obj._data = data
        return obj

    @classmethod
    def from_iter(cls, items: Iterable, size: int, dtype=None) -> "FixedVector":
        """
        Build a vector from an iterable that must yield exactly `size` items.

        Raises:
            ValueError: If the iterable yields fewer or more items.
        """
        collected = []
        for item in items:
            if len(collected) == size:
                raise ValueError(f"Expected {size} components, got more")
            collected.append(item)
        if len(collected) != size:
            raise ValueError(f"Expected {size} components, got {len(collected)}")
        return cls(collected, dtype=dtype)

    @classmethod
    def zeros(cls, size: int, dtype=np.float64) -> "FixedVector":
        """Zero vector of the given size."""
        return cls._wrap(np.zeros(size, dtype=dtype))

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self._data.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def x(self):
        return self._data[0].item()

    @property
    def y(self):
        return self._data[1].item()

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index):
        item = self._data[index]
        if isinstance(item, np.ndarray):
            return FixedVector._wrap(item.copy())
        return item.item()

    def __iter__(self) -> Iterator:
        return iter(self._data.tolist())

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._data, dtype=dtype)

    def tolist(self) -> list:
        return self._data.tolist()

    def to_array(self) -> np.ndarray:
        """Writable copy of the components."""
        return self._data.copy()

    def __repr__(self) -> str:
        return f"FixedVector({self._data.tolist()})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, FixedVector):
            return NotImplemented
        if other.size != self.size:
            return False
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash(tuple(self._data.tolist()))

    def __copy__(self) -> "FixedVector":
        return self

    def __deepcopy__(self, memo) -> "FixedVector":
        return self

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _require_same_size(self, other: "FixedVector") -> None:
        if other.size != self.size:
            raise ValueError(f"Vector size mismatch: {self.size} != {other.size}")

    def __add__(self, other):
        if not isinstance(other, FixedVector):
            return NotImplemented
        self._require_same_size(other)
        return FixedVector._wrap(self._data + other._data)

    def __sub__(self, other):
        if not isinstance(other, FixedVector):
            return NotImplemented
        self._require_same_size(other)
        return FixedVector._wrap(self._data - other._data)

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        return FixedVector._wrap(self._data * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        """
        Divide every component by a scalar.

        Division by zero is not trapped: float components become inf or nan
        exactly as numpy computes them.
        """
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        with np.errstate(divide="ignore", invalid="ignore"):
            return FixedVector._wrap(self._data / scalar)

    def __neg__(self) -> "FixedVector":
        return FixedVector._wrap(-self._data)

    def dot(self, other: "FixedVector"):
        """Sum of elementwise products, as a Python scalar."""
        self._require_same_size(other)
        return self._data.dot(other._data).item()

    def square_length(self):
        """Squared magnitude (self · self). Avoids the sqrt."""
        return self.dot(self)

    def length(self) -> float:
        """Euclidean magnitude."""
        return math.sqrt(self.square_length())

    def normalized(self) -> "FixedVector":
        """
        Unit vector in the same direction.

        A zero vector has no direction; its components come back as nan.
        Callers that can see coincident points guard before calling.
        """
        return self / self.length()

    def perp(self) -> "FixedVector":
        """
        Rotate a 2D vector 90° counterclockwise: (x, y) → (-y, x).

        This is the 2D analogue of crossing the z-axis with the vector.
        """
        if self.size != 2:
            raise ValueError(f"perp() is only defined for 2D vectors, got size {self.size}")
        return FixedVector._wrap(np.array([-self._data[1], self._data[0]]))

    def allclose(self, other: "FixedVector", rtol: float = 1e-9, atol: float = 1e-12) -> bool:
        """Componentwise comparison within floating tolerance."""
        self._require_same_size(other)
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))


def vector(*components, dtype=None) -> FixedVector:
    """
    Literal-style constructor: vector(1.0, 2.0) → FixedVector([1.0, 2.0]).
    """
    return FixedVector(components, dtype=dtype)


def as_vector(value, size: int = 2) -> FixedVector:
    """
    Coerce a vector, tuple, list or array into a float64 FixedVector.

    Used for particle positions and velocities so callers can pass plain
    tuples. An existing float64 vector of the right size is returned as is.

    Raises:
        ValueError: If the value does not have exactly `size` components.
    """
    if isinstance(value, FixedVector) and value.dtype == np.float64:
        vec = value
    else:
        vec = FixedVector._wrap(f64(value))
    if vec._data.ndim != 1 or vec.size != size:
        raise ValueError(f"Expected a vector of size {size}, got {vec.tolist()!r}")
    return vec
