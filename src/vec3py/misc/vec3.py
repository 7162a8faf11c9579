from __future__ import annotations

import math
from logging import getLogger
from numbers import Integral
from typing import TYPE_CHECKING, Generic, Iterator, Sequence

import numpy as np
from numpy import ndarray

from vec3py.logging import LOGGER_ID, Vec3ValueError
from vec3py.types import T

if TYPE_CHECKING:
    from vec3py.types import Float3

logger = getLogger(f"{LOGGER_ID}.vec3")


def _div(a, b):
    if isinstance(a, Integral) and isinstance(b, Integral):
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q
    return a / b


class vec3(Generic[T]):
    """
    A class for storing vectors in :math:`R^3`, generic over the element type of its components.
    Components can be of any type supporting the arithmetic a given operation needs, e.g. ``int``,
    ``float``, ``fractions.Fraction`` or NumPy scalars.

    Binary operators return new vectors and leave their operands untouched. The augmented
    assignment operators (``+=``, ``-=``, ``*=``, ``/=``, ``//=``) modify the vector in place.
    Use :meth:`copy` to obtain an independent vector before mutating a shared one.
    Since vectors are mutable they are unhashable.

    ``NumPy`` scalars on the left of ``*`` yield a vec3 rather than an array.
    """

    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, x: T, y: T, z: T):
        """
        Constructs an instance of vec3. The components are stored as given.

        Args:
            x: The vector x-coordinate.
            y: The vector y-coordinate.
            z: The vector z-coordinate.
        """
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def from_sequence(cls, seq: Sequence[T] | ndarray) -> vec3[T]:
        """
        Constructs a vector from a sequence of three components (a tuple, a list or a ``NumPy`` array).

        Args:
            seq: The components in the order ``(x, y, z)``.

        Returns:
            The new vector.
        """
        if len(seq) != 3:
            logger.debug(f"Refusing to build a vector from {len(seq)} components.")
            raise Vec3ValueError(f"A vec3 needs exactly 3 components, got {len(seq)}.")
        return cls(seq[0], seq[1], seq[2])

    def __eq__(self, b: object) -> bool:
        if not isinstance(b, vec3):
            return NotImplemented
        return self.x == b.x and self.y == b.y and self.z == b.z

    def __add__(self, b: vec3[T]) -> vec3[T]:
        """
        Vector addition.

        Args:
            b: A given vector to be added to this vector.

        Returns:
            The sum of the two vectors.
        """
        if not isinstance(b, vec3):
            return NotImplemented
        return vec3(self.x + b.x, self.y + b.y, self.z + b.z)

    def __iadd__(self, b: vec3[T]) -> vec3[T]:
        """
        In-place vector addition. This vector is overwritten with the sum.
        """
        if not isinstance(b, vec3):
            return NotImplemented
        self.x, self.y, self.z = self.x + b.x, self.y + b.y, self.z + b.z
        return self

    def __sub__(self, b: vec3[T]) -> vec3[T]:
        """
        Vector subtraction.

        Args:
            b: A given vector to be subtracted from this vector.

        Returns:
            The difference of the two vectors.
        """
        if not isinstance(b, vec3):
            return NotImplemented
        return vec3(self.x - b.x, self.y - b.y, self.z - b.z)

    def __isub__(self, b: vec3[T]) -> vec3[T]:
        """
        In-place vector subtraction. This vector is overwritten with the difference.
        """
        if not isinstance(b, vec3):
            return NotImplemented
        self.x, self.y, self.z = self.x - b.x, self.y - b.y, self.z - b.z
        return self

    def __mul__(self, b):
        """
        Dot product if ``b`` is a vector, scalar multiplication otherwise.

        Args:
            b: A given vector, or a scalar value to be multiplied to this vector (from either left or right).

        Returns:
            The dot product (a scalar value) or this vector multiplied by the given scalar value.
        """
        if isinstance(b, vec3):
            return self.dot(b)
        return vec3(self.x * b, self.y * b, self.z * b)

    def __rmul__(self, b: T) -> vec3[T]:
        return vec3(b * self.x, b * self.y, b * self.z)

    def __imul__(self, b: T) -> vec3[T]:
        """
        In-place scalar multiplication. This vector is overwritten with the product.
        """
        if isinstance(b, vec3):
            raise TypeError("In-place multiplication of two vectors is not supported, use dot() instead.")
        self.x, self.y, self.z = self.x * b, self.y * b, self.z * b
        return self

    def __truediv__(self, b: T) -> vec3[T]:
        """
        Scalar division. Integer components divided by an integer stay integers, truncated
        toward zero. The divisor is not checked, so division by zero behaves as it does
        for the component type (``ZeroDivisionError`` for Python numbers, ``inf``/``nan`` for
        ``NumPy`` floats).

        Args:
            b: A given scalar value by which to divide this vector.

        Returns:
            This vector divided by the given scalar value.
        """
        if isinstance(b, vec3):
            return NotImplemented
        return vec3(_div(self.x, b), _div(self.y, b), _div(self.z, b))

    def __itruediv__(self, b: T) -> vec3[T]:
        """
        In-place scalar division. This vector is overwritten with the quotient.
        """
        if isinstance(b, vec3):
            return NotImplemented
        self.x, self.y, self.z = _div(self.x, b), _div(self.y, b), _div(self.z, b)
        return self

    def __floordiv__(self, b: T) -> vec3[T]:
        """
        Scalar floor division, rounding toward negative infinity.

        Args:
            b: A given scalar value by which to divide this vector.

        Returns:
            This vector floor-divided by the given scalar value.
        """
        if isinstance(b, vec3):
            return NotImplemented
        return vec3(self.x // b, self.y // b, self.z // b)

    def __ifloordiv__(self, b: T) -> vec3[T]:
        """
        In-place scalar floor division. This vector is overwritten with the quotient.
        """
        if isinstance(b, vec3):
            return NotImplemented
        self.x, self.y, self.z = self.x // b, self.y // b, self.z // b
        return self

    def __getitem__(self, n: int) -> T:
        """
        Returns the n-th element of the vector, starting by zero.

        Args:
            n: The index of the element to return.

        Returns:
            The vector element at n-th index.
        """
        if n == 0:
            return self.x
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        raise IndexError(f"vec3 does not have an element at index {n}.")

    def __iter__(self) -> Iterator[T]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __copy__(self) -> vec3[T]:
        return vec3(self.x, self.y, self.z)

    def __repr__(self) -> str:
        return f"vec3({self.x!r}, {self.y!r}, {self.z!r})"

    def copy(self) -> vec3[T]:
        """
        Returns:
            An independent vector with the same components.
        """
        return self.__copy__()

    def dot(self, b: vec3[T]) -> T:
        """
        The dot product between this vector and a given vector.

        Args:
            b: The given vector.

        Returns:
            The dot product between the two vectors (a scalar value).
        """
        return self.x * b.x + self.y * b.y + self.z * b.z

    def magnitude(self) -> float:
        """
        The magnitude of this vector, same as :meth:`l2_norm`.

        Returns:
            The magnitude of this vector (a scalar value).
        """
        return self.l2_norm()

    def l2_norm(self) -> float:
        """
        The :math:`L^2` (Euclidean) norm of this vector, :math:`\\sqrt{x^2 + y^2 + z^2}`.

        Note: the components are squared before the root is taken, which may lose precision
        for very large or very small components.

        Returns:
            The :math:`L^2` norm of this vector (a scalar value).
        """
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def as_tuple(self) -> Float3:
        """
        Returns:
            The components as an ``(x, y, z)`` tuple.
        """
        return (self.x, self.y, self.z)

    def as_array(self, dtype=None) -> ndarray:
        """
        Converts this vector to a ``NumPy`` array.

        Args:
            dtype: The data type of the array, optional. Inferred from the components by default.

        Returns:
            The components as a one-dimensional array of length 3.
        """
        return np.array(self.as_tuple(), dtype=dtype)
