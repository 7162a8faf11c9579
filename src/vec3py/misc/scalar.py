from __future__ import annotations

from typing import Generic

from vec3py.types import T


class Scalar(Generic[T]):
    """
    A thin holder for a single value of the element type. It carries no arithmetic.
    """

    def __init__(self, val: T):
        self.val = val

    def __eq__(self, b: object) -> bool:
        if not isinstance(b, Scalar):
            return NotImplemented
        return self.val == b.val

    __hash__ = None

    def __repr__(self) -> str:
        return f"Scalar({self.val!r})"
