from __future__ import annotations

from typing import Tuple, TypeVar

# these empty comments are because of the autodocumentation

Float3 = Tuple[float, float, float]
""
T = TypeVar("T")
"""
Element type of a vector or scalar. No bound is imposed by the containers
themselves; each operation needs only what its arithmetic uses.
"""
