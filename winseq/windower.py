"""Capability for collections that can produce windows over themselves."""
from __future__ import annotations
from collections.abc import Sequence
from functools import singledispatch
from typing import Protocol, runtime_checkable

import numpy as np

from .windows import Windows


@runtime_checkable
class Windower(Protocol):
    """A collection that can hand out a window generator over itself."""
    def into_windows(self, size: int, step: int) -> Windows: ...


@singledispatch
def windows(collection, size: int, step: int) -> Windows:
    """Build a :class:`Windows` generator for ``collection``.

    Args:
        collection: Sequence, 1D-or-higher ndarray (windows run along axis 0)
            or any object implementing :class:`Windower`.
        size: Window length.
        step: Distance between window starts.
    Raises:
        TypeError: If the collection type has no windowing support.
    """
    if isinstance(collection, Windower):
        return collection.into_windows(size, step)
    raise TypeError(f"cannot window objects of type {type(collection).__name__}")


@windows.register
def _(collection: Sequence, size: int, step: int) -> Windows:
    return Windows(collection, size, step)


@windows.register
def _(collection: np.ndarray, size: int, step: int) -> Windows:
    if collection.ndim == 0:
        raise TypeError("cannot window a 0-d array")
    return Windows(collection, size, step)
