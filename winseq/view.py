"""Borrowed, copy-free views over an indexable collection.

A :class:`SliceView` is the triple ``(source, offset, length)``. It refers to
the caller's collection instead of slicing it, so building one never copies
elements. The view must not outlive (or survive a resize of) its source.
"""
from __future__ import annotations
from collections.abc import Iterable, Sized
from typing import Any, Iterator

import numpy as np


class SliceView:
    """Contiguous window ``source[offset:offset + length]`` without copying.

    Args:
        source: Any indexable collection with ``len()`` (list, tuple, str,
            bytes, ndarray, ...).
        offset: Index of the first element of the view in ``source``.
        length: Number of elements covered by the view.
        writable: If True, ``view[i] = v`` writes through to ``source``.
    """

    __slots__ = ("_source", "_offset", "_length", "_writable")

    def __init__(self, source: Any, offset: int = 0, length: int | None = None, writable: bool = False):
        n = len(source)
        if length is None:
            length = n - offset
        if offset < 0 or length < 0 or offset + length > n:
            raise ValueError(f"view [{offset}, {offset + length}) out of bounds for length {n}")
        self._source = source
        self._offset = offset
        self._length = length
        self._writable = writable

    @property
    def source(self) -> Any:
        return self._source

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def writable(self) -> bool:
        return self._writable

    def readonly(self) -> "SliceView":
        """Same range, writes disabled."""
        return SliceView(self._source, self._offset, self._length, writable=False)

    def writable_view(self) -> "SliceView":
        """Same range, writes forwarded to the source."""
        return SliceView(self._source, self._offset, self._length, writable=True)

    def __len__(self) -> int:
        return self._length

    def _index(self, i: int) -> int:
        if i < 0:
            i += self._length
        if not 0 <= i < self._length:
            raise IndexError("view index out of range")
        return self._offset + i

    def __getitem__(self, key):
        if isinstance(key, slice):
            start, stop, stride = key.indices(self._length)
            if stride == 1:
                return SliceView(self._source, self._offset + start, max(0, stop - start), self._writable)
            return [self._source[self._offset + i] for i in range(start, stop, stride)]
        if isinstance(key, tuple) and isinstance(self._source, np.ndarray):
            return self.to_array()[key]
        return self._source[self._index(key)]

    def __setitem__(self, key, value) -> None:
        """Write through to the source.

        ndarray sources accept any numpy key (ints, slices, tuples), applied
        relative to the view. Other sources take ints, or slices whose
        assigned values match the slice length; a view never resizes its source.
        """
        if not self._writable:
            raise TypeError("view is read-only; use Window.borrow_mut() for a writable view")
        if isinstance(self._source, np.ndarray):
            self.to_array()[key] = value
            return
        if isinstance(key, slice):
            idx = range(*key.indices(self._length))
            values = list(value)
            if len(values) != len(idx):
                raise ValueError(f"cannot assign {len(values)} values to a view slice of length {len(idx)}")
            for i, v in zip(idx, values):
                self._source[self._offset + i] = v
            return
        self._source[self._index(key)] = value

    def __iter__(self) -> Iterator:
        src = self._source
        for i in range(self._offset, self._offset + self._length):
            yield src[i]

    def __eq__(self, other) -> bool:
        # element-wise against any sized iterable (list, tuple, bytes, another view)
        if not (isinstance(other, Sized) and isinstance(other, Iterable)):
            return NotImplemented
        if len(other) != self._length:
            return False
        if isinstance(self._source, np.ndarray):
            # rows of a multi-dimensional source are arrays themselves
            theirs = other.to_array() if isinstance(other, SliceView) else np.asarray(other)
            return bool(np.array_equal(self.to_array(), theirs))
        return all(bool(a == b) for a, b in zip(self, other))

    __hash__ = None

    def materialize(self):
        """Return ``source[offset:offset + length]`` in the source's own type.

        For ndarray sources the result is a numpy view; other sources return
        their usual slice copy.
        """
        return self._source[self._offset:self._offset + self._length]

    def to_array(self, dtype=None) -> np.ndarray:
        """Return the viewed elements as a numpy array (zero-copy for ndarrays)."""
        if isinstance(self._source, np.ndarray):
            out = self._source[self._offset:self._offset + self._length]
            return out if dtype is None else out.astype(dtype, copy=False)
        return np.asarray(list(self), dtype=dtype)

    def __repr__(self) -> str:
        return f"SliceView({list(self)!r}, offset={self._offset})"
