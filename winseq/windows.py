"""Lazy window generator that keeps the last, imperfect window.

Unlike ``range(0, n - size + 1, step)`` style windowing, a tail shorter than
``size`` is still emitted as the final window::

    >>> [w.as_tuple()[:2] for w in Windows([1, 2, 3, 4], 3, 2)]
    [(0, 3), (2, 4)]

The generator only stores a reference to the source plus an offset and a
length for the part not yet consumed, so no element is ever copied. Its
length is known up front, and :meth:`Windows.seek` / :meth:`Windows.last`
reach later windows without producing the ones before them.
"""
from __future__ import annotations
import logging
from typing import Any, Iterator

from .config import WindowConfig, check_geometry
from .view import SliceView
from .window import Window

LOGGER = logging.getLogger(__name__)


class Windows:
    """Iterator of :class:`Window` objects over a fixed-length collection.

    Args:
        elements: Finite indexable collection (list, tuple, bytes, str,
            ndarray, ...). Its length must not change while iterating.
        size: Requested window length, ``> 0``.
        step: Distance between window starts, ``0 < step <= size``.
    Raises:
        ValueError: If the size/step preconditions do not hold.
        TypeError: If size or step is not an int.
    """

    def __init__(self, elements: Any, size: int, step: int):
        check_geometry(size, step)
        self._source = elements
        self._source_len = len(elements)
        self._offset = 0
        self._remaining = self._source_len
        self.size = size
        self.step = step
        self._cursor = 0
        LOGGER.debug("windows over %d elements: size=%d step=%d", self._source_len, size, step)

    @classmethod
    def from_config(cls, elements: Any, config: WindowConfig) -> "Windows":
        return cls(elements, config.size, config.step)

    @property
    def cursor(self) -> int:
        """Start index ``advance()`` reports for the next window."""
        return self._cursor

    @property
    def remaining(self) -> int:
        """Number of source elements not yet consumed."""
        return self._remaining

    def length(self) -> int:
        """Exact number of windows left, computed without producing any."""
        if self._remaining == 0:
            return 0
        tail = max(0, self._remaining - self.size)
        # +1 for the window at the current front; the view is non-empty here
        return tail // self.step + (1 if tail % self.step else 0) + 1

    def __len__(self) -> int:
        return self.length()

    def __length_hint__(self) -> int:
        return self.length()

    def is_empty(self) -> bool:
        return self.length() == 0

    def _check_source(self) -> None:
        if len(self._source) != self._source_len:
            raise RuntimeError("source collection changed size during windowing")

    def _exhaust(self) -> None:
        self._offset += self._remaining
        self._remaining = 0

    def _view(self, start: int, length: int) -> SliceView:
        return SliceView(self._source, self._offset + start, length)

    def _consume(self, position: int, take: int) -> None:
        # drop everything up to position + step, or end iteration once the
        # window just emitted reached the end of the view
        if self._remaining - position > take:
            self._offset += position + self.step
            self._remaining -= position + self.step
        else:
            self._exhaust()

    def advance(self) -> Window | None:
        """Return the next window, or None once exhausted."""
        if self._remaining == 0:
            return None
        self._check_source()
        take = min(self.size, self._remaining)
        win = Window(self._cursor, self._cursor + take, self._view(0, take))
        self._consume(0, take)
        self._cursor += self.step
        return win

    def __iter__(self) -> Iterator[Window]:
        return self

    def __next__(self) -> Window:
        win = self.advance()
        if win is None:
            raise StopIteration
        return win

    def seek(self, n: int) -> Window | None:
        """Jump to the ``n``-th remaining window (0-based) and return it.

        The ``n`` windows before it are skipped without being built. The
        returned ``start``/``end`` and the new cursor are positions within
        the remaining view, so they equal the absolute indices only while
        nothing has been consumed yet. After the call, iteration continues
        with the window that follows. An out-of-range ``n`` exhausts the
        generator and returns None.
        """
        position = n * self.step
        last_position = (self.length() - 1) * self.step
        if n < 0 or position > last_position:
            if self._remaining:
                LOGGER.debug("seek(%d) past last window at %d; generator exhausted", n, last_position)
            self._exhaust()
            return None
        self._check_source()
        take = min(self.size, self._remaining - position)
        win = Window(position, position + take, self._view(position, take))
        self._consume(position, take)
        self._cursor = position + self.step
        return win

    def last(self) -> Window | None:
        """Return the final window without consuming anything.

        Like :meth:`seek`, the range is relative to the remaining view.
        """
        if self._remaining == 0:
            return None
        self._check_source()
        position = (self.length() - 1) * self.step
        return Window(position, self._remaining, self._view(position, self._remaining - position))

    def count(self) -> int:
        """Number of windows left. Consumes the generator without building them."""
        n = self.length()
        self._exhaust()
        return n

    def __repr__(self) -> str:
        return (f"Windows(size={self.size}, step={self.step}, "
                f"cursor={self._cursor}, remaining={self._remaining})")
