"""Window container: a half-open index range paired with a payload.

The payload is usually a :class:`~winseq.view.SliceView` over the source
collection, but any value works, so a window can also carry a result computed
from its elements while keeping its original position::

    >>> w = Window(2, 5, [3, 4, 5])
    >>> w.map(sum)
    Window(start=2, end=5, value=12)
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .view import SliceView

V = TypeVar("V")
U = TypeVar("U")


@dataclass(frozen=True)
class Window(Generic[V]):
    """Immutable ``[start, end)`` range in a source collection plus a value.

    Attributes:
        start: Index of the first element covered by the window.
        end: One past the last covered index. ``start <= end`` always holds.
        value: Payload (a borrowed view, or anything derived from one).
    """

    start: int
    end: int
    value: V

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError(f"window bounds must be non-negative, got [{self.start}, {self.end})")
        if self.start > self.end:
            raise ValueError(f"window start {self.start} is past its end {self.end}")

    @property
    def span(self) -> int:
        """Width of the index range (``end - start``)."""
        return self.end - self.start

    def length(self) -> int:
        """Natural length of the payload (element count for view payloads)."""
        return len(self.value)

    def __len__(self) -> int:
        return self.length()

    def is_empty(self) -> bool:
        return self.length() == 0

    def borrow(self) -> "Window":
        """Same range, payload exposed read-only. Nothing is copied."""
        value = self.value
        if isinstance(value, SliceView):
            value = value.readonly()
        return Window(self.start, self.end, value)

    def borrow_mut(self) -> "Window":
        """Same range, payload exposed writable.

        Writes through a view payload land in the source collection.
        """
        value = self.value
        if isinstance(value, SliceView):
            value = value.writable_view()
        return Window(self.start, self.end, value)

    def map(self, f: Callable[[V], U]) -> "Window[U]":
        """Apply ``f`` to the value, keeping ``start`` and ``end``."""
        return Window(self.start, self.end, f(self.value))

    def flat_map(self, f: Callable[[V], "Window[U]"]) -> "Window[U]":
        """Apply ``f``, which returns a whole new Window.

        The result's range replaces this window's range; nothing of the
        original ``start``/``end`` is kept.
        """
        out = f(self.value)
        if not isinstance(out, Window):
            raise TypeError(f"flat_map function must return a Window, got {type(out).__name__}")
        return out

    def as_tuple(self) -> tuple[int, int, Any]:
        return self.start, self.end, self.value
