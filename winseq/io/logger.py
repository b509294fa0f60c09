"""CSV logging utilities for saving emitted windows."""
from __future__ import annotations
import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

from ..window import Window


@dataclass
class WindowCSVLogger:
    """Lightweight CSV logger that writes one row per window.

    Columns are ``start``, ``end``, ``length`` and, when ``value_format`` is
    given, ``value`` holding ``value_format(window.value)``.
    """
    path: Path
    value_format: Callable[[object], object] | None = None
    append: bool = False

    def __post_init__(self):
        self.path = Path(self.path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.fieldnames = ["start", "end", "length"]
        if self.value_format is not None:
            self.fieldnames.append("value")
        mode = 'a' if self.append else 'w'
        self._fh = open(self.path, mode, newline='')
        self._writer = csv.DictWriter(self._fh, fieldnames=self.fieldnames)
        if not self.append:
            self._writer.writeheader()

    def write(self, window: Window):
        """Write a single window and flush immediately."""
        row = {"start": window.start, "end": window.end, "length": window.span}
        if self.value_format is not None:
            row["value"] = self.value_format(window.value)
        self._writer.writerow(row)
        self._fh.flush()

    def write_all(self, windows: Iterable[Window]) -> int:
        """Drain ``windows`` into the file; returns the number of rows written."""
        n = 0
        for w in windows:
            self.write(w)
            n += 1
        return n

    def close(self):
        """Close the underlying file handle."""
        self._fh.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
