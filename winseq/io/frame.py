"""Tabulate windows as a pandas DataFrame."""
from __future__ import annotations
from typing import Iterable

import pandas as pd

from ..view import SliceView
from ..window import Window


def windows_to_frame(windows: Iterable[Window], value_name: str = "value") -> pd.DataFrame:
    """One row per window with ``start``, ``end``, ``length`` and the value.

    View payloads are materialized; other payloads (e.g. a feature computed
    with ``Window.map``) are stored as they are.
    """
    rows = []
    for w in windows:
        value = w.value.materialize() if isinstance(w.value, SliceView) else w.value
        rows.append({"start": w.start, "end": w.end, "length": w.span, value_name: value})
    return pd.DataFrame(rows, columns=["start", "end", "length", value_name])
