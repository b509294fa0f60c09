"""Lazy windowing over indexable collections that keeps the imperfect last window.

Modules:
- window: Window container (range + payload)
- view: copy-free SliceView over a source collection
- windows: the Windows generator
- windower: Windower capability and windows() dispatch
- config / settings: window geometry and environment defaults
- io: CSV and pandas sinks
"""
from .config import WindowConfig
from .view import SliceView
from .window import Window
from .windows import Windows
from .windower import Windower, windows

__all__ = ["SliceView", "Window", "WindowConfig", "Windower", "Windows", "windows"]
