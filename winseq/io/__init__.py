"""Sinks for emitted windows: CSV files and pandas frames."""
from .logger import WindowCSVLogger
from .frame import windows_to_frame
