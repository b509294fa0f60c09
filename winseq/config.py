"""Configuration dataclass for window generation.

Centralizes the window geometry (size and step) so callers that build many
generators share one consistent setup. Geometry can be given directly in
elements or, for sampled signals, in milliseconds plus a sampling rate.
"""
from __future__ import annotations
from dataclasses import dataclass


def check_geometry(size: int, step: int) -> None:
    """Raise if ``size``/``step`` cannot drive a window generator.

    Raises:
        TypeError: size or step is not an int.
        ValueError: size <= 0, step <= 0, or step > size.
    """
    for name, v in (("size", size), ("step", step)):
        if isinstance(v, bool) or not isinstance(v, int):
            raise TypeError(f"{name} must be an int, got {type(v).__name__}")
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if step > size:
        raise ValueError(f"step ({step}) must not exceed size ({size}); elements would be skipped")


@dataclass
class WindowConfig:
    """Window geometry.

    Attributes:
        size: Requested window length in elements. Only the final window
            of a generator may be shorter.
        step: Distance between successive window starts, ``1 <= step <= size``.
        sample_rate_hz: Sampling rate the geometry was derived from, if any.
    """

    size: int = 200
    step: int = 100
    sample_rate_hz: int | None = None

    @classmethod
    def from_ms(cls, window_ms: float, step_ms: float, sample_rate_hz: int) -> "WindowConfig":
        """Convert millisecond window/step lengths to sample counts.

        Args:
            window_ms: Window length (ms).
            step_ms: Step between consecutive windows (ms).
            sample_rate_hz: Sampling rate (Hz).
        Returns:
            A validated config.
        """
        size = int(window_ms * sample_rate_hz / 1000)
        step = int(step_ms * sample_rate_hz / 1000)
        return cls(size=size, step=step, sample_rate_hz=sample_rate_hz).validate()

    @property
    def overlap(self) -> int:
        """Elements shared by two consecutive full windows."""
        return self.size - self.step

    def validate(self) -> "WindowConfig":
        check_geometry(self.size, self.step)
        return self
