"""Environment-driven defaults for window geometry.

Values are read from ``WINSEQ_*`` environment variables or a ``.env`` file,
e.g. ``WINSEQ_WINDOW_SIZE=256``. When both ``WINSEQ_WINDOW_MS`` and
``WINSEQ_SAMPLE_RATE_HZ`` are set, the millisecond values take precedence.
"""
from __future__ import annotations
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .config import WindowConfig


class WindowSettings(BaseSettings):
    window_size: int = Field(default=200, gt=0)
    window_step: int = Field(default=100, gt=0)
    window_ms: float | None = Field(default=None, gt=0)
    step_ms: float | None = Field(default=None, gt=0)
    sample_rate_hz: int | None = Field(default=None, gt=0)

    model_config = SettingsConfigDict(env_prefix="WINSEQ_", env_file=".env", extra="ignore")

    @model_validator(mode="after")
    def _step_within_size(self):
        # the ms fields replace window_size/window_step in to_config()
        if self._uses_ms():
            return self
        if self.window_step > self.window_size:
            raise ValueError("window_step must not exceed window_size")
        return self

    def _uses_ms(self) -> bool:
        return self.window_ms is not None and self.sample_rate_hz is not None

    def to_config(self) -> WindowConfig:
        if self._uses_ms():
            step_ms = self.step_ms if self.step_ms is not None else self.window_ms
            return WindowConfig.from_ms(self.window_ms, step_ms, self.sample_rate_hz)
        return WindowConfig(size=self.window_size, step=self.window_step).validate()


def get_settings() -> WindowSettings:
    return WindowSettings()
