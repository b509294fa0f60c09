import pytest
from pydantic import ValidationError

from winseq import WindowConfig, Windows
from winseq.settings import WindowSettings, get_settings


def test_from_ms_converts_to_samples():
    cfg = WindowConfig.from_ms(200, 100, 1000)
    assert (cfg.size, cfg.step, cfg.sample_rate_hz) == (200, 100, 1000)
    assert cfg.overlap == 100


def test_from_ms_rejects_zero_step():
    with pytest.raises(ValueError):
        WindowConfig.from_ms(200, 0.5, 1000)


def test_validate_rejects_step_larger_than_size():
    with pytest.raises(ValueError):
        WindowConfig(size=2, step=3).validate()


def test_windows_from_config():
    win = Windows.from_config(list(range(12)), WindowConfig(size=6, step=2))
    assert win.length() == 4


def test_settings_defaults(monkeypatch):
    for var in ("WINSEQ_WINDOW_SIZE", "WINSEQ_WINDOW_STEP", "WINSEQ_WINDOW_MS", "WINSEQ_STEP_MS", "WINSEQ_SAMPLE_RATE_HZ"):
        monkeypatch.delenv(var, raising=False)
    cfg = WindowSettings(_env_file=None).to_config()
    assert (cfg.size, cfg.step) == (200, 100)


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("WINSEQ_WINDOW_SIZE", "8")
    monkeypatch.setenv("WINSEQ_WINDOW_STEP", "3")
    cfg = get_settings().to_config()
    assert (cfg.size, cfg.step) == (8, 3)


def test_settings_ms_take_precedence(monkeypatch):
    monkeypatch.setenv("WINSEQ_WINDOW_MS", "50")
    monkeypatch.setenv("WINSEQ_STEP_MS", "25")
    monkeypatch.setenv("WINSEQ_SAMPLE_RATE_HZ", "860")
    cfg = WindowSettings(_env_file=None).to_config()
    assert (cfg.size, cfg.step, cfg.sample_rate_hz) == (43, 21, 860)


def test_settings_reject_step_above_size(monkeypatch):
    monkeypatch.setenv("WINSEQ_WINDOW_SIZE", "4")
    monkeypatch.setenv("WINSEQ_WINDOW_STEP", "5")
    with pytest.raises(ValidationError):
        WindowSettings(_env_file=None)


def test_settings_ms_ignore_stale_step(monkeypatch):
    monkeypatch.setenv("WINSEQ_WINDOW_STEP", "500")
    monkeypatch.setenv("WINSEQ_WINDOW_MS", "200")
    monkeypatch.setenv("WINSEQ_STEP_MS", "100")
    monkeypatch.setenv("WINSEQ_SAMPLE_RATE_HZ", "1000")
    cfg = WindowSettings(_env_file=None).to_config()
    assert (cfg.size, cfg.step) == (200, 100)
