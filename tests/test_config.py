from __future__ import annotations

import logging

import pytest

from miniplot import config


def test_defaults() -> None:
    settings = config.reload_settings()
    assert settings.backend is None
    assert settings.figsize == (10.0, 5.0)
    assert settings.dpi == 100
    assert settings.log_level == "WARNING"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MINIPLOT_BACKEND", "Agg")
    monkeypatch.setenv("MINIPLOT_FIGSIZE", "6, 4.5")
    monkeypatch.setenv("MINIPLOT_DPI", "150")
    monkeypatch.setenv("MINIPLOT_LOG_LEVEL", "debug")
    settings = config.reload_settings()
    assert settings.backend == "Agg"
    assert settings.figsize == (6.0, 4.5)
    assert settings.dpi == 150
    assert settings.log_level == "DEBUG"
    assert logging.getLogger("miniplot").level == logging.DEBUG


def test_settings_are_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = config.get_settings()
    monkeypatch.setenv("MINIPLOT_DPI", "300")
    assert config.get_settings() is first
    assert config.reload_settings().dpi == 300


@pytest.mark.parametrize(
    "var,value",
    [
        ("MINIPLOT_FIGSIZE", "10"),
        ("MINIPLOT_FIGSIZE", "a,b"),
        ("MINIPLOT_FIGSIZE", "0,5"),
        ("MINIPLOT_FIGSIZE", "nan,5"),
        ("MINIPLOT_FIGSIZE", "10,inf"),
        ("MINIPLOT_DPI", "-1"),
        ("MINIPLOT_DPI", "many"),
        ("MINIPLOT_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values_raise(monkeypatch: pytest.MonkeyPatch, var: str, value: str) -> None:
    monkeypatch.setenv(var, value)
    with pytest.raises(ValueError):
        config.reload_settings()
