from __future__ import annotations

import logging

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from miniplot import config


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch):
    for var in ("MINIPLOT_BACKEND", "MINIPLOT_FIGSIZE", "MINIPLOT_DPI", "MINIPLOT_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    config.reload_settings()
    yield
    plt.close("all")
    config._settings = None
    logging.getLogger("miniplot").setLevel(logging.NOTSET)


@pytest.fixture
def shown(monkeypatch: pytest.MonkeyPatch) -> list[list]:
    """
    Replace plt.show; each call records the lines of the figure being shown and
    checks that it is the only pyplot figure open, since plt.show() displays them all.
    """
    calls: list[list] = []

    def _fake_show(*args, **kwargs) -> None:
        open_figures = plt.get_fignums()
        assert len(open_figures) == 1, f"plt.show() would display figures {open_figures}"
        fig = plt.figure(open_figures[0])
        calls.append(list(fig.axes[0].lines))

    monkeypatch.setattr(plt, "show", _fake_show)
    return calls
