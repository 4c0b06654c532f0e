"""
MiniPlot: accumulate titled line series and hand them to matplotlib for display.
Inputs go through miniplot.conversion, so lists, ranges and numpy vectors plot alike.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from miniplot.colors import TRANSPARENT, get_color, validate_color
from miniplot.config import get_settings
from miniplot.conversion import as_series

logger = logging.getLogger(__name__)


def _empty_points() -> np.ndarray:
    return np.empty((0, 2), dtype=np.float64)


@dataclass
class PlotData:
    name: str = ""
    points: np.ndarray = field(default_factory=_empty_points)
    color: str | tuple = TRANSPARENT
    dashed: bool = False
    dotted: bool = False
    pointed: bool = False

    @property
    def linestyle(self) -> str:
        """Dashed wins over dotted; otherwise solid."""
        if self.dashed:
            return "--"
        if self.dotted:
            return ":"
        return "-"


@dataclass
class Options:
    window_name: str
    legend: bool = False
    xlabel: str | None = None
    ylabel: str | None = None
    aspect_ratio: float | None = None


def _zip_points(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    """Pair x and y samples, truncating to the shorter of the two."""
    n = min(len(x), len(y))
    points = np.column_stack((x[:n], y[:n])).astype(np.float64)
    points.setflags(write=False)
    return points


class MiniPlot:
    """
    Builder for a single line chart.

    Every call returns the same builder so calls chain:

        MiniPlot("Sine and Cosine Waves").plot(sine).plot(cosine).legend().show()

    Modifiers such as name(), color() and dashed() act on the most recently added
    line and do nothing if no line has been added yet.
    """

    def __init__(self, window_name: str = ""):
        # applies MINIPLOT_LOG_LEVEL before any line is added
        get_settings()
        self._data: list[PlotData] = []
        self.options = Options(window_name=window_name)
        self._color_index = 0

    @classmethod
    def new(cls, window_name: str = "") -> "MiniPlot":
        return cls(window_name)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"MiniPlot({self.options.window_name!r}, lines={len(self._data)})"

    @property
    def title(self) -> str:
        return self.options.window_name

    @property
    def lines(self) -> tuple[PlotData, ...]:
        return tuple(self._data)

    @property
    def series(self) -> tuple[np.ndarray, ...]:
        """The y samples of every line, in insertion order."""
        return tuple(d.points[:, 1] for d in self._data)

    def get_color(self) -> str:
        """Advance the palette and return the next line colour."""
        self._color_index += 1
        return get_color(self._color_index)

    def _push(self, name: str, points: np.ndarray) -> "MiniPlot":
        data = PlotData(name=name, points=points, color=self.get_color())
        self._data.append(data)
        logger.debug("Added line %r (%d points) to %r", name, len(points), self.title)
        return self

    # ----------------------------
    # Adding lines
    # ----------------------------

    def plot(self, line: Any) -> "MiniPlot":
        """
        Line plot of the given samples against their indices (x = 0..n-1).

        Args:
            line: Anything miniplot.conversion accepts (list, tuple, range, array.array,
                  numpy vector). Empty input adds an empty line.
        """
        y = as_series(line)
        x = np.arange(len(y), dtype=np.float64)
        return self._push(f"Line {len(self._data)}", _zip_points(x, y))

    def plot_xy(self, x: Any, y: Any) -> "MiniPlot":
        """
        Line plot with explicit x values. Both inputs must be convertible to series;
        samples are paired up to the shorter length.
        """
        return self._push(f"Line {len(self._data)}", _zip_points(as_series(x), as_series(y)))

    def plot_points(self, points: Iterable) -> "MiniPlot":
        """Line plot of (x, y) pairs."""
        arr = np.asarray(points if isinstance(points, np.ndarray) else list(points), dtype=np.float64)
        if arr.size == 0:
            arr = _empty_points()
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"Points must be (x, y) pairs, got array of shape {arr.shape}")
        arr = arr.copy()
        arr.setflags(write=False)
        return self._push(f"Line {len(self._data)}", arr)

    def matrix_rows(self, x: Any, y: Any) -> "MiniPlot":
        """
        One line per row of the 2-D array y, all sharing the x values.
        Lines are named "Row {i}" and coloured differently.
        """
        xs = as_series(x)
        matrix = np.asarray(y, dtype=np.float64)
        if matrix.ndim != 2:
            raise ValueError(f"matrix_rows expects a 2-D array, got shape {matrix.shape}")
        for i, row in enumerate(matrix):
            self._push(f"Row {i}", _zip_points(xs, row))
        return self

    # ----------------------------
    # Modifiers for the last line
    # ----------------------------

    def name(self, name: str) -> "MiniPlot":
        if self._data:
            self._data[-1].name = name
        return self

    def color(self, color: str | tuple) -> "MiniPlot":
        """Change the colour of the last line (any matplotlib colour spec)."""
        color = validate_color(color)
        if self._data:
            self._data[-1].color = color
        return self

    def dashed(self) -> "MiniPlot":
        if self._data:
            self._data[-1].dashed = True
        return self

    def dotted(self) -> "MiniPlot":
        if self._data:
            self._data[-1].dotted = True
        return self

    def pointed(self) -> "MiniPlot":
        """Also mark the individual points of the last line (useful for sparse data)."""
        if self._data:
            self._data[-1].pointed = True
        return self

    # ----------------------------
    # Chart options
    # ----------------------------

    def xlabel(self, label: str) -> "MiniPlot":
        self.options.xlabel = label
        return self

    def ylabel(self, label: str) -> "MiniPlot":
        self.options.ylabel = label
        return self

    def legend(self) -> "MiniPlot":
        self.options.legend = True
        return self

    def aspect_ratio(self, ratio: float) -> "MiniPlot":
        """Fix the width/height ratio of the plot area. If unset, matplotlib decides."""
        if ratio <= 0:
            raise ValueError(f"Aspect ratio must be positive, got {ratio}")
        self.options.aspect_ratio = float(ratio)
        return self

    def square_aspect_ratio(self) -> "MiniPlot":
        return self.aspect_ratio(1.0)

    # ----------------------------
    # Rendering
    # ----------------------------

    def build_figure(self) -> Figure:
        """
        Draw every line onto a new matplotlib figure without displaying it.
        The figure is not registered with pyplot; the caller owns it.
        """
        settings = get_settings()
        fig = Figure(figsize=settings.figsize, dpi=settings.dpi)
        FigureCanvasAgg(fig)
        return self._draw(fig)

    def _draw(self, fig: Figure) -> Figure:
        opts = self.options
        ax = fig.subplots()
        if fig.canvas.manager is not None:
            fig.canvas.manager.set_window_title(opts.window_name)

        for data in self._data:
            ax.plot(
                data.points[:, 0],
                data.points[:, 1],
                color=data.color,
                linestyle=data.linestyle,
                marker="o" if data.pointed else None,
                markersize=4,
                label=data.name,
            )

        ax.set_title(opts.window_name)
        if opts.xlabel is not None:
            ax.set_xlabel(opts.xlabel)
        if opts.ylabel is not None:
            ax.set_ylabel(opts.ylabel)
        if opts.legend and self._data:
            ax.legend()
        if opts.aspect_ratio is not None:
            # matplotlib's box aspect is height / width
            ax.set_box_aspect(1.0 / opts.aspect_ratio)

        fig.tight_layout()
        logger.debug("Built figure %r with %d lines", opts.window_name, len(self._data))
        return fig

    def show(self) -> None:
        """
        Display the chart in a window and block until it is closed.
        Can be called again; each call draws a fresh figure. Backend errors
        (e.g. no display available) propagate unchanged.
        """
        settings = get_settings()
        fig = None
        try:
            if settings.backend:
                matplotlib.use(settings.backend)
            # the only pyplot figure miniplot leaves open while plt.show() blocks
            fig = self._draw(plt.figure(figsize=settings.figsize, dpi=settings.dpi))
            plt.show()
        except Exception as e:
            logger.warning("Backend failed to show %r: %s", self.title, e)
            raise
        finally:
            if fig is not None:
                plt.close(fig)
