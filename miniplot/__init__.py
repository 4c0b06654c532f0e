"""
Quick line charts from plain sequences or numpy vectors, drawn with matplotlib.
"""

from miniplot import colors
from miniplot.conversion import BaseSeriesConverter, as_series, register_converter
from miniplot.plot import MiniPlot

__all__ = [
    "BaseSeriesConverter",
    "MiniPlot",
    "as_series",
    "colors",
    "register_converter",
]
