"""
Turn heterogeneous numeric inputs (plain sequences, numpy vectors) into series.
Route by input shape and delegate to shape-specific converters.
"""

from miniplot.conversion.base import BaseSeriesConverter
from miniplot.conversion.router import as_series, register_converter, registered_converters

# Register built-in converters so as_series(data) works for known shapes
from miniplot.conversion.converters import NdarrayConverter, SequenceConverter

register_converter(NdarrayConverter())
register_converter(SequenceConverter())

__all__ = [
    "BaseSeriesConverter",
    "as_series",
    "register_converter",
    "registered_converters",
]
