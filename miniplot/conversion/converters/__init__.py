"""Built-in series converters."""

from miniplot.conversion.converters.ndarray import NdarrayConverter
from miniplot.conversion.converters.sequence import SequenceConverter

__all__ = ["NdarrayConverter", "SequenceConverter"]
