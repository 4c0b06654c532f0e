"""
Abstract base for shape-specific series converters.
Each converter knows whether it handles an input shape and how to turn it into a series.
"""

from abc import ABC, abstractmethod
from typing import Any

import numpy as np


class BaseSeriesConverter(ABC):
    """Converter for one input shape: recognise it and produce a float64 series."""

    @property
    @abstractmethod
    def converter_id(self) -> str:
        """Converter identifier (e.g. 'sequence', 'ndarray')."""
        ...

    @abstractmethod
    def accepts(self, data: Any) -> bool:
        """Return True if this converter handles data's shape."""
        ...

    @abstractmethod
    def to_series(self, data: Any) -> np.ndarray:
        """
        Convert data into a series.

        Args:
            data: Input of a shape this converter accepts.

        Returns:
            1-D contiguous float64 array, read-only, in the input's order.
        """
        ...

    @staticmethod
    def _freeze(values: np.ndarray) -> np.ndarray:
        """
        Copy values into a fresh read-only float64 vector so the series never
        aliases caller memory.
        """
        out = np.array(values, dtype=np.float64, copy=True).reshape(-1)
        out.setflags(write=False)
        return out
