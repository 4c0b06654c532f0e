"""
Sequence converter: plain Python containers of real numbers (list, tuple, range,
array.array, memoryview and other non-text sequences).
"""

import array
from collections.abc import Sequence
from typing import Any

import numpy as np

from miniplot.conversion.base import BaseSeriesConverter

_TEXT_TYPES = (str, bytes, bytearray)


class SequenceConverter(BaseSeriesConverter):
    """Build series from owned or borrowed plain sequences."""

    @property
    def converter_id(self) -> str:
        return "sequence"

    def accepts(self, data: Any) -> bool:
        if isinstance(data, _TEXT_TYPES):
            return False
        return isinstance(data, (Sequence, array.array, memoryview))

    def to_series(self, data: Any) -> np.ndarray:
        values = data.tolist() if isinstance(data, memoryview) else list(data)
        # numpy would parse numeric text and turn None into NaN
        for i, v in enumerate(values):
            if v is None or isinstance(v, _TEXT_TYPES):
                raise TypeError(
                    f"Series element {i} is {type(v).__name__!r}, expected a real number"
                )
        try:
            arr = np.asarray(values, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise TypeError(f"Cannot convert sequence to float64 series: {e}") from e
        if arr.ndim != 1:
            raise TypeError(f"Expected a flat sequence of numbers, got shape {arr.shape}")
        return self._freeze(arr)
