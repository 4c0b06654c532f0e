"""
Numpy converter: dense vectors (1-D arrays, (n, 1) column and (1, n) row vectors, np.matrix).
"""

from typing import Any

import numpy as np

from miniplot.conversion.base import BaseSeriesConverter

# bool, signed int, unsigned int, float
_REAL_KINDS = "biuf"


class NdarrayConverter(BaseSeriesConverter):
    """Build series from numpy vectors, casting real dtypes to float64."""

    @property
    def converter_id(self) -> str:
        return "ndarray"

    def accepts(self, data: Any) -> bool:
        return isinstance(data, np.ndarray)

    def to_series(self, data: Any) -> np.ndarray:
        arr = np.asarray(data)
        if arr.dtype.kind not in _REAL_KINDS:
            raise TypeError(f"Cannot plot array of dtype {arr.dtype}, expected real numbers")
        if arr.ndim == 1:
            return self._freeze(arr)
        if arr.ndim == 2 and 1 in arr.shape:
            return self._freeze(arr)
        raise TypeError(f"Cannot plot array of shape {arr.shape} as a series, expected a vector")
