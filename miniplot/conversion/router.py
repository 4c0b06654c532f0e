"""
Route series conversion requests to the first converter that accepts the input shape.
"""

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from miniplot.conversion.base import BaseSeriesConverter

logger = logging.getLogger(__name__)

# Registry: converter_id -> converter instance, in dispatch order
_registry: dict[str, "BaseSeriesConverter"] = {}


def register_converter(converter: "BaseSeriesConverter") -> None:
    """Register a converter for its converter_id. Re-registering overwrites in place."""
    _registry[converter.converter_id] = converter


def registered_converters() -> list[str]:
    """Converter ids in dispatch order."""
    return list(_registry)


def _get_converter(data: Any) -> "BaseSeriesConverter":
    """Return the first converter that accepts data; raise if none does."""
    for converter in _registry.values():
        if converter.accepts(data):
            return converter
    raise TypeError(
        f"Cannot plot {type(data).__name__!r} as a series. Registered: {list(_registry)}"
    )


def as_series(data: Any) -> np.ndarray:
    """
    Convert any supported input shape into a series.

    Dispatches to the first registered converter whose accepts() is true, so callers
    never pre-convert (a list, a range, a numpy vector all work).

    Args:
        data: Plain numeric sequence or dense numpy vector.

    Returns:
        Read-only 1-D float64 array. Empty input gives an empty array.
    """
    converter = _get_converter(data)
    series = converter.to_series(data)
    logger.debug("Converted %s via %s (%d samples)", type(data).__name__, converter.converter_id, len(series))
    return series
