"""Label ordering for triplet emission."""

import math
from typing import Iterable

__all__ = ['numeric_key', 'order_labels']


def numeric_key(label: str) -> float:
    """Numeric value of a label for ``numeric`` sorting.

    Labels that do not parse as a float (and NaN) compare as 0, which keeps
    the ordering total; Python's stable sort leaves ties in insertion order.
    """
    try:
        value = float(label)
    except ValueError:
        return 0.0
    if math.isnan(value):
        return 0.0
    return value


def order_labels(labels: Iterable[str], sort_mode: str) -> list[str]:
    """Return labels in emission order for the given sort mode."""
    if sort_mode == "lex":
        return sorted(labels)
    if sort_mode == "numeric":
        return sorted(labels, key=numeric_key)
    if sort_mode == "none":
        return list(labels)
    raise ValueError(f"Unknown sort mode: {sort_mode}")
