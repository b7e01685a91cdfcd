# -*- coding: utf-8 -*-
"""
General-purpose utilities for graphpaths.

This module provides small helpers for:

- number formatting in reports (`format_weight`, `format_distance`).
- distance labels (`is_unreachable`, `to_float`).
- console summaries (`to_engineering_notation`).
"""

from __future__ import annotations

import math
from typing import Union

from graphpaths.utils.constant import INFINITY_LABEL

__all__ = [
    "format_weight",
    "format_distance",
    "is_unreachable",
    "to_float",
    "to_engineering_notation",
]


# -----------------------------------------------------------------------------
# Report formatting helpers
# -----------------------------------------------------------------------------
def format_weight(weight: Union[int, float, None]) -> str:
    """
    Render an edge weight for text output.

    Integral floats are printed without decimals so that graphs built from integer
    weights and graphs read back from float tables render identically.

    Examples
    --------
    >>> format_weight(3), format_weight(2.0), format_weight(0.5)
    ('3', '2', '0.5')
    """
    if weight is None:
        return "-"
    if isinstance(weight, float) and weight.is_integer():
        return str(int(weight))
    return str(weight)


def format_distance(distance: Union[int, float]) -> str:
    """
    Render a distance label, using ``INFINITY_LABEL`` for unreachable vertices.

    Examples
    --------
    >>> format_distance(8), format_distance(math.inf)
    ('8', 'Infinity')
    """
    if is_unreachable(distance):
        return INFINITY_LABEL
    return format_weight(distance)


def is_unreachable(distance: Union[int, float]) -> bool:
    """
    True for the ``math.inf`` label of an unreachable vertex.

    Integer distances are never infinite, whatever their size (``math.isinf`` would
    raise ``OverflowError`` on ints beyond the float range).
    """
    return isinstance(distance, float) and math.isinf(distance)


def to_float(value: Union[int, float]) -> float:
    """
    Convert a weight or distance to ``float``; ints beyond the float range become ``inf``.

    Examples
    --------
    >>> to_float(3), to_float(10 ** 400)
    (3.0, inf)
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf


def to_engineering_notation(number: float | int) -> str:
    """
    Convert a number to engineering notation (multiples of `10^3`).

    Returns a string with the value and the corresponding suffix (e.g., ``"3.2k"``, ``"1.5M"``).
    Available suffixes : `["k", "M", "G", "T", "P"]`

    Parameters
    ----------
    number : float or int
        Numeric value to convert.

    Returns
    -------
    str
        Engineering-notation string.
    """
    if number == 0:
        return "0"

    suffixes = ["", "k", "M", "G", "T", "P"]
    magnitude = max(0, min(len(suffixes) - 1, int((len(str(int(abs(number)))) - 1) // 3)))
    scaled_number = number / (10 ** (3 * magnitude))
    return f"{scaled_number:.3g}{suffixes[magnitude]}"
