# mztabm/core/values.py
"""
Normalization of caller-supplied values.

Formatting functions accept optional attributes as a single value, as one
value per entity or not at all, and multi-value attributes as a ragged list
of per-entity values. The helpers below resolve these shapes once, at the
function boundary, so that the field builders only ever see lists of strings.
"""

from collections.abc import Iterable
from typing import Any, List, Optional

import pandas as pd

from ..config import NULL
from ..errors import LengthMismatchError


def is_scalar(value: Any) -> bool:
    """Return True if ``value`` is a single value rather than a collection."""
    return isinstance(value, (str, bytes)) or not isinstance(value, Iterable)


def is_missing(value: Any) -> bool:
    """Return True for ``None`` and scalar NA values (NaN, NaT, pd.NA)."""
    if value is None:
        return True
    if not is_scalar(value):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def as_str(value: Any) -> str:
    """Render a single value for the mzTab-M output, ``None``/NA as "null"."""
    if is_missing(value):
        return NULL
    if isinstance(value, bytes):
        return value.decode()
    return str(value)


def as_vector(value: Any) -> List[str]:
    """
    Convert a parameter to a flat list of strings.

    ``None`` gives an empty list, a single value a list of length 1 and any
    other iterable one string per element.
    """
    if value is None:
        return []
    if is_scalar(value):
        return [as_str(value)]
    return [as_str(v) for v in value]


def as_slot(value: Any) -> List[str]:
    """Convert the values of a single entity; a missing value gives no values."""
    if is_missing(value):
        return []
    return as_vector(value)


def as_slots(value: Any) -> List[List[str]]:
    """
    Convert a (possibly ragged) multi-value parameter to one list per entity.

    A single value is one entity with one value. Otherwise each element is
    one entity and can be a single value, a collection of values or ``None``
    (no value for that entity).
    """
    if value is None:
        return []
    if is_scalar(value):
        return [[as_str(value)]]
    return [as_slot(v) for v in value]


def is_nested(value: Any) -> bool:
    """Return True if ``value`` is a collection with per-entity collections."""
    if value is None or is_scalar(value):
        return False
    return any(v is None or not is_scalar(v) for v in value)


def broadcast(
    values: List[Any], length: int, parameter: str, section: Optional[str] = None
) -> List[Any]:
    """
    Expand a length-1 list to ``length`` elements.

    Lists that already have the expected length are returned as is, any other
    length raises a LengthMismatchError.
    """
    if len(values) == length:
        return values
    if len(values) == 1:
        return values * length
    prefix = f"{section}: " if section else ""
    raise LengthMismatchError(
        f"{prefix}parameter '{parameter}' has to be of length 1 or equal to "
        f"{length}, got length {len(values)}",
        parameter=parameter,
    )
