# mztabm/mtd/sort.py
"""Ordering and combination of MTD sections."""

import logging
from typing import Any

import numpy as np
import pandas as pd

from ..config import MTD_FIELD_ORDER
from ..core.types import as_section, empty_section

logger = logging.getLogger(__name__)


def _field_rank(field: str) -> float:
    """Position of the first field name prefix ``field`` starts with."""
    for i, prefix in enumerate(MTD_FIELD_ORDER):
        if field.startswith(prefix):
            return i
    return np.inf


def mtd_sort(x: Any) -> pd.DataFrame:
    """
    Sort rows of an MTD section into the order expected by mzTab-M.

    Each row is ranked by the position in ``MTD_FIELD_ORDER`` of the first
    prefix its field name starts with (``"sample[2]-tissue[1]"`` matches
    ``"sample"``). Rows matching none of the prefixes are placed last. The
    sort is stable: rows with the same rank keep their relative order, which
    preserves the ordering of the fields within an entity.

    Args:
        x: MTD section (DataFrame with field names in the first column) or a
            sequence of (field, value) pairs.

    Returns:
        The sorted MTD section.
    """
    section = as_section(x)
    ranks = np.array([_field_rank(f) for f in section["field"]], dtype=float)
    unknown = section["field"][np.isinf(ranks)]
    if len(unknown):
        logger.debug(
            f"{len(unknown)} field(s) with unknown prefix sorted last: "
            f"{', '.join(unknown.iloc[:5])}"
        )
    order = np.argsort(ranks, kind="stable")
    return section.iloc[order].reset_index(drop=True)


def mtd_combine(*sections: Any, sort: bool = True) -> pd.DataFrame:
    """
    Combine MTD sections row-wise.

    Args:
        *sections: MTD sections or sequences of (field, value) pairs, e.g.
            the results of ``mtd_skeleton()``, ``mtd_sample()`` and
            ``mtd_ms_run()``.
        sort: whether the combined section should be sorted with
            ``mtd_sort()``.

    Returns:
        The combined MTD section.
    """
    frames = [as_section(s) for s in sections]
    frames = [f for f in frames if len(f)]
    if not frames:
        return empty_section()
    combined = pd.concat(frames, ignore_index=True)
    if sort:
        return mtd_sort(combined)
    return combined
