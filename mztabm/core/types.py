# mztabm/core/types.py
"""
Row and section types shared by the MTD formatting functions.

During assembly a section is a list of RankedRow, the rank being the 1-based
index of the entity the row belongs to. Once assembled, rows are ordered by
rank and returned to the caller as a two-column DataFrame.
"""

from typing import Any, Iterable, NamedTuple, Sequence, Tuple

import pandas as pd

from .values import as_str

# Column names of an MTD section
MTD_COLUMNS = ["field", "value"]


class RankedRow(NamedTuple):
    """A keyed MTD row together with the index used to order it."""

    field: str
    value: str
    rank: int


def empty_section() -> pd.DataFrame:
    """Return an MTD section without rows."""
    return pd.DataFrame({name: pd.Series(dtype=object) for name in MTD_COLUMNS})


def rows_to_frame(rows: Iterable[Tuple[Any, ...]]) -> pd.DataFrame:
    """
    Create an MTD section from (field, value[, rank]) tuples.

    The rank, if present, is dropped; rows keep the order of the input.
    """
    pairs = [(str(row[0]), str(row[1])) for row in rows]
    if not pairs:
        return empty_section()
    return pd.DataFrame(pairs, columns=MTD_COLUMNS, dtype=object)


def order_by_rank(rows: Sequence[RankedRow]) -> pd.DataFrame:
    """Sort ranked rows by entity index and return them as an MTD section.

    Python's sort is stable, rows of the same entity thus keep the order in
    which they were generated.
    """
    return rows_to_frame(sorted(rows, key=lambda row: row.rank))


def as_section(x: Any) -> pd.DataFrame:
    """
    Return ``x`` as an MTD section.

    Accepts a DataFrame (the first two columns are used as field and value,
    rendered as strings) or any sequence of (field, value) pairs.
    """
    if isinstance(x, pd.DataFrame):
        if x.shape[1] < 2:
            raise TypeError(
                f"An MTD section needs two columns, got {x.shape[1]}"
            )
        section = x.iloc[:, :2].copy()
        section.columns = MTD_COLUMNS
        for column in MTD_COLUMNS:
            section[column] = section[column].map(as_str).astype(object)
        return section.reset_index(drop=True)
    return rows_to_frame(x)
