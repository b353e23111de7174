# mztabm/mtd/study_variable.py
"""The *study_variable* fields of the MTD section."""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..config import DEFAULTS
from ..core.types import RankedRow, order_by_rank
from ..core.values import as_str, as_vector, is_scalar
from ..errors import LengthMismatchError, MissingRequiredError, UnsupportedFeatureError

logger = logging.getLogger(__name__)

UNDEFINED = "undefined"


def _as_table(x: Any) -> pd.DataFrame:
    if isinstance(x, pd.DataFrame):
        return x
    return pd.DataFrame(x)


def _column_names(columns: Any) -> List[Any]:
    if columns is None:
        return []
    if is_scalar(columns):
        return [columns]
    return list(columns)


def study_variable_matrix(
    x: pd.DataFrame, study_variable_columns: Sequence[str], sep: str = ":"
) -> np.ndarray:
    """
    Create the matrix of study variables.

    Args:
        x: table with one row per assay.
        study_variable_columns: columns of ``x`` defining study variables.
        sep: separator between column name and value.

    Returns:
        String array with one row per row in ``x`` and one column per study
        variable column, each cell being ``"<column><sep><value>"``.
    """
    columns = [
        [f"{column}{sep}{as_str(value)}" for value in x[column]]
        for column in study_variable_columns
    ]
    if not columns:
        return np.empty((len(x), 0), dtype=object)
    return np.array(columns, dtype=object).T


def _study_variables(
    x: pd.DataFrame, study_variable_columns: List[str]
) -> np.ndarray:
    missing = [c for c in study_variable_columns if c not in x.columns]
    if missing:
        raise MissingRequiredError(
            "Not all column names defined with 'study_variable_columns' "
            f"present in 'x', missing: {', '.join(map(str, missing))}",
            parameter="study_variable_columns",
        )
    return study_variable_matrix(x, study_variable_columns)


def _unique_column_major(svar_m: np.ndarray) -> List[str]:
    # all values of the first column before any of the second
    return list(pd.unique(svar_m.ravel(order="F")))


def _column_value_pairs(x: pd.DataFrame, columns: List[Any]) -> Dict[str, Tuple[Any, str]]:
    # study variable name -> (column, rendered value), first appearance wins
    pairs = {}
    for column in columns:
        for value in x[column]:
            value = as_str(value)
            pairs.setdefault(f"{column}:{value}", (column, value))
    return pairs


def mtd_define_study_variables(
    x: Any, study_variable_columns: Optional[Sequence[str]] = None
) -> List[str]:
    """
    Get the study variables that ``mtd_study_variables()`` would define.

    Useful to define a per-variable ``average_function``,
    ``variation_function`` or ``description``.

    Returns:
        Names of the study variables in the order they are reported.
    """
    columns = _column_names(study_variable_columns)
    if not columns:
        return [UNDEFINED]
    return _unique_column_major(_study_variables(_as_table(x), columns))


def _per_variable(values: Any, n: int, parameter: str) -> List[str]:
    values = as_vector(values)
    if len(values) == 1:
        values = values * n
    if len(values) != n:
        raise LengthMismatchError(
            f"Length of parameter '{parameter}' has to be equal to the number "
            f"of study variables ({n})",
            parameter=parameter,
        )
    return values


def mtd_study_variables(
    x: Any,
    study_variable_columns: Optional[Sequence[str]] = None,
    average_function: Any = DEFAULTS.average_function,
    variation_function: Any = DEFAULTS.variation_function,
    description: Any = None,
    factors: Any = None,
) -> pd.DataFrame:
    """
    Create the *study_variable* fields of the MTD section.

    A study variable is the **value** of an experimental variable (e.g.
    ``"control"`` or ``"2 hours"``), not the name of the factor. Study
    variables are defined from the columns ``study_variable_columns`` of a
    table ``x`` in which each row is one assay (in the same order as the
    assays of the *assay* section). Each distinct value of these columns is
    one study variable named ``"<column>:<value>"``, linked to all assays
    (rows) with that value. Study variables are ordered by column and, within
    a column, by first appearance.

    Even if a data set has no experimental variables, a study variable has to
    be reported: without ``study_variable_columns`` a single study variable
    ``"undefined"`` is defined linking to all assays.

    Args:
        x: table (DataFrame or anything accepted by ``pandas.DataFrame``)
            with one row per assay.
        study_variable_columns: columns of ``x`` to define study variables
            from.
        average_function: CV term of the function used to calculate the
            study variable abundance, a single value or one per study
            variable. Defaults to the arithmetic mean.
        variation_function: CV term of the function used to calculate the
            study variable abundance variation, a single value or one per
            study variable. Defaults to the coefficient of variation.
        description: description of each study variable. Defaults to the
            column name and value of each study variable.
        factors: currently not supported.

    Returns:
        Two-column MTD section.

    Raises:
        UnsupportedFeatureError: if ``factors`` is provided.
        MissingRequiredError: if a column is not present in ``x``.
        LengthMismatchError: if ``average_function``,
            ``variation_function`` or ``description`` does not have length 1
            or the number of study variables.

    Examples:
        >>> x = pd.DataFrame({"timepoint": ["0h", "6h", "0h", "6h", "0h"]})
        >>> mtd_study_variables(x, study_variable_columns=["timepoint"])
    """
    if as_vector(factors):
        raise UnsupportedFeatureError(
            "'factors' is currently not supported", parameter="factors"
        )
    x = _as_table(x)
    columns = _column_names(study_variable_columns)
    if columns:
        svar_m = _study_variables(x, columns)
        svars = _unique_column_major(svar_m)
        pairs = _column_value_pairs(x, columns)
        default_description = [
            "Column: {}, value: {}".format(*pairs[sv]) for sv in svars
        ]
    else:
        svars = [UNDEFINED]
        svar_m = np.full((len(x), 1), UNDEFINED, dtype=object)
        default_description = ["Undefined"]
    n = len(svars)
    average_function = _per_variable(average_function, n, "average_function")
    variation_function = _per_variable(variation_function, n, "variation_function")
    if as_vector(description):
        description = _per_variable(description, n, "description")
    else:
        description = default_description

    rows = []
    for i, svar in enumerate(svars, start=1):
        assays = np.flatnonzero((svar_m == svar).any(axis=1)) + 1
        name = f"study_variable[{i}]"
        rows += [
            RankedRow(name, svar, i),
            RankedRow(
                f"{name}-assay_refs", "|".join(f"assay[{a}]" for a in assays), i
            ),
            RankedRow(f"{name}-average_function", average_function[i - 1], i),
            RankedRow(f"{name}-variation_function", variation_function[i - 1], i),
            RankedRow(f"{name}-description", description[i - 1], i),
        ]
    logger.debug(f"Defined {n} study variable(s) for {len(x)} assay(s)")
    return order_by_rank(rows)
