# mztabm/smf.py
"""
The Small Molecule Feature (SMF) table of mzTab-M.

The SMF section captures information on the individual MS features
(quantified regions, e.g. elution profiles of specific m/z and retention
times) that were measured across the assays.
"""

import logging
from typing import Any, List, Optional

import numpy as np
import pandas as pd

from .config import NULL, SMF_COLUMNS
from .core.values import as_vector
from .errors import LengthMismatchError, MissingRequiredError

logger = logging.getLogger(__name__)


def fill_column(input_data: Any, length_out: int, name: Optional[str] = None) -> List[str]:
    """
    Expand the values for an SMF column to the number of rows.

    Args:
        input_data: values for the column or None.
        length_out: number of rows.
        name: name of the column, reported in errors.

    Returns:
        List with ``length_out`` strings. ``None`` gives a column of
        ``"null"``, missing values are replaced with ``"null"`` and a single
        value is repeated for every row.

    Raises:
        LengthMismatchError: if the number of values is neither 1 nor
            ``length_out``.
    """
    if input_data is None:
        return [NULL] * length_out
    values = as_vector(input_data)
    if len(values) == 1:
        return values * length_out
    if len(values) != length_out:
        column = f"'{name}': " if name else ""
        raise LengthMismatchError(
            f"{column}Input length {len(values)} does not match row count "
            f"{length_out}",
            parameter=name,
        )
    return values


def smf_abundance_matrix(abundance_matrix: Any) -> pd.DataFrame:
    """
    Convert a matrix of abundances into the base of the SMF table.

    Args:
        abundance_matrix: 2-D numpy array or DataFrame with the abundances,
            rows being features and columns assays. The order of the columns
            has to match the order of the assays in the MTD section.

    Returns:
        DataFrame with the ``SMF_ID`` column (1 to number of features) and one
        ``abundance_assay[i]`` column per assay.
    """
    if isinstance(abundance_matrix, pd.DataFrame):
        smf_df = abundance_matrix.reset_index(drop=True).copy()
    elif isinstance(abundance_matrix, np.ndarray) and abundance_matrix.ndim == 2:
        smf_df = pd.DataFrame(abundance_matrix)
    else:
        raise TypeError("Input must be a matrix or data frame of abundances.")
    n_features, n_assays = smf_df.shape
    smf_df.columns = [f"abundance_assay[{i}]" for i in range(1, n_assays + 1)]
    smf_df.insert(0, "SMF_ID", np.arange(1, n_features + 1))
    return smf_df


def smf_create(
    smf_df: Any,
    exp_mass_to_charge: Any = None,
    retention_time_in_seconds: Any = None,
    retention_time_in_seconds_start: Any = None,
    retention_time_in_seconds_end: Any = None,
    SME_ID_REFS: Any = None,
    SME_ID_REF_ambiguity_code: Any = None,
    charge: Any = None,
    adduct_ion: Any = None,
    isotopomer: Any = None,
    **optional_columns: Any,
) -> pd.DataFrame:
    """
    Create the mzTab-M Small Molecule Feature (SMF) table.

    Takes a matrix of abundances (rows being features, columns assays) and
    optional vectors with feature properties. The abundance columns are
    renamed to ``abundance_assay[i]``, ``SMF_ID`` and the line prefix column
    ``SFH`` are added and all standard columns that are not provided are
    filled with ``"null"``.

    Args:
        smf_df: 2-D numpy array or DataFrame of abundances.
        exp_mass_to_charge: experimental m/z of each feature (mandatory).
        retention_time_in_seconds: retention time of each feature.
        retention_time_in_seconds_start: start of the retention time window.
        retention_time_in_seconds_end: end of the retention time window.
        SME_ID_REFS: references to the small molecule evidence.
        SME_ID_REF_ambiguity_code: ambiguity codes of ``SME_ID_REFS``.
        charge: charge state of each feature.
        adduct_ion: adduct of each feature, e.g. ``"[M+H]+"``.
        isotopomer: isotopomer description.
        **optional_columns: additional columns. Their names get the prefix
            ``"opt_"`` if they don't already start with it.

    Returns:
        DataFrame with the standard SMF columns in the order defined by
        mzTab-M, followed by the abundance and the optional columns.

    Raises:
        MissingRequiredError: if ``exp_mass_to_charge`` is not provided.
        LengthMismatchError: if a column's values do not match the number
            of features.
        TypeError: if ``smf_df`` is not a matrix or DataFrame.

    Examples:
        >>> abundances = np.array([[100.1, 105.2], [200.5, 198.2]])
        >>> smf_create(abundances, exp_mass_to_charge=[150.05, 200.10],
        ...            adduct_ion=["[M+H]+", "[M+Na]+"],
        ...            global_custom_attribute=["A", "B"])
    """
    if exp_mass_to_charge is None:
        raise MissingRequiredError(
            "The argument 'exp_mass_to_charge' is mandatory and cannot be None.",
            parameter="exp_mass_to_charge",
        )
    smf_df = smf_abundance_matrix(smf_df)
    n = len(smf_df)
    cols_to_fill = {
        "SME_ID_REFS": SME_ID_REFS,
        "SME_ID_REF_ambiguity_code": SME_ID_REF_ambiguity_code,
        "adduct_ion": adduct_ion,
        "isotopomer": isotopomer,
        "exp_mass_to_charge": exp_mass_to_charge,
        "charge": charge,
        "retention_time_in_seconds": retention_time_in_seconds,
        "retention_time_in_seconds_start": retention_time_in_seconds_start,
        "retention_time_in_seconds_end": retention_time_in_seconds_end,
    }
    smf_df["SFH"] = "SMF"
    for name, values in cols_to_fill.items():
        smf_df[name] = fill_column(values, n, name)

    opt_cols = []
    for name, values in optional_columns.items():
        column = name if name.startswith("opt_") else f"opt_{name}"
        smf_df[column] = fill_column(values, n, column)
        opt_cols.append(column)

    abundance_cols = [c for c in smf_df.columns if c.startswith("abundance_assay")]
    logger.debug(
        f"Created SMF table with {n} feature(s) and {len(abundance_cols)} assay(s)"
    )
    return smf_df[list(SMF_COLUMNS) + abundance_cols + opt_cols]
