# mztabm/mtd/skeleton.py
"""Core (general) information of the MTD section."""

import logging
from typing import Any, List, Sequence

import pandas as pd

from ..config import DEFAULTS
from ..core.types import RankedRow, rows_to_frame
from ..core.values import as_str, as_vector
from ..errors import LengthMismatchError, MissingRequiredError
from .fields import field_block
from .sort import mtd_sort

logger = logging.getLogger(__name__)


def cv_fields(
    label: Any = None, full_name: Any = None, version: Any = None, uri: Any = None
) -> List[RankedRow]:
    """Rows of the ``cv`` element. Without labels no rows are created."""
    label = as_vector(label)
    if not label:
        return []
    return field_block(
        [
            ("label", label),
            ("full_name", as_vector(full_name)),
            ("version", as_vector(version)),
            ("uri", as_vector(uri)),
        ],
        "cv",
    )


def database_fields(
    database: Any = None, prefix: Any = None, version: Any = None, uri: Any = None
) -> List[RankedRow]:
    """Rows of the ``database`` element. Without databases no rows are created."""
    database = as_vector(database)
    if not database:
        return []
    return field_block(
        [
            ("", database),
            ("prefix", as_vector(prefix)),
            ("version", as_vector(version)),
            ("uri", as_vector(uri)),
        ],
        "database",
    )


def mtd_skeleton(
    id: Any = None,
    software: Any = None,
    quantification_method: str = DEFAULTS.quantification_method,
    cv_label: Sequence[str] = DEFAULTS.cv_label,
    cv_full_name: Sequence[str] = DEFAULTS.cv_full_name,
    cv_version: Sequence[str] = DEFAULTS.cv_version,
    cv_uri: Sequence[str] = DEFAULTS.cv_uri,
    database: Sequence[str] = DEFAULTS.database,
    database_prefix: Sequence[str] = DEFAULTS.database_prefix,
    database_version: Sequence[str] = DEFAULTS.database_version,
    database_uri: Sequence[str] = DEFAULTS.database_uri,
    small_molecule_quantification_unit: str = DEFAULTS.small_molecule_quantification_unit,
    small_molecule_feature_quantification_unit: str = DEFAULTS.small_molecule_feature_quantification_unit,
    small_molecule_identification_reliability: str = DEFAULTS.small_molecule_identification_reliability,
    mztab_version: str = DEFAULTS.mztab_version,
) -> pd.DataFrame:
    """
    Create a skeleton MTD section with the general information of a data set.

    The result contains only the minimal set of fields and is expected to be
    completed with additional fields (title, description, instrument, ...),
    e.g. created with ``mtd_fields()``. It should reference **all** controlled
    vocabularies used in the mzTab-M file.

    Args:
        id: ID of the data set (mandatory).
        software: software(s) used, in the order in which they were used
            (mandatory).
        quantification_method: CV term of the quantification method.
        cv_label: short-hand labels of the controlled vocabularies, e.g.
            ``"MS"`` for PSI-MS.
        cv_full_name: full names of the controlled vocabularies.
        cv_version: versions of the controlled vocabularies.
        cv_uri: URIs of the controlled vocabularies.
        database: database(s) used for annotation. Use
            ``'[,, "no database", null ]'`` if no annotation was performed.
        database_prefix: prefix used in the identifier column of the data
            tables, ``"null"`` for no database.
        database_version: database version(s).
        database_uri: URI(s) of the database(s), ``"null"`` for no database.
        small_molecule_quantification_unit: unit of the small molecule
            summary abundance values.
        small_molecule_feature_quantification_unit: unit of the small
            molecule feature abundance values.
        small_molecule_identification_reliability: system used for the
            identification reliability codes.
        mztab_version: version of the mzTab-M format.

    Returns:
        Sorted two-column MTD section.

    Raises:
        MissingRequiredError: if ``id`` or ``software`` is not provided.
        LengthMismatchError: if ``id`` is not a single value or the cv or
            database vectors differ in length.
    """
    ids = as_vector(id)
    if not ids:
        raise MissingRequiredError("Parameter 'id' is required", parameter="id")
    if len(ids) != 1:
        raise LengthMismatchError(
            f"Parameter 'id' has to be a single value, got {len(ids)}",
            parameter="id",
        )
    software = as_vector(software)
    if not software:
        raise MissingRequiredError(
            "Parameter 'software' is required", parameter="software"
        )
    rows = [
        ("mzTab-version", as_str(mztab_version)),
        ("mzTab-ID", ids[0]),
    ]
    rows += field_block([("", software)], "software")
    rows.append(("quantification_method", as_str(quantification_method)))
    rows += cv_fields(cv_label, cv_full_name, cv_version, cv_uri)
    rows += database_fields(database, database_prefix, database_version, database_uri)
    rows += [
        (
            "small_molecule-quantification_unit",
            as_str(small_molecule_quantification_unit),
        ),
        (
            "small_molecule_feature-quantification_unit",
            as_str(small_molecule_feature_quantification_unit),
        ),
        (
            "small_molecule-identification_reliability",
            as_str(small_molecule_identification_reliability),
        ),
    ]
    logger.debug(f"Created MTD skeleton with {len(rows)} fields for '{ids[0]}'")
    return mtd_sort(rows_to_frame(rows))
