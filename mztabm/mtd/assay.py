# mztabm/mtd/assay.py
"""The *assay* fields of the MTD section."""

import logging
from typing import Any

import pandas as pd

from ..core.types import empty_section, order_by_rank
from ..core.values import as_slots, as_vector, broadcast, is_nested
from ..errors import LengthMismatchError, MissingReferenceError, MissingRequiredError
from .fields import custom_fields, indexed_fields, multi_fields

logger = logging.getLogger(__name__)


def mtd_assay(
    *custom: Any,
    assay: Any = None,
    external_uri: Any = None,
    sample_ref: Any = None,
    ms_run_ref: Any = None,
) -> pd.DataFrame:
    """
    Create the *assay* fields of the MTD section.

    Each assay has to be associated with at least one MS run (see
    ``mtd_ms_run()``) and has to be reported as a column in the following
    abundance tables. In most cases one assay is measured in one MS run.
    Multiplexed assays share the same run, pre-fractionated samples are
    measured in several runs: ``ms_run_ref`` then takes a list of run
    references for each assay.

    Args:
        *custom: optional custom information, one vector per custom field
            with one value per assay.
        assay: names of the assays.
        external_uri: reference to further information on the assay, e.g.
            an ISA-TAB file. A single value is used for all assays.
        sample_ref: reference to the sample of each assay, e.g.
            ``"sample[1]"``.
        ms_run_ref: reference to the MS run of each assay, e.g.
            ``"ms_run[1]"``, or a list of references per assay.

    Returns:
        Two-column MTD section, empty if no assays are provided.

    Raises:
        MissingRequiredError: if ``ms_run_ref`` is not provided.
        MissingReferenceError: if an assay has an empty list of run
            references.
        LengthMismatchError: if a parameter does not match the number of
            assays.

    Examples:
        >>> mtd_assay(assay=["a1", "a2"],
        ...           ms_run_ref=["ms_run[1]", "ms_run[2]"],
        ...           sample_ref=["sample[1]", "sample[1]"])
        >>> # pre-fractionated samples
        >>> mtd_assay(assay=["a1", "a2"],
        ...           ms_run_ref=[["ms_run[1]", "ms_run[2]"],
        ...                       ["ms_run[3]", "ms_run[4]"]])
    """
    assay = as_vector(assay)
    n = len(assay)
    if not n:
        return empty_section()
    nested = is_nested(ms_run_ref)
    run_refs = as_slots(ms_run_ref) if nested else as_vector(ms_run_ref)
    if not run_refs:
        raise MissingRequiredError(
            "Parameter 'ms_run_ref' is required", parameter="ms_run_ref"
        )
    if len(run_refs) != n:
        raise LengthMismatchError(
            "lengths of parameters 'assay' and 'ms_run_ref' have to match",
            parameter="ms_run_ref",
        )

    rows = indexed_fields("assay", assay)
    external_uri = as_vector(external_uri)
    if external_uri:
        external_uri = broadcast(external_uri, n, "external_uri", section="assay")
        rows += indexed_fields("assay", external_uri, "external_uri")
    sample_ref = as_vector(sample_ref)
    if sample_ref:
        if len(sample_ref) != n:
            raise LengthMismatchError(
                "Length of 'sample_ref' has to match the length of 'assay'",
                parameter="sample_ref",
            )
        rows += indexed_fields("assay", sample_ref, "sample_ref")
    if nested:
        empty = [i for i, refs in enumerate(run_refs, start=1) if not refs]
        if empty:
            raise MissingReferenceError(
                "At least one ms_run reference must be defined for each assay, "
                f"missing for assay(s) {', '.join(map(str, empty))}",
                parameter="ms_run_ref",
            )
        rows += multi_fields(run_refs, "assay", "ms_run_ref")
    else:
        rows += indexed_fields("assay", run_refs, "ms_run_ref")

    rows += custom_fields(*custom, prefix="assay", expected_length=n)
    logger.debug(f"Formatted {n} assay(s) into {len(rows)} MTD fields")
    return order_by_rank(rows)
