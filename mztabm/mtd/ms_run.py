# mztabm/mtd/ms_run.py
"""The *ms_run* fields of the MTD section."""

import logging
from typing import Any, List

import pandas as pd

from ..config import SCAN_POLARITY_TERMS
from ..core.types import order_by_rank
from ..core.values import as_slots, as_vector, broadcast
from ..errors import (
    InvalidEnumValueError,
    LengthMismatchError,
    MissingRequiredError,
    PairedParameterError,
)
from .fields import indexed_fields, multi_fields

logger = logging.getLogger(__name__)


def scan_polarity_terms(polarity: List[str]) -> List[str]:
    """Convert ``"positive"`` and ``"negative"`` to the PSI-MS CV terms."""
    invalid = [p for p in polarity if p not in SCAN_POLARITY_TERMS]
    if invalid:
        raise InvalidEnumValueError(
            "'scan_polarity' has to be either \"positive\" or \"negative\", "
            f"got {', '.join(repr(p) for p in dict.fromkeys(invalid))}",
            parameter="scan_polarity",
        )
    return [SCAN_POLARITY_TERMS[p] for p in polarity]


def _check_pair(first: List[str], second: List[str], names: tuple) -> None:
    if bool(first) != bool(second):
        raise PairedParameterError(
            f"ms_run: either both '{names[0]}' and '{names[1]}' have to be "
            "defined or none of the two.",
            parameter=names[1] if first else names[0],
        )


def mtd_ms_run(
    location: Any = None,
    instrument_ref: Any = None,
    format: Any = None,
    id_format: Any = None,
    fragmentation_method: Any = None,
    scan_polarity: Any = None,
    hash: Any = None,
    hash_method: Any = None,
) -> pd.DataFrame:
    """
    Create the *ms_run* fields of the MTD section.

    Each element of ``location`` is one MS run, i.e. one data file.

    Args:
        location: location (and file name) of each run. Required, use
            ``"null"`` if the location of the file(s) is not known.
        instrument_ref: index of the instrument each run was measured on.
            A single index is used for all runs.
        format: CV term of the data file format, e.g.
            ``"[MS, MS:1000584, mzML file, ]"``. Requires ``id_format``.
        id_format: CV term of the spectrum id format, e.g.
            ``"[MS, MS:1000530, mzML unique identifier, ]"``. Requires
            ``format``.
        fragmentation_method: one element per run with the fragmentation
            method(s) used in that run, ``None`` for runs without
            fragmentation.
        scan_polarity: ``"positive"`` or ``"negative"``, a single value or
            one per run. Only a single polarity per run is supported.
        hash: hash of each data file. Requires ``hash_method``.
        hash_method: CV term of the method used to calculate ``hash``. A single
            value is used for all runs.

    Returns:
        Two-column MTD section.

    Raises:
        MissingRequiredError: if ``location`` or ``scan_polarity`` is
            missing.
        PairedParameterError: if only one of ``format``/``id_format`` or
            ``hash``/``hash_method`` is provided.
        LengthMismatchError: if a parameter does not match the number of
            runs.
        InvalidEnumValueError: for an unknown scan polarity.

    Examples:
        >>> fls = ["file:///path/to/a.mzML", "file:///path/to/b.mzML"]
        >>> mtd_ms_run(location=fls, scan_polarity="positive",
        ...            instrument_ref=1,
        ...            fragmentation_method=[None, "[MS, MS:1000133, CID, ]"])
    """
    location = as_vector(location)
    n = len(location)
    if not n:
        raise MissingRequiredError(
            "ms_run: parameter 'location' is required, even if it is \"null\"",
            parameter="location",
        )
    scan_polarity = as_vector(scan_polarity)
    if not scan_polarity:
        raise MissingRequiredError(
            "ms_run: parameter 'scan_polarity' is required",
            parameter="scan_polarity",
        )
    format = as_vector(format)
    id_format = as_vector(id_format)
    _check_pair(format, id_format, ("format", "id_format"))
    hash = as_vector(hash)
    hash_method = as_vector(hash_method)
    _check_pair(hash, hash_method, ("hash", "hash_method"))
    if hash and len(hash) != n:
        raise LengthMismatchError(
            "ms_run: if provided, length of parameter 'hash' has to match "
            "length of 'location'",
            parameter="hash",
        )
    fragmentation = as_slots(fragmentation_method)
    if fragmentation and len(fragmentation) != n:
        raise LengthMismatchError(
            "ms_run: length of parameter 'fragmentation_method' has to match "
            "length of 'location'",
            parameter="fragmentation_method",
        )
    scan_polarity = scan_polarity_terms(
        broadcast(scan_polarity, n, "scan_polarity", section="ms_run")
    )

    rows = indexed_fields("ms_run", location, "location")
    instrument_ref = as_vector(instrument_ref)
    if instrument_ref:
        instrument_ref = broadcast(instrument_ref, n, "instrument_ref", "ms_run")
        rows += indexed_fields(
            "ms_run", [f"instrument[{i}]" for i in instrument_ref], "instrument_ref"
        )
    if format:
        rows += indexed_fields(
            "ms_run", broadcast(format, n, "format", "ms_run"), "format"
        )
        rows += indexed_fields(
            "ms_run", broadcast(id_format, n, "id_format", "ms_run"), "id_format"
        )
    rows += multi_fields(fragmentation, "ms_run", "fragmentation_method")
    rows += indexed_fields("ms_run", scan_polarity, "scan_polarity[1]")
    if hash:
        rows += indexed_fields("ms_run", hash, "hash")
        rows += indexed_fields(
            "ms_run", broadcast(hash_method, n, "hash_method", "ms_run"), "hash_method"
        )
    logger.debug(f"Formatted {n} MS run(s) into {len(rows)} MTD fields")
    return order_by_rank(rows)
