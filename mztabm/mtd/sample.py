# mztabm/mtd/sample.py
"""The *sample* fields of the MTD section."""

import logging
from typing import Any, List

import pandas as pd

from ..core.types import RankedRow, empty_section, order_by_rank
from ..core.values import as_slots, as_vector, broadcast
from ..errors import LengthMismatchError
from .fields import custom_fields, indexed_fields, multi_fields

logger = logging.getLogger(__name__)


def _property_fields(values: Any, name: str, n_samples: int) -> List[RankedRow]:
    slots = as_slots(values)
    if not slots:
        return []
    slots = broadcast(slots, n_samples, name, section="sample")
    return multi_fields(slots, "sample", name)


def mtd_sample(
    *custom: Any,
    sample: Any = None,
    species: Any = None,
    tissue: Any = None,
    cell_type: Any = None,
    disease: Any = None,
    description: Any = None,
) -> pd.DataFrame:
    """
    Create the (optional) *sample* fields of the MTD section.

    One entry should be defined for each originating sample. If defined, the
    samples have to be referenced from the assays (``sample_ref`` of
    ``mtd_assay()``) by their index.

    Each sample can have one or more ``species``, ``tissue``, ``cell_type``
    and ``disease``. These parameters take one element per sample, each
    element being a single value, a list of values or ``None`` (no value for
    that sample). A single value is assigned to every sample.

    Args:
        *custom: optional custom information, one vector per custom field
            with one value per sample.
        sample: names of the samples.
        species: species of each sample.
        tissue: tissue(s) of each sample.
        cell_type: cell type(s) of each sample.
        disease: disease(s) of each sample.
        description: one description per sample.

    Returns:
        Two-column MTD section, empty if no samples are provided.

    Raises:
        LengthMismatchError: if any parameter does not match the number of
            samples.

    Examples:
        >>> mtd_sample(
        ...     sample=["ind_1", "ind_2"],
        ...     species=[["[NCBITaxon, NCBITaxon:9606, Homo sapiens, ]",
        ...               "[NCBITaxon, NCBITaxon:39767, Human rhinovirus 11, ]"],
        ...              "[NCBITaxon, NCBITaxon:9606, Homo sapiens, ]"],
        ...     tissue="[BTO, BTO:0000759, liver, ]",
        ...     disease=[["[DOID, DOID:684, hepatocellular carcinoma, ]"], None])
    """
    sample = as_vector(sample)
    n = len(sample)
    if not n:
        return empty_section()

    rows = indexed_fields("sample", sample)
    for name, values in (
        ("species", species),
        ("tissue", tissue),
        ("cell_type", cell_type),
        ("disease", disease),
    ):
        rows += _property_fields(values, name, n)

    description = as_vector(description)
    if description:
        if len(description) != n:
            raise LengthMismatchError(
                "If provided, 'description' has to be of length equal to the "
                "number of samples",
                parameter="description",
            )
        rows += indexed_fields("sample", description, "description")

    rows += custom_fields(*custom, prefix="sample", expected_length=n)
    logger.debug(f"Formatted {n} sample(s) into {len(rows)} MTD fields")
    return order_by_rank(rows)
