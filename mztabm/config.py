# mztabm/config.py
"""
Default values and fixed vocabularies for mzTab-M formatting.

The defaults describe a label-free LC-MS experiment without compound
annotation, quantified in arbitrary units. They are used as parameter
defaults by ``mtd_skeleton()`` and ``mtd_study_variables()`` and can be
overridden per call.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple

# Explicit missing-value marker of the mzTab-M format
NULL = "null"


@dataclass(frozen=True)
class MTDDefaults:
    """Default values for the core MTD fields."""

    mztab_version: str = "2.0.0-M"
    quantification_method: str = (
        "[MS, MS:1001834, LC-MS label-free quantitation analysis, ]"
    )
    cv_label: Tuple[str, ...] = ("MS", "PRIDE")
    cv_full_name: Tuple[str, ...] = (
        "PSI-MS controlled vocabulary",
        "PRIDE PRoteomics IDEntifications (PRIDE) database controlled vocabulary",
    )
    cv_version: Tuple[str, ...] = ("4.1.138", "16:10:2023 11:38")
    cv_uri: Tuple[str, ...] = (
        "https://raw.githubusercontent.com/HUPO-PSI/psi-ms-CV/master/psi-ms.obo",
        "https://www.ebi.ac.uk/ols/ontologies/pride",
    )
    database: Tuple[str, ...] = ('[,, "no database", null ]',)
    database_prefix: Tuple[str, ...] = (NULL,)
    database_version: Tuple[str, ...] = ("Unknown",)
    database_uri: Tuple[str, ...] = (NULL,)
    small_molecule_quantification_unit: str = (
        "[PRIDE, PRIDE:0000330, Arbitrary quantification unit, ]"
    )
    small_molecule_feature_quantification_unit: str = (
        "[PRIDE, PRIDE:0000330, Arbitrary quantification unit, ]"
    )
    small_molecule_identification_reliability: str = (
        "[MS, MS:1002896, compound identification confidence level, ]"
    )
    average_function: str = "[MS, MS:1002962, mean, ]"
    variation_function: str = "[MS, MS:1002963, variation coefficient, ]"


DEFAULTS = MTDDefaults()

SCAN_POLARITY_TERMS = MappingProxyType(
    {
        "positive": "[MS, MS:1000130, positive scan, ]",
        "negative": "[MS, MS:1000129, negative scan, ]",
    }
)

# Field name prefixes in the order they have to appear in the MTD section
MTD_FIELD_ORDER: Tuple[str, ...] = (
    "mzTab-version",
    "mzTab-ID",
    "title",
    "description",
    "sample_processing",
    "instrument",
    "software",
    "publication",
    "contact",
    "uri",
    "external_study",
    "quantification",
    "sample",
    "ms_run",
    "assay",
    "study_variable",
    "custom",
    "cv",
    "database",
    "derivatization",
    "small_molecule-quantification",
    "small_molecule_feature",
    "small_molecule-identification",
    "id_confidence",
    "colunit-small_molecule",
    "colunit-small_molecule_feature",
    "colunit-small_molecule_evidence",
)

# Standard columns of the small molecule feature (SMF) table, in order
SMF_COLUMNS: Tuple[str, ...] = (
    "SFH",
    "SMF_ID",
    "SME_ID_REFS",
    "SME_ID_REF_ambiguity_code",
    "adduct_ion",
    "isotopomer",
    "exp_mass_to_charge",
    "charge",
    "retention_time_in_seconds",
    "retention_time_in_seconds_start",
    "retention_time_in_seconds_end",
)
