"""
mztabm - Format metabolomics results into the mzTab-M exchange format.

This package provides helpers to build the metadata (MTD) section and the
small molecule feature (SMF) table of mzTab-M files from plain vectors, lists
and DataFrames. Writing the resulting tables to a file is left to the caller.
"""

import logging

from .errors import (
    InvalidEnumValueError,
    LengthMismatchError,
    MissingReferenceError,
    MissingRequiredError,
    MzTabError,
    PairedParameterError,
    UnsupportedFeatureError,
)
from .mtd import (
    mtd_assay,
    mtd_combine,
    mtd_define_study_variables,
    mtd_fields,
    mtd_ms_run,
    mtd_sample,
    mtd_skeleton,
    mtd_sort,
    mtd_study_variables,
)
from .smf import smf_create

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Expose main API
__all__ = [
    "__version__",
    "InvalidEnumValueError",
    "LengthMismatchError",
    "MissingReferenceError",
    "MissingRequiredError",
    "MzTabError",
    "PairedParameterError",
    "UnsupportedFeatureError",
    "mtd_assay",
    "mtd_combine",
    "mtd_define_study_variables",
    "mtd_fields",
    "mtd_ms_run",
    "mtd_sample",
    "mtd_skeleton",
    "mtd_sort",
    "mtd_study_variables",
    "smf_create",
]
