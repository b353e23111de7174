"""
Defining the mzTab-M metadata (MTD) section.

The MTD section is a list of (field, value) rows describing the experiment.
The functions of this module help re-arranging and reformatting information
available e.g. as DataFrames into these fields. They define only the core
elements; additional (optional) fields might need to be added manually.

Generally, MTD data can be categorized into the following parts:
- mtd_skeleton: general information on the experiment, software and the
  controlled vocabularies used
- mtd_sample: (optional) information on the individual samples
- mtd_ms_run: the MS runs, i.e. the data files
- mtd_assay: the assays and the MS run(s) they were measured in
- mtd_study_variables: the experimental conditions of the assays

The relationship between the entities:
- one ms_run is the measurement of one assay
- one assay can be measured by several MS runs (if fractionated) or multiple
  assays can be measured in the same MS run (if multiplexed)
- one assay is (generally) one sample, but the same sample can be measured
  with multiple assays

mtd_fields() formats arbitrary additional elements (e.g. instrument,
sample_processing) and mtd_sort()/mtd_combine() put all fields in the
expected order.
"""

from .assay import mtd_assay
from .fields import mtd_fields
from .ms_run import mtd_ms_run
from .sample import mtd_sample
from .skeleton import mtd_skeleton
from .sort import mtd_combine, mtd_sort
from .study_variable import mtd_define_study_variables, mtd_study_variables

__all__ = [
    "mtd_assay",
    "mtd_combine",
    "mtd_define_study_variables",
    "mtd_fields",
    "mtd_ms_run",
    "mtd_sample",
    "mtd_skeleton",
    "mtd_sort",
    "mtd_study_variables",
]
