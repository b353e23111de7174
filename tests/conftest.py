"""
Common test fixtures for mztabm tests.
"""

import pandas as pd
import pytest


@pytest.fixture
def experiment():
    """
    Sample information of a simple experiment: 3 samples measured at two
    time points, one row per measurement (assay/MS run).
    """
    return pd.DataFrame(
        {
            "sample_name": ["S1_T1", "S1_T2", "S2_T1", "S2_T2", "S3_T1", "S3_T2"],
            "sample_id": ["S1", "S1", "S2", "S2", "S3", "S3"],
            "timepoint": ["0h", "6h", "0h", "6h", "0h", "6h"],
            "genotype": ["WT", "WT", "KO", "KO", "KO", "KO"],
            "operator": ["BB", "BB", "BB", "BB", "FB", "FB"],
            "file_name": [
                "s1-t1.mzML",
                "s1-t2.mzML",
                "s2-t1.mzML",
                "s2-t2.mzML",
                "s3-t1.mzML",
                "s3-t2.mzML",
            ],
        }
    )


@pytest.fixture
def study_design():
    """Phenodata with one row per assay."""
    return pd.DataFrame(
        {
            "name": ["I1_0", "I2_0", "I1_6", "I2_6", "I3_0"],
            "individual": ["I1", "I2", "I1", "I2", "I3"],
            "timepoint": ["0h", "6h", "0h", "6h", "0h"],
            "T2D": [True, False, True, False, False],
        }
    )
