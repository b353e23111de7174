import logging

import pandas as pd
import pytest

from mztabm.mtd import mtd_combine, mtd_sample, mtd_sort


class TestMtdSort:
    """Test the ordering of MTD fields."""

    def test_order(self):
        x = pd.DataFrame(
            {
                "field": ["cv[1]-label", "sample[1]", "mzTab-ID", "mzTab-version"],
                "value": ["MS", "a", "x", "2.0.0-M"],
            }
        )
        res = mtd_sort(x)
        assert list(res["field"]) == [
            "mzTab-version",
            "mzTab-ID",
            "sample[1]",
            "cv[1]-label",
        ]
        assert list(res["value"]) == ["2.0.0-M", "x", "a", "MS"]
        assert list(res.index) == [0, 1, 2, 3]

    def test_prefix_order(self):
        fields = ["custom[1]", "sample[1]", "cv[1]-label", "sample[2]"]
        res = mtd_sort([(f, "x") for f in fields])
        assert list(res["field"]) == [
            "sample[1]",
            "sample[2]",
            "custom[1]",
            "cv[1]-label",
        ]

    def test_stable(self):
        """Test that rows of the same group keep their order."""
        fields = ["sample[2]", "assay[1]", "sample[10]", "sample[1]-species[1]"]
        res = mtd_sort(list(zip(fields, ["a", "b", "c", "d"])))
        assert list(res["field"]) == [
            "sample[2]",
            "sample[10]",
            "sample[1]-species[1]",
            "assay[1]",
        ]

    def test_unknown_fields_last(self, caplog):
        x = [("my_field", "1"), ("title", "t"), ("other", "2")]
        with caplog.at_level(logging.DEBUG, logger="mztabm"):
            res = mtd_sort(x)
        assert list(res["field"]) == ["title", "my_field", "other"]
        assert "my_field" in caplog.text

    def test_sorted_input_unchanged(self):
        res = mtd_sample(sample=["a", "b"], species="human")
        assert mtd_sort(res).equals(res)
        assert mtd_sort(mtd_sort(res)).equals(mtd_sort(res))

    def test_first_matching_prefix(self):
        """Test that a field is ranked by the first prefix it starts with."""
        res = mtd_sort([("sample[1]", "a"), ("sample_processing[1]", "p")])
        assert list(res["field"]) == ["sample_processing[1]", "sample[1]"]

    def test_column_names(self):
        """Test that the first two columns are used whatever their names."""
        x = pd.DataFrame({"key": ["cv[1]-label", "mzTab-ID"], "val": ["MS", "x"]})
        res = mtd_sort(x)
        assert list(res.columns) == ["field", "value"]
        assert list(res["field"]) == ["mzTab-ID", "cv[1]-label"]

    def test_non_string_values(self):
        """Test that DataFrame input is rendered as strings before sorting."""
        x = pd.DataFrame({"field": [1, "mzTab-ID"], "value": [2.5, None]})
        res = mtd_sort(x)
        assert list(res["field"]) == ["mzTab-ID", "1"]
        assert list(res["value"]) == ["null", "2.5"]

    def test_invalid_input(self):
        with pytest.raises(TypeError):
            mtd_sort(pd.DataFrame({"field": ["a"]}))


class TestMtdCombine:
    """Test combining several sections."""

    def test_combine(self):
        samples = mtd_sample(sample=["a"])
        res = mtd_combine(samples, [("mzTab-ID", "x")])
        assert list(res["field"]) == ["mzTab-ID", "sample[1]"]
        assert list(res.index) == [0, 1]

    def test_no_sort(self):
        res = mtd_combine([("title", "t")], [("mzTab-ID", "x")], sort=False)
        assert list(res["field"]) == ["title", "mzTab-ID"]

    def test_empty(self):
        assert len(mtd_combine()) == 0
        res = mtd_combine(mtd_sample(), [("mzTab-ID", "x")])
        assert list(res["field"]) == ["mzTab-ID"]
