import pytest

from mztabm.core.types import MTD_COLUMNS, RankedRow
from mztabm.errors import LengthMismatchError
from mztabm.mtd.fields import (
    custom_fields,
    field_block,
    indexed_fields,
    mtd_fields,
    multi_fields,
)


class TestMtdFields:
    """Test the indexed field builder."""

    def test_named_fields(self):
        """Test a block with named attributes only (cv element)."""
        res = mtd_fields(
            label=["a", "b", "c"],
            full_name=["A", "B", "C"],
            version=[1, 2, 3],
            uri=["u1", "u2", "u3"],
            field_prefix="cv",
        )
        assert list(res.columns) == MTD_COLUMNS
        assert len(res) == 12
        assert list(res["field"]) == [
            "cv[1]-label", "cv[1]-full_name", "cv[1]-version", "cv[1]-uri",
            "cv[2]-label", "cv[2]-full_name", "cv[2]-version", "cv[2]-uri",
            "cv[3]-label", "cv[3]-full_name", "cv[3]-version", "cv[3]-uri",
        ]
        assert list(res["value"]) == [
            "a", "A", "1", "u1", "b", "B", "2", "u2", "c", "C", "3", "u3",
        ]

    def test_single_value(self):
        """Test a single unnamed value."""
        res = mtd_fields("[MS, MS:1002879, Progenesis QI, 3.0]", field_prefix="software")
        assert list(res["field"]) == ["software[1]"]
        assert list(res["value"]) == ["[MS, MS:1002879, Progenesis QI, 3.0]"]

    def test_primary_value_with_attributes(self):
        """Test an unnamed vector combined with named attributes."""
        res = mtd_fields(
            ["[MITIAM, MRI:00100079, HMDB, ]", "[,, de novo, ]"],
            prefix=["hmdb", "dn"],
            version=["3.6", "Unknown"],
            uri=["http://www.hmdb.ca", "null"],
            field_prefix="database",
        )
        assert list(res["field"]) == [
            "database[1]", "database[1]-prefix", "database[1]-version",
            "database[1]-uri",
            "database[2]", "database[2]-prefix", "database[2]-version",
            "database[2]-uri",
        ]
        assert list(res["value"])[4:] == ["[,, de novo, ]", "dn", "Unknown", "null"]

    def test_bracketed_attribute_names(self):
        """Test attribute names with an index, passed via a dict."""
        res = mtd_fields(
            name="[MS, MS:1000449, LTQ Orbitrap,]",
            source="[MS, MS:1000073, ESI,]",
            **{"analyzer[1]": "[MS, MS:1000291, linear ion trap,]"},
            field_prefix="instrument",
        )
        assert list(res["field"]) == [
            "instrument[1]-name",
            "instrument[1]-source",
            "instrument[1]-analyzer[1]",
        ]

    def test_length_one_vectors_are_recycled(self):
        """Test that a single value is used for every element."""
        res = mtd_fields(
            ["set 1", "set 2", "set 3"], version="1.0", field_prefix="software"
        )
        assert list(res["value"]) == ["set 1", "1.0", "set 2", "1.0", "set 3", "1.0"]

    def test_length_mismatch(self):
        """Test that vectors of different length are rejected."""
        with pytest.raises(LengthMismatchError, match="elements must match"):
            mtd_fields(label=["a", "b"], version=["1", "2", "3"], field_prefix="cv")

        with pytest.raises(LengthMismatchError) as exc_info:
            mtd_fields(label="a", full_name=[], field_prefix="cv")
        assert exc_info.value.parameter == "full_name"

    def test_multiple_unnamed_vectors(self):
        """Test that only one unnamed vector is accepted."""
        with pytest.raises(TypeError, match="single unnamed"):
            mtd_fields(["a"], ["b"], field_prefix="software")

    def test_no_values(self):
        """Test that no input gives an empty section."""
        res = mtd_fields(field_prefix="cv")
        assert len(res) == 0
        assert list(res.columns) == MTD_COLUMNS

    @pytest.mark.parametrize("n", [0, 1, 2, 10, 12])
    def test_row_count_and_indices(self, n):
        """Test number of rows and contiguous, ascending indices."""
        res = mtd_fields(
            [f"v{i}" for i in range(n)],
            a=[str(i) for i in range(n)],
            b=[str(i) for i in range(n)],
            field_prefix="x",
        )
        assert len(res) == n * 3
        expected = [
            f"x[{i}]{suffix}" for i in range(1, n + 1) for suffix in ("", "-a", "-b")
        ]
        assert list(res["field"]) == expected


def test_field_block_ranks():
    """Test that rows carry the element index as rank."""
    rows = field_block([("", ["a", "b"]), ("uri", ["u", "v"])], "database")
    assert [r.rank for r in rows] == [1, 1, 2, 2]
    assert field_block([], "database") == []


def test_indexed_fields():
    """Test rows for a single attribute."""
    rows = indexed_fields("ms_run", ["A", "B", "C"], "test")
    assert rows == [
        RankedRow("ms_run[1]-test", "A", 1),
        RankedRow("ms_run[2]-test", "B", 2),
        RankedRow("ms_run[3]-test", "C", 3),
    ]
    rows = indexed_fields("sample", ["a", "b"])
    assert [r.field for r in rows] == ["sample[1]", "sample[2]"]


class TestMultiFields:
    """Test the multi-value field expander."""

    def test_one_value_per_entity(self):
        rows = multi_fields([["homo_sapiens"], ["mus_musculus"]], "sample", "species")
        assert [r.field for r in rows] == ["sample[1]-species[1]", "sample[2]-species[1]"]
        assert [r.value for r in rows] == ["homo_sapiens", "mus_musculus"]

    def test_empty_slots_are_skipped(self):
        """Test that entities without values produce no rows."""
        rows = multi_fields([["a", "b"], [], ["c"]], prefix="sample", suffix="species")
        assert rows == [
            RankedRow("sample[1]-species[1]", "a", 1),
            RankedRow("sample[1]-species[2]", "b", 1),
            RankedRow("sample[3]-species[1]", "c", 3),
        ]

    def test_no_slots(self):
        assert multi_fields([], "sample", "species") == []
        assert multi_fields([[], []], "sample", "species") == []


class TestCustomFields:
    """Test the custom field attacher."""

    def test_no_custom_fields(self):
        """Test that no custom information is not an error."""
        assert custom_fields(expected_length=3) == []

    def test_length_mismatch(self):
        """Test that vectors are not recycled."""
        with pytest.raises(LengthMismatchError, match="length has to match the length"):
            custom_fields([1, 2, 3], ["a", "b"], expected_length=3)

        with pytest.raises(LengthMismatchError):
            custom_fields(["a"], expected_length=3)

    def test_custom_fields(self):
        rows = custom_fields([1, 2, 3], ["a", "b", "c"], expected_length=3)
        assert [r.field for r in rows] == [
            "sample[1]-custom[1]", "sample[2]-custom[1]", "sample[3]-custom[1]",
            "sample[1]-custom[2]", "sample[2]-custom[2]", "sample[3]-custom[2]",
        ]
        assert [r.value for r in rows] == ["1", "2", "3", "a", "b", "c"]
        assert [r.rank for r in rows] == [1, 2, 3, 1, 2, 3]

    def test_prefix(self):
        rows = custom_fields(["x"], prefix="assay", expected_length=1)
        assert rows == [RankedRow("assay[1]-custom[1]", "x", 1)]
