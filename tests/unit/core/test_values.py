import numpy as np
import pandas as pd
import pytest

from mztabm.core.values import (
    as_slots,
    as_str,
    as_vector,
    broadcast,
    is_missing,
    is_nested,
    is_scalar,
)
from mztabm.errors import LengthMismatchError


@pytest.mark.parametrize(
    "value, expected",
    [("a", True), (b"a", True), (1, True), (None, True), (["a"], False), (("a",), False)],
)
def test_is_scalar(value, expected):
    assert is_scalar(value) is expected


def test_is_missing():
    assert is_missing(None)
    assert is_missing(np.nan)
    assert is_missing(pd.NA)
    assert not is_missing("null")
    assert not is_missing(0)
    assert not is_missing([None])


def test_as_str():
    assert as_str(None) == "null"
    assert as_str(float("nan")) == "null"
    assert as_str(b"abc") == "abc"
    assert as_str(100.1) == "100.1"
    assert as_str(True) == "True"


class TestVectors:
    """Test the conversion of parameters to lists of strings."""

    def test_as_vector(self):
        assert as_vector(None) == []
        assert as_vector("a") == ["a"]
        assert as_vector([1, None, "b"]) == ["1", "null", "b"]
        assert as_vector(pd.Series([1, 2])) == ["1", "2"]
        assert as_vector(np.array(["x", "y"])) == ["x", "y"]

    def test_as_slots(self):
        assert as_slots(None) == []
        assert as_slots("a") == [["a"]]
        assert as_slots([["a", "b"], None, 3, []]) == [["a", "b"], [], ["3"], []]

    def test_is_nested(self):
        assert not is_nested(None)
        assert not is_nested("a")
        assert not is_nested(["a", "b"])
        assert is_nested([["a"], "b"])
        assert is_nested(["a", None])


class TestBroadcast:
    """Test the expansion of single values."""

    def test_same_length(self):
        values = ["a", "b"]
        assert broadcast(values, 2, "x") is values

    def test_single_value(self):
        assert broadcast(["a"], 3, "x") == ["a", "a", "a"]
        assert broadcast([["a", "b"]], 2, "x") == [["a", "b"], ["a", "b"]]

    def test_mismatch(self):
        with pytest.raises(LengthMismatchError, match="sample: parameter 'x'") as exc_info:
            broadcast(["a", "b"], 3, "x", section="sample")
        assert exc_info.value.parameter == "x"
        assert "got length 2" in str(exc_info.value)
