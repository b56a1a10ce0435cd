"""Tests for key-path lookup and drift classification."""

from __future__ import annotations

import pytest

from version_guard.utils.key_path import lookup, scalar_to_str
from version_guard.utils.version_compare import classify_drift, parse_version


class TestLookup:
    """Tests for lookup."""

    def test_top_level(self) -> None:
        assert lookup({"version": "1.0.0"}, "version") == "1.0.0"

    def test_nested(self) -> None:
        assert lookup({"tool": {"poetry": {"version": "2.0"}}}, "tool.poetry.version") == "2.0"

    def test_list_index(self) -> None:
        assert lookup({"items": [{"v": "a"}, {"v": "b"}]}, "items.1.v") == "b"

    def test_missing_segment(self) -> None:
        assert lookup({"tool": {}}, "tool.poetry.version") is None

    def test_non_mapping_document(self) -> None:
        assert lookup(["version"], "version") is None
        assert lookup(None, "version") is None

    def test_index_out_of_range(self) -> None:
        assert lookup({"items": []}, "items.0") is None


class TestScalarToStr:
    """Tests for scalar_to_str."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("1.2.3", "1.2.3"),
            (1, "1"),
            (1.5, "1.5"),
            (True, "true"),
            (None, None),
            ({"a": 1}, None),
            ([1], None),
        ],
    )
    def test_conversion(self, value, expected) -> None:
        assert scalar_to_str(value) == expected


class TestClassifyDrift:
    """Tests for classify_drift."""

    def test_behind_patch(self) -> None:
        assert classify_drift("0.3.1", "0.3.0") == "behind (patch)"

    def test_ahead_minor(self) -> None:
        assert classify_drift("0.3.1", "0.4.0") == "ahead (minor)"

    def test_behind_major(self) -> None:
        assert classify_drift("2.0.0", "1.9.9") == "behind (major)"

    def test_leading_v_is_same_release(self) -> None:
        assert classify_drift("1.2.3", "v1.2.3") == "same release"

    def test_not_comparable(self) -> None:
        assert classify_drift("1.2.3", "main") == "not comparable"

    def test_parse_version_rejects_garbage(self) -> None:
        assert parse_version("not-a-version") is None
        assert str(parse_version("v1.0.0")) == "1.0.0"
