"""
Tests for argument extraction and the comma-separated list parsers.
"""

import pytest

from gitlab_mcp.core.arguments import (
    author_options,
    get_bool,
    get_int,
    get_list,
    get_string,
    missing,
    parse_int_list,
    require_string,
    split_labels,
)


# =============================================================================
# Argument Extractor Tests
# =============================================================================

class TestGetString:
    """Tests for get_string."""

    def test_returns_string_value(self):
        assert get_string({"state": "closed"}, "state", "opened") == "closed"

    def test_default_when_absent(self):
        assert get_string({}, "state", "opened") == "opened"

    def test_default_when_wrong_type(self):
        assert get_string({"state": 3}, "state", "opened") == "opened"

    def test_empty_default(self):
        assert get_string({}, "description") == ""


class TestGetInt:
    """Tests for get_int."""

    def test_accepts_int(self):
        assert get_int({"per_page": 50}, "per_page", 20) == 50

    def test_truncates_float(self):
        """JSON numbers may arrive as floats."""
        assert get_int({"per_page": 7.9}, "per_page", 20) == 7

    def test_rejects_bool(self):
        assert get_int({"per_page": True}, "per_page", 20) == 20

    def test_rejects_numeric_string(self):
        assert get_int({"per_page": "50"}, "per_page", 20) == 20

    def test_default_when_absent(self):
        assert get_int({}, "page", 1) == 1

    def test_default_for_infinity(self):
        assert get_int({"page": float("inf")}, "page", 1) == 1


class TestGetBoolAndList:
    """Tests for get_bool and get_list."""

    def test_bool_false_is_present(self):
        assert get_bool({"squash": False}, "squash") is False

    def test_bool_absent_is_none(self):
        assert get_bool({}, "squash") is None

    def test_bool_wrong_type_is_none(self):
        assert get_bool({"squash": "true"}, "squash") is None

    def test_list_value(self):
        assert get_list({"files": [1, 2]}, "files") == [1, 2]

    def test_list_wrong_type_is_none(self):
        assert get_list({"files": "a.txt"}, "files") is None


class TestRequireString:
    """Tests for require_string and missing."""

    def test_present(self):
        assert require_string({"project_id": "group/app"}, "project_id") == ("group/app", True)

    def test_empty_is_missing(self):
        assert require_string({"project_id": ""}, "project_id") == ("", False)

    def test_number_is_missing(self):
        """A numeric project_id is not a string."""
        assert require_string({"project_id": 42}, "project_id") == ("", False)

    def test_missing_message(self):
        assert missing("project_id") == "project_id is required"


class TestAuthorOptions:
    """Tests for author_options."""

    def test_only_given_fields(self):
        assert author_options({"author_name": "Ada", "author_email": ""}) == {"author_name": "Ada"}

    def test_none_given(self):
        assert author_options({}) == {}


# =============================================================================
# List Parser Tests
# =============================================================================

class TestSplitLabels:
    """Tests for split_labels."""

    def test_trims_and_drops_empty(self):
        assert split_labels(" bug , ui ,") == ["bug", "ui"]

    def test_keeps_order(self):
        assert split_labels("z,a,m") == ["z", "a", "m"]

    def test_empty_string(self):
        assert split_labels("") == []

    def test_tabs_are_trimmed(self):
        assert split_labels("\tbug\t,ui") == ["bug", "ui"]


class TestParseIntList:
    """Tests for parse_int_list."""

    def test_skips_invalid_tokens(self):
        assert parse_int_list("1, 2,,abc,3") == [1, 2, 3]

    def test_empty_string(self):
        assert parse_int_list("") == []

    @pytest.mark.parametrize("value", ["abc", " , ,", "1.5"])
    def test_nothing_valid(self, value):
        assert parse_int_list(value) == []

    def test_negative_numbers(self):
        assert parse_int_list("-1, 4") == [-1, 4]
