"""Tests for argument checks and sanitization."""

import pytest

from baseline_mcp.errors import ValidationError
from baseline_mcp.validation import (
    MAX_TEXT_LENGTH,
    check_page,
    require_fields,
    require_identifier,
    require_identifiers,
    require_object,
    sanitize_structure,
    sanitize_text,
)


class TestRequireFields:
    def test_all_present(self) -> None:
        require_fields({"a": 1, "b": "x"}, ["a", "b"])

    def test_reports_first_missing_in_order(self) -> None:
        with pytest.raises(ValidationError, match="Missing required argument: b"):
            require_fields({"a": 1, "c": None}, ["a", "b", "c"])

    def test_none_counts_as_missing(self) -> None:
        with pytest.raises(ValidationError, match="Missing required argument: a"):
            require_fields({"a": None}, ["a"])

    def test_no_args(self) -> None:
        with pytest.raises(ValidationError, match="Missing required argument: a"):
            require_fields(None, ["a"])

    def test_falsy_values_are_present(self) -> None:
        require_fields({"a": 0, "b": "", "c": False}, ["a", "b", "c"])


class TestIdentifiers:
    @pytest.mark.parametrize("value", ["", "   ", 42, ["1"]])
    def test_rejects_non_strings_and_blank(self, value) -> None:
        with pytest.raises(ValidationError, match="loanId must be a non-empty string"):
            require_identifier({"loanId": value}, "loanId")

    def test_returns_value(self) -> None:
        assert require_identifier({"loanId": "12"}, "loanId") == "12"

    def test_pair(self) -> None:
        assert require_identifiers({"a": "1", "b": "2"}, "a", "b") == ("1", "2")
        with pytest.raises(ValidationError, match="a and b must be non-empty strings"):
            require_identifiers({"a": "1", "b": " "}, "a", "b")


class TestRequireObject:
    @pytest.mark.parametrize("value", ["text", 3, None, ["a"]])
    def test_rejects_non_objects(self, value) -> None:
        with pytest.raises(ValidationError, match="updates must be an object"):
            require_object({"updates": value}, "updates")

    def test_absent_is_missing(self) -> None:
        with pytest.raises(ValidationError, match="Missing required argument: updates"):
            require_object({}, "updates")

    def test_accepts_empty_mapping(self) -> None:
        assert require_object({"updates": {}}, "updates") == {}


class TestCheckPage:
    def test_absent(self) -> None:
        assert check_page({}) is None
        assert check_page(None) is None

    @pytest.mark.parametrize("page", [-1, "2", True, [1]])
    def test_invalid(self, page) -> None:
        with pytest.raises(ValidationError, match="non-negative number"):
            check_page({"page": page})

    def test_integral_float_becomes_int(self) -> None:
        assert check_page({"page": 2.0}) == 2
        assert isinstance(check_page({"page": 2.0}), int)


class TestSanitizeText:
    def test_strips_unsafe_characters(self) -> None:
        cleaned = sanitize_text("<script>x</script>")
        assert cleaned == "scriptx/script"
        assert not set(cleaned) & set("<>\"'&")

    def test_strips_all_listed_characters(self) -> None:
        assert sanitize_text(" a<b>c\"d'e&f ") == "abcdef"

    def test_truncates(self) -> None:
        assert len(sanitize_text("x" * (MAX_TEXT_LENGTH + 50))) == MAX_TEXT_LENGTH

    def test_rejects_non_string(self) -> None:
        with pytest.raises(ValidationError, match="must be a string"):
            sanitize_text(12)


class TestSanitizeStructure:
    def test_sanitizes_nested_leaves(self) -> None:
        result = sanitize_structure({"a": "<b>", "n": [{"c": "'x'"}], "k": 5, "flag": True, "none": None})
        assert result == {"a": "b", "n": [{"c": "x"}], "k": 5, "flag": True, "none": None}

    def test_keys_are_kept(self) -> None:
        assert list(sanitize_structure({"<k>": "v"})) == ["<k>"]

    @pytest.mark.parametrize("value", ["text", None, 1])
    def test_rejects_non_objects(self, value) -> None:
        with pytest.raises(ValidationError, match="must be an object"):
            sanitize_structure(value)
