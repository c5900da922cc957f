"""Tests for the naming module."""

import pytest

from jsonstruct.naming import receiver_name, to_camel_case


class TestToCamelCase:
    """Test identifier generation from snake_case keys."""

    def test_pascal_case(self):
        assert to_camel_case("user_name", True) == "UserName"

    def test_camel_case(self):
        assert to_camel_case("user_name", False) == "userName"

    def test_single_segment_upper(self):
        assert to_camel_case("age", True) == "Age"

    def test_single_segment_lower(self):
        assert to_camel_case("age", False) == "age"

    def test_many_segments(self):
        assert to_camel_case("created_at_utc", True) == "CreatedAtUtc"
        assert to_camel_case("created_at_utc", False) == "createdAtUtc"

    def test_consecutive_underscores_skipped(self):
        assert to_camel_case("user__name", True) == "UserName"

    def test_leading_underscore(self):
        """An empty first segment is dropped, so the next one is capitalized."""
        assert to_camel_case("_id", False) == "Id"
        assert to_camel_case("_id", True) == "Id"

    def test_trailing_underscore(self):
        assert to_camel_case("name_", True) == "Name"

    def test_rest_of_segment_untouched(self):
        """Only the first character changes; acronyms keep their case."""
        assert to_camel_case("HTTP_code", False) == "HTTPCode"
        assert to_camel_case("user_ID", True) == "UserID"

    def test_first_segment_not_lowered(self):
        assert to_camel_case("Name", False) == "Name"

    def test_only_underscores(self):
        assert to_camel_case("___", True) == ""

    def test_empty(self):
        assert to_camel_case("", True) == ""

    @pytest.mark.parametrize("word", ["Name", "Age", "X", "Über"])
    def test_idempotent_pascal(self, word):
        assert to_camel_case(word, True) == word

    @pytest.mark.parametrize("word", ["name", "age", "x", "über"])
    def test_idempotent_camel(self, word):
        assert to_camel_case(word, False) == word

    def test_unicode_segment(self):
        assert to_camel_case("straße_nummer", True) == "StraßeNummer"

    def test_upper_without_single_character_form(self):
        """'ß' upper-cases to 'SS'; the character is kept as-is instead."""
        assert to_camel_case("ßa", True) == "ßa"
        assert to_camel_case("x_ßa", False) == "xßa"


class TestReceiverName:
    """Test method receiver derivation from the struct name."""

    def test_lowercases_first_letter(self):
        assert receiver_name("Foo") == "f"

    def test_already_lowercase(self):
        assert receiver_name("bar") == "b"

    def test_single_character(self):
        assert receiver_name("X") == "x"

    def test_single_character_when_lowering_expands(self):
        """'İ' lowers to two code points; only the 'i' is kept."""
        assert receiver_name("İtem") == "i"

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            receiver_name("")
