"""Tests for identifier and literal escaping."""

import pytest

from data_api_client.core.escape import RESERVED_WORDS, ident, literal
from data_api_client.core.exceptions import InputError

# -- ident --


@pytest.mark.unit
class TestIdent:
    @pytest.mark.parametrize(
        "name", ["username", "table_name", "column123", "_private", "name$", "userId"]
    )
    def test_plain_identifiers_unchanged(self, name):
        assert ident(name) == name

    @pytest.mark.parametrize("name", ["select", "from", "where", "table", "user", "end"])
    def test_reserved_words_quoted(self, name):
        assert ident(name) == f'"{name}"'

    def test_reserved_words_case_insensitive(self):
        assert ident("SELECT") == '"SELECT"'
        assert ident("From") == '"From"'

    def test_vendor_reserved_words_quoted(self):
        assert ident("aes128") == '"aes128"'
        assert ident("credentials") == '"credentials"'
        assert ident("delta") == '"delta"'

    def test_spaces_and_punctuation_quoted(self):
        assert ident("table name") == '"table name"'
        assert ident("col-name") == '"col-name"'
        assert ident("col.name") == '"col.name"'

    def test_leading_digit_quoted(self):
        assert ident("123table") == '"123table"'

    def test_internal_quotes_doubled(self):
        assert ident('table"name') == '"table""name"'
        assert ident('col""umn') == '"col""""umn"'

    def test_already_quoted_is_quoted_again(self):
        assert ident('"already"') == '"""already"""'

    def test_none_raises(self):
        with pytest.raises(InputError, match="identifier required"):
            ident(None)

    def test_reserved_words_stored_lowercase(self):
        assert all(word == word.lower() for word in RESERVED_WORDS)
        assert "select" in RESERVED_WORDS


# -- literal --


@pytest.mark.unit
class TestLiteral:
    def test_none_is_null(self):
        assert literal(None) == "NULL"

    def test_plain_string(self):
        assert literal("hello") == "'hello'"
        assert literal("") == "''"

    def test_single_quotes_doubled(self):
        assert literal("it's") == "'it''s'"
        assert literal("'quoted'") == "'''quoted'''"

    def test_backslash_uses_escape_string(self):
        assert literal("a\\b") == "E'a\\\\b'"
        assert literal("\\") == "E'\\\\'"

    def test_quotes_and_backslashes(self):
        assert literal("it's\\bad") == "E'it''s\\\\bad'"

    def test_list(self):
        assert literal(["a", "b", "c"]) == "('a', 'b', 'c')"

    def test_list_with_null(self):
        assert literal(["a", None]) == "('a', NULL)"

    def test_empty_list(self):
        assert literal([]) == "()"

    def test_nested_lists(self):
        assert literal([["a", "b"], ["c", "d"]]) == "(('a', 'b'), ('c', 'd'))"

    def test_list_element_with_backslash(self):
        assert literal(["path\\to", "file"]) == "(E'path\\\\to', 'file')"

    def test_non_string_values_stringified(self):
        assert literal(123) == "'123'"
        assert literal(True) == "'true'"
        assert literal(False) == "'false'"

    def test_special_characters_untouched(self):
        assert literal("line\nbreak") == "'line\nbreak'"
        assert literal('quote"mark') == "'quote\"mark'"
        assert literal("café") == "'café'"
