"""
Tests for the identifier parser.
"""

import pytest

from schema.errors import ParseError, TooManyQualifiers
from schema.parser import Segment, parse, parse_name, strip_quotes


class TestParse:
    """Tests for tokenizing raw names."""

    def test_empty_name(self):
        assert parse("") == []
        assert parse_name("") == []

    def test_bare_name(self):
        assert parse("users") == [Segment("users", quoted=False)]

    def test_qualified_name(self):
        assert parse("public.users") == [Segment("public"), Segment("users")]

    @pytest.mark.parametrize("raw, value", [
        ("`users`", "users"),
        ('"users"', "users"),
        ("[users]", "users"),
        ('"Mixed Case"', "Mixed Case"),
        ("[select]", "select"),
    ])
    def test_quoted_token(self, raw, value):
        assert parse(raw) == [Segment(value, quoted=True)]

    def test_quoted_token_may_contain_dots(self):
        assert parse('"a.b"') == [Segment("a.b", quoted=True)]

    def test_mixed_quoting(self):
        assert parse('"Sales".orders') == [Segment("Sales", quoted=True), Segment("orders")]
        assert parse("sales.`Orders`") == [Segment("sales"), Segment("Orders", quoted=True)]

    def test_grammar_accepts_more_than_two_tokens(self):
        assert len(parse("a.b.c")) == 3

    def test_valid_names(self, valid_names):
        for raw, (namespace, local, quoted) in valid_names:
            segments = parse_name(raw)
            assert segments[-1].value == local
            assert segments[-1].quoted is quoted
            if namespace is None:
                assert len(segments) == 1
            else:
                assert segments[0].value == namespace


class TestParseErrors:
    """Tests for malformed names."""

    @pytest.mark.parametrize("raw", [
        " ",
        "foo bar",
        ".foo",
        "foo.",
        "foo..bar",
        "`foo",
        '"foo',
        "[foo",
        "foo]",
        "`foo`bar",
        "foo`bar`",
        "\tfoo",
        '""',
        "``",
        "[]",
        'ns.""',
    ])
    def test_rejects_malformed_input(self, raw):
        with pytest.raises(ParseError):
            parse(raw)

    def test_empty_quoted_identifier(self):
        with pytest.raises(ParseError) as exc_info:
            parse('ns.""')
        assert exc_info.value.position == 3
        assert "empty quoted identifier" in str(exc_info.value)

    def test_error_reports_position(self):
        with pytest.raises(ParseError) as exc_info:
            parse("foo..bar")
        assert exc_info.value.position == 4
        assert exc_info.value.raw == "foo..bar"

    def test_unterminated_quote_reason(self):
        with pytest.raises(ParseError) as exc_info:
            parse("[foo")
        assert "unterminated" in exc_info.value.reason
        assert exc_info.value.position == 0

    def test_trailing_dot_reason(self):
        with pytest.raises(ParseError) as exc_info:
            parse("foo.")
        assert "end of input" in str(exc_info.value)


class TestParseName:
    """Tests for the namespace.local limit."""

    def test_too_many_qualifiers(self):
        with pytest.raises(TooManyQualifiers) as exc_info:
            parse_name("a.b.c")
        assert exc_info.value.qualifier_count == 2
        assert "2 qualifiers" in str(exc_info.value)

    def test_qualifier_count_grows_with_segments(self):
        with pytest.raises(TooManyQualifiers) as exc_info:
            parse_name("a.b.c.d")
        assert exc_info.value.qualifier_count == 3

    def test_grammar_error_wins_over_qualifier_count(self):
        with pytest.raises(ParseError):
            parse_name("a.b.c.")


class TestStripQuotes:
    """Tests for quote removal used by namespace lookups."""

    @pytest.mark.parametrize("raw, expected", [
        ("foo", "foo"),
        ("`foo`", "foo"),
        ('"foo"', "foo"),
        ("[foo]", "foo"),
        ("`FOO`", "FOO"),
    ])
    def test_strip_quotes(self, raw, expected):
        assert strip_quotes(raw) == expected
