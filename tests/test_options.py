"""Tests for the option mini-language."""

import pytest

from dsfrmark.transpiler.options import (
    format_options,
    is_option_line,
    parse_option_line,
    parse_options,
)


class TestParseOptionLine:
    def test_simple(self):
        assert parse_option_line("type: warning") == ("type", "warning")

    def test_trims_key_and_value(self):
        assert parse_option_line("   color :  blue  ") is None
        assert parse_option_line("   color:  blue  ") == ("color", "blue")

    def test_booleans_coerced(self):
        assert parse_option_line("open: true") == ("open", True)
        assert parse_option_line("icon: false") == ("icon", False)

    def test_only_exact_boolean_tokens_coerced(self):
        assert parse_option_line("open: True") == ("open", "True")
        assert parse_option_line("open: yes") == ("open", "yes")

    def test_first_colon_separates(self):
        assert parse_option_line("link_url: https://example.org/a") == (
            "link_url",
            "https://example.org/a",
        )

    def test_no_colon(self):
        assert parse_option_line("just some text") is None

    def test_missing_value(self):
        assert parse_option_line("type:") is None

    def test_key_must_be_a_bare_word(self):
        assert parse_option_line("link-url: x") is None
        assert not is_option_line("my key: x")


class TestParseOptions:
    def test_empty_text(self):
        result = parse_options("")
        assert result.options == {}
        assert result.diagnostics == []

    def test_multiple_lines(self):
        result = parse_options("type: info\nmarkup: h3\nopen: true")
        assert result.options == {"type": "info", "markup": "h3", "open": True}

    def test_malformed_line_dropped_and_reported(self):
        result = parse_options("type: info\nnot an option\nmarkup: h3")
        assert result.options == {"type": "info", "markup": "h3"}
        assert len(result.diagnostics) == 1
        assert result.diagnostics[0].reason == "malformed option line"
        assert result.diagnostics[0].line == "not an option"

    def test_blank_lines_silent(self):
        result = parse_options("\ntype: info\n\n")
        assert result.options == {"type": "info"}
        assert result.diagnostics == []

    def test_unknown_key_kept_but_reported(self):
        result = parse_options("type: info\ncolour: red", known={"type", "markup"})
        assert result.options == {"type": "info", "colour": "red"}
        assert [d.reason for d in result.diagnostics] == ["unknown option 'colour'"]

    def test_no_known_set_means_no_unknown_reports(self):
        result = parse_options("anything: goes")
        assert result.diagnostics == []

    def test_duplicate_key_last_wins(self):
        result = parse_options("type: info\ntype: error")
        assert result.options == {"type": "error"}
        assert "duplicate option 'type'" in result.diagnostics[0].reason

    def test_line_numbers(self):
        result = parse_options("type: info\noops", first_lineno=10, component="alert")
        diag = result.diagnostics[0]
        assert diag.lineno == 11
        assert diag.component == "alert"


class TestFormatOptions:
    @pytest.mark.parametrize(
        "options",
        [
            {},
            {"type": "warning"},
            {"open": True, "icon": False, "markup": "h3"},
            {"variations": "grey,no-border", "badge": "New|success"},
        ],
    )
    def test_round_trip(self, options):
        assert parse_options(format_options(options)).options == options

    def test_booleans_serialized_as_tokens(self):
        assert format_options({"open": True, "icon": False}) == "open: true\nicon: false"
