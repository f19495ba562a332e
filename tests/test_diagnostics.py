"""Tests for diagnostics: codes, templates, exceptions and formatting."""

from __future__ import annotations

import json

import pytest

from bajzel.diagnostics import (
    BajzelError,
    BajzelParseError,
    BajzelSyntaxError,
    ConversionError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    ExprError,
    NotConstructedProperlyError,
    OutputFormat,
    ProgramNotFinishedError,
    SerializationError,
    SourceSpan,
)
from bajzel.syntax import Token


class TestSourceSpan:
    """Test SourceSpan validation."""

    def test_valid(self) -> None:
        """A well-formed span is accepted."""
        span = SourceSpan(start=3, end=5, line=1, column=4)
        assert (span.line, span.column) == (1, 4)

    @pytest.mark.parametrize(
        ("start", "end", "line", "column"),
        [(-1, 0, 1, 1), (5, 3, 1, 1), (0, 0, 0, 1), (0, 0, 1, 0)],
    )
    def test_invalid(self, start: int, end: int, line: int, column: int) -> None:
        """Negative offsets, reversed spans and zero line/column are rejected."""
        with pytest.raises(ValueError, match="SourceSpan"):
            SourceSpan(start=start, end=end, line=line, column=column)


class TestExceptions:
    """Test the exception hierarchy."""

    @pytest.mark.parametrize(
        "error_type",
        [
            BajzelSyntaxError,
            BajzelParseError,
            ConversionError,
            ExprError,
            NotConstructedProperlyError,
            ProgramNotFinishedError,
            SerializationError,
        ],
    )
    def test_all_derive_from_base(self, error_type: type[BajzelError]) -> None:
        """Every error is a BajzelError."""
        assert issubclass(error_type, BajzelError)

    def test_parse_error_is_syntax_error(self) -> None:
        """Parse errors are a kind of syntax error."""
        assert issubclass(BajzelParseError, BajzelSyntaxError)

    def test_plain_message(self) -> None:
        """A string message leaves the diagnostic empty."""
        error = BajzelError("boom")
        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        """A Diagnostic provides the message and is kept."""
        diagnostic = ErrorTemplate.single_generate()
        error = BajzelSyntaxError(diagnostic)
        assert str(error) == "single GENERATE section allowed"
        assert error.diagnostic is diagnostic

    def test_parse_error_tokens(self) -> None:
        """Parse errors carry the offending and next token."""
        error = BajzelParseError("bad", token=Token.ident("a"), next_token=None)
        assert error.token == Token.ident("a")
        assert error.next_token is None

    def test_conversion_error_type_name(self) -> None:
        """ConversionError records the failing type name."""
        assert ConversionError("bad", type_name="i7").type_name == "i7"


class TestTemplates:
    """Test message templates."""

    def test_unexpected_token(self) -> None:
        """The message names both tokens."""
        diagnostic = ErrorTemplate.unexpected_token("Token.As", "Token.Eof")
        assert diagnostic.message == "Unexpected token Token.As, next: Token.Eof"
        assert diagnostic.code is DiagnosticCode.UNEXPECTED_TOKEN

    def test_invalid_attribute_value(self) -> None:
        """Usage and problem are joined with a colon."""
        diagnostic = ErrorTemplate.invalid_attribute_value(
            "LEN", "LEN(min max)", "min > max is not allowed"
        )
        assert str(diagnostic) == "LEN(min max): min > max is not allowed"
        assert diagnostic.attribute == "LEN"

    def test_unexpected_statement(self) -> None:
        """The message names the statement and the state."""
        message = ErrorTemplate.unexpected_statement("UpdateParam", "DefiningFields").message
        assert message == "UpdateParam is not allowed while DefiningFields"

    def test_codes_grouped_by_stage(self) -> None:
        """Code values follow the stage numbering."""
        assert 1000 <= DiagnosticCode.UNEXPECTED_TOKEN.value < 2000
        assert 2000 <= DiagnosticCode.INVALID_ATTRIBUTE.value < 3000
        assert 3000 <= DiagnosticCode.NOT_CONSTRUCTED_PROPERLY.value < 4000


class TestFormatter:
    """Test diagnostic formatting."""

    DIAGNOSTIC = Diagnostic(
        code=DiagnosticCode.UNEXPECTED_TOKEN,
        message="Unexpected token Token.RightArrow, next: Token.Ident('LEN')",
        span=SourceSpan(start=11, end=13, line=2, column=3),
        hint="Check the statement starting at this token",
    )

    def test_rust(self) -> None:
        """The default style lists location and hint under the headline."""
        assert DiagnosticFormatter().format(self.DIAGNOSTIC) == (
            "error[UNEXPECTED_TOKEN]: "
            "Unexpected token Token.RightArrow, next: Token.Ident('LEN')\n"
            "  --> line 2, column 3\n"
            "  = help: Check the statement starting at this token"
        )

    def test_simple(self) -> None:
        """The simple style is one line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(self.DIAGNOSTIC).startswith("UNEXPECTED_TOKEN at 2:3: ")

    def test_simple_without_span(self) -> None:
        """Without a span the simple style omits the location."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(ErrorTemplate.single_generate()) == (
            "SYNTAX_ERROR: single GENERATE section allowed"
        )

    def test_json(self) -> None:
        """The JSON style is machine readable."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(self.DIAGNOSTIC))
        assert data["code"] == "UNEXPECTED_TOKEN"
        assert data["code_value"] == DiagnosticCode.UNEXPECTED_TOKEN.value
        assert (data["line"], data["column"]) == (2, 3)
        assert data["hint"] == "Check the statement starting at this token"

    def test_color(self) -> None:
        """Color wraps the severity in ANSI codes."""
        formatted = DiagnosticFormatter(color=True).format(self.DIAGNOSTIC)
        assert formatted.startswith("\033[1;31merror\033[0m[UNEXPECTED_TOKEN]")

    def test_format_all(self) -> None:
        """Several diagnostics are separated by blank lines."""
        diagnostics = [ErrorTemplate.single_generate(), ErrorTemplate.define_required()]
        assert DiagnosticFormatter().format_all(diagnostics).count("\n\n") == 1

    def test_format_error_shortcut(self) -> None:
        """Diagnostic.format_error() uses the default formatter."""
        assert self.DIAGNOSTIC.format_error() == DiagnosticFormatter().format(self.DIAGNOSTIC)
