"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by pipeline stage:
        1000-1999: Syntax errors (lexer/parser)
        2000-2999: Evaluation errors (statement folding, attributes)
        3000-3999: Generation errors
    """

    # Syntax errors (1000-1999)
    SYNTAX_ERROR = 1001
    UNEXPECTED_TOKEN = 1002
    SOURCE_TOO_LARGE = 1003

    # Evaluation errors (2000-2999)
    CONVERSION_FAILED = 2001
    PROGRAM_NOT_FINISHED = 2002
    INVALID_ATTRIBUTE = 2003
    INVALID_PARAMETER = 2004
    EXPRESSION_INVALID = 2005
    FEATURE_NOT_IMPLEMENTED = 2006

    # Generation errors (3000-3999)
    NOT_CONSTRUCTED_PROPERLY = 3001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line/column
                is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when the failing stage has no source text)
        hint: Suggestion for fixing the error
        attribute: Field attribute or generator parameter involved
        expected: What the failing rule expected
        received: What it got instead
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    attribute: str | None = None
    expected: str | None = None
    received: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in the default (Rust compiler) style.

        Example output:
            error[INVALID_ATTRIBUTE]: LEN(min max): min > max is not allowed
              = attribute: LEN
              = help: Swap the bounds so that min <= max

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
