"""Diagnostic system for bajzel errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    BajzelError,
    BajzelParseError,
    BajzelSyntaxError,
    ConversionError,
    ExprError,
    NotConstructedProperlyError,
    ProgramNotFinishedError,
    SerializationError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "BajzelError",
    "BajzelParseError",
    "BajzelSyntaxError",
    "ConversionError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "ExprError",
    "NotConstructedProperlyError",
    "OutputFormat",
    "ProgramNotFinishedError",
    "SerializationError",
    "SourceSpan",
]
