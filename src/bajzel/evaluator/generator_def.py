"""Generator definition: target group, output bounds and terminator.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from bajzel.constants import DEFAULT_OUT_MAX, DEFAULT_OUT_MIN, RESERVED_BYTES
from bajzel.diagnostics import BajzelSyntaxError, ErrorTemplate
from bajzel.syntax.ast import (
    BytesLiteral,
    Expr,
    GroupExpr,
    IntegerLiteral,
    ReservedLiteral,
    StringLiteral,
)

__all__ = ["GenDefinition"]


@dataclass(slots=True)
class GenDefinition:
    """The single GENERATE section of a program.

    Attributes:
        name: Name of the group to emit
        out_min: Minimum output length (informational, never padded to)
        out_max: Maximum output length; output is truncated to it
        term: Terminator bytes, built up by TERM assignments in order
    """

    name: str
    out_min: int = DEFAULT_OUT_MIN
    out_max: int = DEFAULT_OUT_MAX
    term: bytes = b""

    def update(self, param: str, expr: Expr) -> None:
        """Apply a parameter assignment (name matched case-insensitively).

        Raises:
            BajzelSyntaxError: On an unknown parameter or an unusable value
        """
        match param.upper():
            case "OUT_MIN":
                self.out_min = self._length(param, expr)
            case "OUT_MAX":
                self.out_max = self._length(param, expr)
            case "TERM":
                self.add_term(expr)
            case _:
                raise BajzelSyntaxError(ErrorTemplate.unsupported_parameter(param))

    @staticmethod
    def _length(param: str, expr: Expr) -> int:
        if GroupExpr.guard(expr) or not isinstance(expr.literal, IntegerLiteral):
            raise BajzelSyntaxError(
                ErrorTemplate.invalid_parameter_value(param.upper(), "expected an integer")
            )
        value = expr.literal.value
        if value < 0:
            raise BajzelSyntaxError(
                ErrorTemplate.invalid_parameter_value(param.upper(), "value < 0 is not allowed")
            )
        return value

    def add_term(self, expr: Expr) -> None:
        """Append one literal to the terminator.

        Integers 0-255 append one byte, strings their UTF-8 encoding, byte
        sequences their bytes, and LF/NULL/RF the bytes 0x0A/0x00/0x0D.
        Repeated TERM assignments concatenate.
        """
        if GroupExpr.guard(expr):
            raise BajzelSyntaxError(
                ErrorTemplate.invalid_parameter_value("TERM", "expected a single literal")
            )
        match expr.literal:
            case IntegerLiteral(value=value) if 0 <= value <= 0xFF:
                chunk = bytes((value,))
            case IntegerLiteral():
                raise BajzelSyntaxError(
                    ErrorTemplate.invalid_parameter_value("TERM", "Decimal ASCII value expected")
                )
            case StringLiteral(value=value):
                chunk = value.encode("utf-8")
            case BytesLiteral(value=value):
                chunk = value
            case ReservedLiteral() as reserved if reserved.canonical in RESERVED_BYTES:
                chunk = bytes((RESERVED_BYTES[reserved.canonical],))
            case ReservedLiteral(name=name):
                raise BajzelSyntaxError(
                    ErrorTemplate.invalid_parameter_value(
                        "TERM", f"unsupported reserved literal ({name})"
                    )
                )
        self.term += chunk
