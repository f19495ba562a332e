"""bajzel exception hierarchy with structured diagnostics.

Every stage after the lexer reports failures by raising one of these.
All exceptions optionally store a Diagnostic for rich error information.

Python 3.13+. Zero external dependencies.
"""

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from bajzel.syntax.tokens import Token

__all__ = [
    "BajzelError",
    "BajzelParseError",
    "BajzelSyntaxError",
    "ConversionError",
    "ExprError",
    "NotConstructedProperlyError",
    "ProgramNotFinishedError",
    "SerializationError",
]


class BajzelError(Exception):
    """Base exception for all bajzel errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize BajzelError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ConversionError(BajzelError):
    """A type name could not be converted to a field format.

    Example: ``NumberFormat.parse("i7")``.
    """

    def __init__(self, message: str | Diagnostic, *, type_name: str = "") -> None:
        super().__init__(message)
        self.type_name = type_name


class ProgramNotFinishedError(BajzelError):
    """Statement stream ended before the evaluator reached its final state."""


class BajzelSyntaxError(BajzelError):
    """Grammar or attribute-usage violation."""


class BajzelParseError(BajzelSyntaxError):
    """Token stream does not match the grammar.

    Attributes:
        token: Token at which no statement could be parsed
        next_token: Token right after it (None at end of input)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        token: "Token | None" = None,
        next_token: "Token | None" = None,
    ) -> None:
        super().__init__(message)
        self.token = token
        self.next_token = next_token


class ExprError(BajzelError):
    """Expression shape not valid in its context.

    Example: a parenthesized group where a single integer was required.
    """


class NotConstructedProperlyError(BajzelError):
    """Environment lacks the group or generator definition the generator needs."""


class SerializationError(BajzelError):
    """Program cannot be rendered back to spec-language text."""
