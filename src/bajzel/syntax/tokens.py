"""Token model produced by the lexer.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field

from bajzel.enums import TokenKind

__all__ = ["Span", "Token", "TokenValue"]

type TokenValue = str | int | bytes | tuple[str, int] | None


@dataclass(frozen=True, slots=True)
class Span:
    """Source position span.

    Attributes:
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)

    Example:
        Source: "DEFINE cmd"
        Ident token span: Span(start=7, end=10)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Token:
    """Single lexer token.

    Value by kind:
        TYPE, IDENT, RESERVED_IDENT, STRING_LITERAL, ILLEGAL: str (original case)
        INTEGER_LITERAL: int
        BYTES: bytes
        TYPE_ARRAY: (name, size)
        everything else: None

    The span is informational and does not take part in equality, so tokens
    built by hand compare equal to lexed ones.

    Example:
        >>> Token(TokenKind.IDENT, "cmd") == Token(TokenKind.IDENT, "cmd", Span(7, 10))
        True
    """

    kind: TokenKind
    value: TokenValue = None
    span: Span | None = field(default=None, compare=False)

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token.{self.kind}"
        return f"Token.{self.kind}({self.value!r})"

    # Convenience constructors used by the lexer and by tests

    @classmethod
    def ident(cls, name: str, span: Span | None = None) -> "Token":
        """Free identifier token."""
        return cls(TokenKind.IDENT, name, span)

    @classmethod
    def type_name(cls, name: str, span: Span | None = None) -> "Token":
        """Type-name token."""
        return cls(TokenKind.TYPE, name, span)

    @classmethod
    def reserved(cls, name: str, span: Span | None = None) -> "Token":
        """Reserved identifier token (NULL, LF, RF)."""
        return cls(TokenKind.RESERVED_IDENT, name, span)

    @classmethod
    def integer(cls, value: int, span: Span | None = None) -> "Token":
        """Integer literal token."""
        return cls(TokenKind.INTEGER_LITERAL, value, span)

    @classmethod
    def string(cls, value: str, span: Span | None = None) -> "Token":
        """String literal token."""
        return cls(TokenKind.STRING_LITERAL, value, span)

    @classmethod
    def byte_seq(cls, value: bytes, span: Span | None = None) -> "Token":
        """Byte-sequence literal token."""
        return cls(TokenKind.BYTES, value, span)

    @classmethod
    def illegal(cls, text: str, span: Span | None = None) -> "Token":
        """Illegal single-character token."""
        return cls(TokenKind.ILLEGAL, text, span)
