"""Enumerations for bajzel type-safe constants.

Uses StrEnum for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TokenKind(StrEnum):
    """Kind of a lexer token.

    StrEnum provides automatic string conversion: str(TokenKind.DEFINE) == "Define"
    """

    # Keywords
    AS = "As"
    DEFINE = "Define"
    FROM = "From"
    GENERATE = "Generate"
    WHERE = "Where"
    WITH = "With"

    # Punctuation
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    COMMA = "Comma"
    COLON = "Colon"
    REFERENCE = "Reference"
    """Dollar sign: $"""

    # Operators
    ASSIGN = "Assign"
    ADD = "Add"
    SUBTRACT = "Subtract"
    MULTIPLY = "Multiply"
    RIGHT_ARROW = "RightArrow"

    # Literals
    INTEGER_LITERAL = "IntegerLiteral"
    STRING_LITERAL = "StringLiteral"
    BYTES = "Bytes"

    # Names
    TYPE = "Type"
    TYPE_ARRAY = "TypeArray"
    RESERVED_IDENT = "ReservedIdent"
    IDENT = "Ident"

    # Markers
    COMMENT = "Comment"
    """Never present in lexer output; comments are discarded."""

    ILLEGAL = "Illegal"
    EOF = "Eof"


class DisplayFormat(StrEnum):
    """Base used to render a text number.

    StrEnum provides automatic string conversion: str(DisplayFormat.HEX) == "hex"
    """

    BINARY = "bin"
    OCTAL = "oct"
    DECIMAL = "dec"
    HEX = "hex"


class ByteOrder(StrEnum):
    """Byte order of a byte number.

    Values match the ``byteorder`` argument of ``int.to_bytes``.
    """

    BIG_ENDIAN = "big"
    """Big-end is first (the first byte is biggest)"""

    LITTLE_ENDIAN = "little"
    """Little-end is first (the first byte is smallest)"""


__all__ = [
    "ByteOrder",
    "DisplayFormat",
    "TokenKind",
]
