"""Primitive token parsers for the fuzl parser.

This module provides single-token parsers for identifiers, type names and
literals. Each returns ParseResult on a match and None otherwise, leaving
the caller's cursor untouched.
"""

from bajzel.enums import TokenKind
from bajzel.syntax.ast import (
    BytesLiteral,
    IntegerLiteral,
    Literal,
    ReservedLiteral,
    StringLiteral,
)
from bajzel.syntax.cursor import ParseResult, TokenCursor

__all__ = [
    "parse_ident",
    "parse_keyword",
    "parse_literal",
    "parse_type",
]


def parse_keyword(cursor: TokenCursor, kind: TokenKind) -> TokenCursor | None:
    """Consume a value-less token (keyword, operator, punctuation) of a kind.

    Returns:
        Cursor after the token, or None if the current token differs
    """
    return cursor.expect(kind)


def _parse_text_token(cursor: TokenCursor, kind: TokenKind) -> ParseResult[str, TokenCursor] | None:
    if cursor.is_exhausted:
        return None
    token = cursor.current
    if token.kind is not kind or not isinstance(token.value, str):
        return None
    return ParseResult(token.value, cursor.advance())


def parse_ident(cursor: TokenCursor) -> ParseResult[str, TokenCursor] | None:
    """Parse a free identifier.

    Examples:
        Token.Ident('cmd') -> "cmd"
        Token.Type('u32')  -> None
    """
    return _parse_text_token(cursor, TokenKind.IDENT)


def parse_type(cursor: TokenCursor) -> ParseResult[str, TokenCursor] | None:
    """Parse a type name, keeping its original spelling.

    Examples:
        Token.Type('u32')    -> "u32"
        Token.Type('STRING') -> "STRING"
    """
    return _parse_text_token(cursor, TokenKind.TYPE)


def parse_literal(cursor: TokenCursor) -> ParseResult[Literal, TokenCursor] | None:
    """Parse integer, string, byte-sequence or reserved literal.

    Examples:
        Token.IntegerLiteral(42)     -> IntegerLiteral(42)
        Token.StringLiteral('BM')    -> StringLiteral("BM")
        Token.Bytes(b'\\xde\\xad')     -> BytesLiteral(b"\\xde\\xad")
        Token.ReservedIdent('LF')    -> ReservedLiteral("LF")
    """
    if cursor.is_exhausted:
        return None
    token = cursor.current
    literal: Literal
    match token.kind, token.value:
        case TokenKind.INTEGER_LITERAL, int(value):
            literal = IntegerLiteral(value)
        case TokenKind.STRING_LITERAL, str(value):
            literal = StringLiteral(value)
        case TokenKind.BYTES, bytes(value):
            literal = BytesLiteral(value)
        case TokenKind.RESERVED_IDENT, str(value):
            literal = ReservedLiteral(value)
        case _:
            return None
    return ParseResult(literal, cursor.advance())
