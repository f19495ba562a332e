"""Lexer for the fuzl spec language.

Turns source text into a token tuple that always ends with exactly one EOF
token. Lexing never fails: a character no rule accepts becomes an ILLEGAL
token and is left for the parser to reject.

Rules are tried in this order at each position (first match wins):

    1. string literal        "text"
    2. byte sequence         `de ad be ef`
    3. array type            name[size]
    4. identifier            type name, reserved name, keyword or free identifier
    5. integer literal       -?[0-9]+
    6. operator              ->  =  +  -  *
    7. punctuation           (  )  ,  $  :
    8. illegal               any single character

Whitespace (space, tab, CR, LF) separates tokens and is otherwise ignored.
A ``#`` starts a comment running to the end of the line; comments never
reach the output.

Python 3.13+. Zero external dependencies.
"""

import string
from collections.abc import Callable

from bajzel.constants import RESERVED_NAMES, TYPE_NAMES, WHITESPACE
from bajzel.enums import TokenKind
from bajzel.syntax.cursor import Cursor, ParseResult
from bajzel.syntax.tokens import Span, Token

__all__ = ["lex"]

type LexRule = Callable[[Cursor], ParseResult[Token, Cursor] | None]

_IDENT_START: str = string.ascii_letters
_IDENT_CHARS: str = string.ascii_letters + string.digits + "_"
_ASCII_DIGITS: str = string.digits
_HEX_DIGITS: str = string.hexdigits

_U32_MAX: int = 0xFFFF_FFFF
_I64_WRAP: int = 1 << 64
_I64_MIN: int = -(1 << 63)

_KEYWORD_KINDS: dict[str, TokenKind] = {
    "as": TokenKind.AS,
    "define": TokenKind.DEFINE,
    "from": TokenKind.FROM,
    "generate": TokenKind.GENERATE,
    "where": TokenKind.WHERE,
    "with": TokenKind.WITH,
}

# Longest spelling first so "->" wins over "-".
_OPERATORS: tuple[tuple[str, TokenKind], ...] = (
    ("->", TokenKind.RIGHT_ARROW),
    ("=", TokenKind.ASSIGN),
    ("+", TokenKind.ADD),
    ("-", TokenKind.SUBTRACT),
    ("*", TokenKind.MULTIPLY),
)

_PUNCTUATION: dict[str, TokenKind] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    ",": TokenKind.COMMA,
    "$": TokenKind.REFERENCE,
    ":": TokenKind.COLON,
}


def _span(start: Cursor, end: Cursor) -> Span:
    return Span(start=start.pos, end=end.pos)


def _wrap_i64(value: int) -> int:
    """Keep the low 64 bits of value as a signed integer."""
    return (value - _I64_MIN) % _I64_WRAP + _I64_MIN


def _scan_identifier(cursor: Cursor) -> Cursor | None:
    """Return the cursor after an identifier, or None if none starts here.

    Identifiers are ASCII: [A-Za-z][A-Za-z0-9_]*
    """
    if cursor.is_eof or cursor.current not in _IDENT_START:
        return None
    return cursor.advance().skip_while(_IDENT_CHARS)


def _scan_delimited(cursor: Cursor, delimiter: str) -> tuple[str, Cursor] | None:
    """Scan ``<delimiter>body<delimiter>`` with a non-empty body."""
    body_start = cursor.expect(delimiter)
    if body_start is None:
        return None
    end = body_start
    while not end.is_eof and end.current != delimiter:
        end = end.advance()
    if end.is_eof or end.pos == body_start.pos:
        return None
    return body_start.slice_to(end.pos), end.advance()


def lex_string(cursor: Cursor) -> ParseResult[Token, Cursor] | None:
    """Lex string literal: raw characters between double quotes.

    There are no escape sequences; the body must not be empty.

    Examples:
        "HELLO" -> Token.StringLiteral('HELLO')
        ""      -> no match (two Illegal tokens follow)
    """
    scanned = _scan_delimited(cursor, '"')
    if scanned is None:
        return None
    body, end = scanned
    return ParseResult(Token.string(body, _span(cursor, end)), end)


def lex_bytes(cursor: Cursor) -> ParseResult[Token, Cursor] | None:
    """Lex byte sequence: single-space separated hex bytes between backticks.

    Examples:
        `de ad c0 0f fe` -> Token.Bytes(b'\\xde\\xad\\xc0\\x0f\\xfe')
        `g5 d6`          -> no match; the backtick lexes as Illegal and the
                            chunks lex as ordinary tokens
    """
    scanned = _scan_delimited(cursor, "`")
    if scanned is None:
        return None
    body, end = scanned

    values: list[int] = []
    for chunk in body.split(" "):
        if not chunk or any(ch not in _HEX_DIGITS for ch in chunk):
            return None
        value = int(chunk, 16)
        if value > 0xFF:
            return None
        values.append(value)

    return ParseResult(Token.byte_seq(bytes(values), _span(cursor, end)), end)


def lex_ident_array(cursor: Cursor) -> ParseResult[Token, Cursor] | None:
    """Lex array type: identifier[size].

    The size may carry a leading ``-`` which is consumed and ignored; a size
    that does not fit an unsigned 32-bit value is no match.

    Examples:
        bytes[16] -> Token.TypeArray(('bytes', 16))
        bytes[-4] -> Token.TypeArray(('bytes', 4))
    """
    name_end = _scan_identifier(cursor)
    if name_end is None:
        return None
    size_start = name_end.expect("[")
    if size_start is None:
        return None
    digits_start = size_start.expect("-") or size_start
    digits_end = digits_start.skip_while(_ASCII_DIGITS)
    if digits_end.pos == digits_start.pos:
        return None
    end = digits_end.expect("]")
    if end is None:
        return None

    size = int(digits_start.slice_to(digits_end.pos))
    if size > _U32_MAX:
        return None

    name = cursor.slice_to(name_end.pos)
    token = Token(TokenKind.TYPE_ARRAY, (name, size), _span(cursor, end))
    return ParseResult(token, end)


def lex_ident(cursor: Cursor) -> ParseResult[Token, Cursor] | None:
    """Lex identifier and classify it.

    Matching is case-insensitive; the token keeps the original spelling.

    Examples:
        U32     -> Token.Type('U32')
        null    -> Token.ReservedIdent('null')
        define  -> Token.Define
        payload -> Token.Ident('payload')
    """
    end = _scan_identifier(cursor)
    if end is None:
        return None

    text = cursor.slice_to(end.pos)
    folded = text.lower()
    span = _span(cursor, end)

    if folded in TYPE_NAMES:
        token = Token.type_name(text, span)
    elif folded in RESERVED_NAMES:
        token = Token.reserved(text, span)
    elif folded in _KEYWORD_KINDS:
        token = Token(_KEYWORD_KINDS[folded], span=span)
    else:
        token = Token.ident(text, span)
    return ParseResult(token, end)


def lex_integer(cursor: Cursor) -> ParseResult[Token, Cursor] | None:
    """Lex integer literal: -?[0-9]+

    Values outside the signed 64-bit range wrap to their low 64 bits.

    Examples:
        42                   -> Token.IntegerLiteral(42)
        -7                   -> Token.IntegerLiteral(-7)
        18446744073709551615 -> Token.IntegerLiteral(-1)
    """
    digits_start = cursor.expect("-") or cursor
    end = digits_start.skip_while(_ASCII_DIGITS)
    if end.pos == digits_start.pos:
        return None
    value = _wrap_i64(int(cursor.slice_to(end.pos)))
    return ParseResult(Token.integer(value, _span(cursor, end)), end)


def lex_operator(cursor: Cursor) -> ParseResult[Token, Cursor] | None:
    """Lex operator: ->, =, +, -, *"""
    for spelling, kind in _OPERATORS:
        if cursor.starts_with(spelling):
            end = cursor.advance(len(spelling))
            return ParseResult(Token(kind, span=_span(cursor, end)), end)
    return None


def lex_punctuation(cursor: Cursor) -> ParseResult[Token, Cursor] | None:
    """Lex punctuation: (, ), ,, $, :"""
    if cursor.is_eof:
        return None
    kind = _PUNCTUATION.get(cursor.current)
    if kind is None:
        return None
    end = cursor.advance()
    return ParseResult(Token(kind, span=_span(cursor, end)), end)


def lex_illegal(cursor: Cursor) -> ParseResult[Token, Cursor] | None:
    """Lex any single character (one code point) as an Illegal token."""
    if cursor.is_eof:
        return None
    end = cursor.advance()
    return ParseResult(Token.illegal(cursor.current, _span(cursor, end)), end)


_RULES: tuple[LexRule, ...] = (
    lex_string,
    lex_bytes,
    lex_ident_array,
    lex_ident,
    lex_integer,
    lex_operator,
    lex_punctuation,
    lex_illegal,
)


def lex_token(cursor: Cursor) -> ParseResult[Token, Cursor]:
    """Lex a single token at a non-whitespace, non-EOF position.

    lex_illegal accepts any character, so some rule always matches.
    """
    for rule in _RULES:
        result = rule(cursor)
        if result is not None:
            return result
    msg = f"no lexer rule matched at position {cursor.pos}"
    raise AssertionError(msg)


def lex(text: str) -> tuple[Token, ...]:
    """Lex source text into tokens.

    Args:
        text: fuzl source

    Returns:
        Tokens in source order, terminated by exactly one EOF token

    Example:
        >>> lex("DEFINE AS WITH WHERE")
        (Token.Define, Token.As, Token.With, Token.Where, Token.Eof)
    """
    cursor = Cursor(text, 0)
    tokens: list[Token] = []

    while True:
        cursor = cursor.skip_while(WHITESPACE)
        if cursor.is_eof:
            break
        if cursor.current == "#":
            cursor = cursor.skip_to_line_end()
            continue
        result = lex_token(cursor)
        tokens.append(result.value)
        cursor = result.cursor

    tokens.append(Token(TokenKind.EOF, span=Span(len(text), len(text))))
    return tuple(tokens)
