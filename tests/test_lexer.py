"""Tests for the fuzl lexer.

Validates rule precedence, literal decoding, identifier classification and
the EOF/comment guarantees of lex().
"""

from __future__ import annotations

import pytest
from hypothesis import given

from bajzel.enums import TokenKind
from bajzel.syntax.cursor import Cursor
from bajzel.syntax.lexer import lex, lex_bytes, lex_ident_array, lex_integer, lex_string
from bajzel.syntax.tokens import Span, Token
from tests.strategies import fuzl_chaos_source

EOF = Token(TokenKind.EOF)

# ============================================================================
# KEYWORDS, OPERATORS, PUNCTUATION
# ============================================================================


class TestKeywords:
    """Test keyword recognition."""

    def test_keywords_sequence(self) -> None:
        """DEFINE AS WITH WHERE lexes to four keyword tokens and EOF."""
        assert lex("DEFINE AS WITH WHERE") == (
            Token(TokenKind.DEFINE),
            Token(TokenKind.AS),
            Token(TokenKind.WITH),
            Token(TokenKind.WHERE),
            EOF,
        )

    @pytest.mark.parametrize("text", ["define", "Define", "dEfInE"])
    def test_keywords_case_insensitive(self, text: str) -> None:
        """Keywords match in any case."""
        assert lex(text) == (Token(TokenKind.DEFINE), EOF)

    def test_generate_and_from(self) -> None:
        """GENERATE and FROM are keywords."""
        assert lex("generate FROM") == (Token(TokenKind.GENERATE), Token(TokenKind.FROM), EOF)


class TestOperators:
    """Test operator and punctuation lexing."""

    def test_arrow_before_minus(self) -> None:
        """-> is one token, not Subtract followed by something."""
        assert lex("->") == (Token(TokenKind.RIGHT_ARROW), EOF)

    def test_all_operators(self) -> None:
        """= + - * lex to their operator tokens."""
        assert lex("= + - *") == (
            Token(TokenKind.ASSIGN),
            Token(TokenKind.ADD),
            Token(TokenKind.SUBTRACT),
            Token(TokenKind.MULTIPLY),
            EOF,
        )

    def test_all_punctuation(self) -> None:
        """( ) , $ : lex to their punctuation tokens."""
        assert lex("(),$:") == (
            Token(TokenKind.LEFT_PAREN),
            Token(TokenKind.RIGHT_PAREN),
            Token(TokenKind.COMMA),
            Token(TokenKind.REFERENCE),
            Token(TokenKind.COLON),
            EOF,
        )

    def test_attribute_clause(self) -> None:
        """A full attribute update lexes token by token."""
        assert lex("size -> RANGE(0 7)") == (
            Token.ident("size"),
            Token(TokenKind.RIGHT_ARROW),
            Token.ident("RANGE"),
            Token(TokenKind.LEFT_PAREN),
            Token.integer(0),
            Token.integer(7),
            Token(TokenKind.RIGHT_PAREN),
            EOF,
        )


# ============================================================================
# LITERALS
# ============================================================================


class TestIntegerLiterals:
    """Test integer literal lexing."""

    def test_positive(self) -> None:
        """Digits lex to an integer literal."""
        assert lex("42") == (Token.integer(42), EOF)

    def test_negative(self) -> None:
        """A leading minus belongs to the literal."""
        assert lex("-7") == (Token.integer(-7), EOF)

    def test_double_minus(self) -> None:
        """--1 splits into Subtract and a negative literal."""
        assert lex("--1") == (Token(TokenKind.SUBTRACT), Token.integer(-1), EOF)

    def test_overflow_wraps_to_low_64_bits(self) -> None:
        """Values beyond 64 bits keep their low 64 bits, as signed."""
        assert lex("18446744073709551615") == (Token.integer(-1), EOF)
        assert lex("9223372036854775808") == (Token.integer(-(1 << 63)), EOF)
        assert lex("18446744073709551658") == (Token.integer(42), EOF)

    def test_i64_bounds_unchanged(self) -> None:
        """The signed 64-bit extremes lex unchanged."""
        assert lex("9223372036854775807") == (Token.integer((1 << 63) - 1), EOF)
        assert lex("-9223372036854775808") == (Token.integer(-(1 << 63)), EOF)

    def test_lone_minus_is_no_integer(self) -> None:
        """lex_integer needs at least one digit."""
        assert lex_integer(Cursor("-x", 0)) is None


class TestStringLiterals:
    """Test string literal lexing."""

    def test_simple(self) -> None:
        """Text between double quotes is kept raw."""
        assert lex('"HELLO"') == (Token.string("HELLO"), EOF)

    def test_keeps_whitespace_and_hash(self) -> None:
        """Spaces and # inside quotes belong to the string."""
        assert lex('" a # b "') == (Token.string(" a # b "), EOF)

    def test_empty_string_is_illegal(self) -> None:
        """"" has no body and lexes as two Illegal tokens."""
        assert lex('""') == (Token.illegal('"'), Token.illegal('"'), EOF)

    def test_unterminated(self) -> None:
        """A lone quote is Illegal, the rest lexes normally."""
        assert lex('"abc') == (Token.illegal('"'), Token.ident("abc"), EOF)

    def test_rule_returns_none_without_quote(self) -> None:
        """lex_string does not match outside quotes."""
        assert lex_string(Cursor("abc", 0)) is None


class TestBytesLiterals:
    """Test backtick byte-sequence lexing."""

    def test_hex_bytes(self) -> None:
        """Space-separated hex pairs decode to bytes."""
        expected = Token.byte_seq(bytes([0xDE, 0xAD, 0xC0, 0x0F, 0xFE]))
        assert lex("`de ad c0 0f fe`") == (expected, EOF)

    def test_single_digit_chunk(self) -> None:
        """One hex digit is a valid chunk."""
        assert lex("`a`") == (Token.byte_seq(b"\x0a"), EOF)

    def test_invalid_hex_falls_back(self) -> None:
        """A bad chunk makes the backtick Illegal and the interior lex normally."""
        assert lex("`g5 d6`") == (
            Token.illegal("`"),
            Token.ident("g5"),
            Token.ident("d6"),
            Token.illegal("`"),
            EOF,
        )

    def test_double_space_fails(self) -> None:
        """An empty chunk fails the whole literal."""
        assert lex_bytes(Cursor("`de  ad`", 0)) is None

    def test_chunk_over_ff_fails(self) -> None:
        """A chunk above 0xFF is not a byte."""
        assert lex_bytes(Cursor("`100`", 0)) is None


class TestReservedIdentifiers:
    """Test reserved identifier lexing."""

    @pytest.mark.parametrize("text", ["NULL", "null", "LF", "lf", "RF", "Rf"])
    def test_reserved_keeps_spelling(self, text: str) -> None:
        """Reserved names lex case-insensitively and keep their spelling."""
        assert lex(text) == (Token.reserved(text), EOF)


# ============================================================================
# IDENTIFIERS AND TYPES
# ============================================================================


class TestIdentifiers:
    """Test identifier classification."""

    @pytest.mark.parametrize("text", ["u32", "U32", "le_i16", "BE_U64", "string", "bytes", "ref"])
    def test_types(self, text: str) -> None:
        """Type names lex to Type tokens with the original spelling."""
        assert lex(text) == (Token.type_name(text), EOF)

    def test_free_identifier(self) -> None:
        """Anything else is a free identifier."""
        assert lex("payload_2") == (Token.ident("payload_2"), EOF)

    def test_identifier_prefix_of_type(self) -> None:
        """u321 is not a type name."""
        assert lex("u321") == (Token.ident("u321"), EOF)

    def test_array_type(self) -> None:
        """name[size] lexes to one TypeArray token."""
        assert lex("bytes[16]") == (Token(TokenKind.TYPE_ARRAY, ("bytes", 16)), EOF)

    def test_array_type_negative_size_sign_dropped(self) -> None:
        """A leading minus in the size is consumed and ignored."""
        assert lex("bytes[-4]") == (Token(TokenKind.TYPE_ARRAY, ("bytes", 4)), EOF)

    def test_array_size_over_u32_is_no_match(self) -> None:
        """Sizes beyond 32 bits fail the array rule."""
        assert lex_ident_array(Cursor("x[4294967296]", 0)) is None
        assert lex_ident_array(Cursor("x[4294967295]", 0)) is not None

    def test_non_ascii_is_illegal_per_character(self) -> None:
        """Each unrecognized code point becomes its own Illegal token."""
        assert lex("é€") == (Token.illegal("é"), Token.illegal("€"), EOF)


# ============================================================================
# COMMENTS, WHITESPACE, SPANS
# ============================================================================


class TestCommentsAndWhitespace:
    """Test comments and whitespace handling."""

    def test_comment_discarded(self) -> None:
        """# runs to the end of line and produces no token."""
        assert lex("DEFINE # the group\ncmd") == (
            Token(TokenKind.DEFINE),
            Token.ident("cmd"),
            EOF,
        )

    def test_bare_hash(self) -> None:
        """A # with nothing after it is still a comment."""
        assert lex("#") == (EOF,)

    def test_empty_source(self) -> None:
        """Empty source lexes to a lone EOF."""
        assert lex("") == (EOF,)

    def test_spans(self) -> None:
        """Spans cover the token's source text."""
        tokens = lex("DEFINE cmd")
        assert tokens[0].span == Span(0, 6)
        assert tokens[1].span == Span(7, 10)
        assert tokens[2].span == Span(10, 10)


class TestLexerProperties:
    """Property tests over arbitrary input."""

    @given(source=fuzl_chaos_source())
    def test_single_trailing_eof_and_no_comments(self, source: str) -> None:
        """PROPERTY: output ends with exactly one EOF and never holds a Comment."""
        tokens = lex(source)
        kinds = [token.kind for token in tokens]

        assert kinds[-1] is TokenKind.EOF
        assert kinds.count(TokenKind.EOF) == 1
        assert TokenKind.COMMENT not in kinds

    @given(source=fuzl_chaos_source())
    def test_deterministic(self, source: str) -> None:
        """PROPERTY: lexing the same text twice gives equal tokens."""
        assert lex(source) == lex(source)
