"""Core fuzl parser implementation.

This module provides the FuzlParser class that drives the statement rules of
:mod:`bajzel.syntax.parser.rules` over a token stream and produces a
:class:`~bajzel.syntax.ast.Program`.

Architecture:
    Parsing runs over an immutable :class:`~bajzel.syntax.cursor.TokenCursor`.
    Each statement rule returns a ParseResult holding the statements it
    expands to, or None; the first rule that matches wins. A position where
    no rule matches stops the parse with a BajzelParseError.

Security:
    Includes a configurable source size limit, applied by parse_source()
    before the text is lexed.
"""

import logging
from collections.abc import Sequence

from bajzel.constants import MAX_SOURCE_SIZE
from bajzel.diagnostics import BajzelParseError, ErrorTemplate, SourceSpan
from bajzel.enums import TokenKind
from bajzel.syntax.ast import Program, Run, Statement
from bajzel.syntax.cursor import LineOffsetCache, TokenCursor
from bajzel.syntax.lexer import lex
from bajzel.syntax.parser.rules import parse_statement
from bajzel.syntax.tokens import Token

__all__ = ["FuzlParser"]

logger = logging.getLogger(__name__)


def _locate(token: Token, source: str | None) -> SourceSpan | None:
    """Line:column span of a lexed token, when the source text is known."""
    if source is None or token.span is None:
        return None
    line, column = LineOffsetCache(source).get_line_col(token.span.start)
    return SourceSpan(start=token.span.start, end=token.span.end, line=line, column=column)


class FuzlParser:
    """fuzl parser using the immutable token cursor pattern.

    Design:
    - Statement rules are pure functions; backtracking reuses the old cursor
    - Parsing stops at the first position no statement form matches
    - Error messages name the offending token and the token after it

    Attributes:
        max_source_size: Maximum accepted source length in characters
            (default: 1 MiB, 0 disables the check)
    """

    __slots__ = ("_max_source_size",)

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize parser with an optional source size limit.

        Args:
            max_source_size: Maximum source size in characters (default: 1 MiB).
                Set to 0 to disable the limit.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )

    @property
    def max_source_size(self) -> int:
        """Maximum accepted source length in characters."""
        return self._max_source_size

    def parse(self, tokens: Sequence[Token], source: str | None = None) -> Program:
        """Parse a token sequence into a Program.

        Args:
            tokens: Lexer output (normally terminated by one EOF token)
            source: Text the tokens were lexed from; only used to add a
                line:column location to errors

        Returns:
            Program whose statements end with exactly one Run

        Raises:
            BajzelParseError: If some position matches no statement form, or
                the tokens do not end in EOF

        Example:
            >>> FuzlParser().parse(lex("DEFINE cmd"))
            Program(statements=(StartGroupDefinition(name='cmd'), Run()))
        """
        cursor = TokenCursor(tuple(tokens))
        statements: list[Statement] = []

        while not cursor.is_eof:
            result = parse_statement(cursor)
            if result is None:
                raise self._error(cursor, source)
            statements.extend(result.value)
            cursor = result.cursor

        if cursor.expect(TokenKind.EOF) is None:
            raise self._error(cursor, source)

        statements.append(Run())
        logger.debug("Parsed %d statements from %d tokens", len(statements), len(tokens))
        return Program(tuple(statements))

    def parse_source(self, source: str) -> Program:
        """Lex and parse source text, enforcing the size limit first.

        Raises:
            BajzelParseError: If the source is too large or does not parse
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            diagnostic = ErrorTemplate.source_too_large(len(source), self._max_source_size)
            raise BajzelParseError(diagnostic)
        return self.parse(lex(source), source)

    @staticmethod
    def _error(cursor: TokenCursor, source: str | None) -> BajzelParseError:
        token = cursor.peek()
        next_token = cursor.peek(1)
        if token is None:
            diagnostic = ErrorTemplate.unexpected_token("end of input", "end of input")
            return BajzelParseError(diagnostic)
        diagnostic = ErrorTemplate.unexpected_token(
            repr(token),
            repr(next_token) if next_token is not None else "end of input",
            _locate(token, source),
        )
        return BajzelParseError(diagnostic, token=token, next_token=next_token)
