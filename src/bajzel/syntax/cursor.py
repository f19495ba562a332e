"""Immutable cursor infrastructure for type-safe lexing and parsing.

Implements the immutable cursor pattern for zero-`None` parsing over two
kinds of input: source characters (lexer) and tokens (parser).
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursors are immutable (frozen dataclasses)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Backtracking is free: keep the old cursor, drop the new one
    - Line:column looked up through LineOffsetCache (only for errors)

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass
from typing import overload

from bajzel.enums import TokenKind
from bajzel.syntax.tokens import Token

__all__ = ["Cursor", "LineOffsetCache", "ParseResult", "TokenCursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker used by the lexer.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def starts_with(self, text: str) -> bool:
        """Check whether the remaining source starts with text."""
        return self.source.startswith(text, self.pos)

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor("hello", 0).expect("h").pos
            1
            >>> Cursor("hello", 0).expect("x") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def skip_while(self, chars: str) -> "Cursor":
        """Skip consecutive characters contained in chars."""
        c = self
        while not c.is_eof and c.current in chars:
            c = c.advance()
        return c

    def skip_to_line_end(self) -> "Cursor":
        """Advance to the next line ending character (not consumed)."""
        cursor = self
        while not cursor.is_eof and cursor.current not in ("\n", "\r"):
            cursor = cursor.advance()
        return cursor


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in O(n) single pass, then provides
    O(log n) lookups using binary search. LF, CRLF and a lone CR each end
    a line.

    Example:
        >>> cache = LineOffsetCache("line1\\nline2\\nline3")
        >>> cache.get_line_col(0)
        (1, 1)
        >>> cache.get_line_col(8)
        (2, 3)
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        offsets = [0]
        for i, char in enumerate(source):
            if char == "\n" or (char == "\r" and source[i + 1 : i + 2] != "\n"):
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get line and column for position using binary search.

        Args:
            pos: Character position in source (0-indexed, clamped to source)

        Returns:
            (line, column) tuple (1-indexed)
        """
        pos = max(0, min(pos, self._source_len))

        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= pos:
                left = mid
            else:
                right = mid - 1

        return (left + 1, pos - self._offsets[left] + 1)


@dataclass(frozen=True, slots=True)
class TokenCursor:
    """Immutable, indexable view over a token sequence used by the parser.

    Indexing and slicing are relative to the cursor position, so
    ``cursor[0]`` is the current token and ``cursor[1:]`` is everything
    after it. A token sequence from the lexer always ends in EOF, so
    ``current`` is only unavailable when the cursor was built over a
    sequence without one.

    Example:
        >>> tokens = (Token(TokenKind.DEFINE), Token.ident("cmd"), Token(TokenKind.EOF))
        >>> cursor = TokenCursor(tokens)
        >>> cursor.current
        Token.Define
        >>> cursor.advance()[0]
        Token.Ident('cmd')
        >>> len(cursor.advance(2))
        1
    """

    tokens: tuple[Token, ...]
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """True when no tokens remain or the current token is EOF."""
        return self.pos >= len(self.tokens) or self.tokens[self.pos].kind is TokenKind.EOF

    @property
    def is_exhausted(self) -> bool:
        """True when no tokens remain at all."""
        return self.pos >= len(self.tokens)

    @property
    def current(self) -> Token:
        """Get current token.

        Raises:
            EOFError: If no tokens remain
        """
        if self.is_exhausted:
            msg = f"Unexpected end of tokens at position {self.pos}"
            raise EOFError(msg)
        return self.tokens[self.pos]

    def peek(self, offset: int = 0) -> Token | None:
        """Peek at token with offset without advancing (None beyond the end)."""
        target_pos = self.pos + offset
        if target_pos >= len(self.tokens):
            return None
        return self.tokens[target_pos]

    def advance(self, count: int = 1) -> "TokenCursor":
        """Return new cursor advanced by count tokens (clamped at the end)."""
        new_pos = min(self.pos + count, len(self.tokens))
        return TokenCursor(self.tokens, new_pos)

    def expect(self, kind: TokenKind) -> "TokenCursor | None":
        """Consume current token if it has the expected kind, return None otherwise."""
        if not self.is_exhausted and self.tokens[self.pos].kind is kind:
            return self.advance()
        return None

    @property
    def remaining(self) -> tuple[Token, ...]:
        """Tokens from the current position to the end."""
        return self.tokens[self.pos :]

    def __len__(self) -> int:
        return max(len(self.tokens) - self.pos, 0)

    @overload
    def __getitem__(self, index: int) -> Token: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Token, ...]: ...

    def __getitem__(self, index: int | slice) -> Token | tuple[Token, ...]:
        return self.remaining[index]


@dataclass(frozen=True, slots=True)
class ParseResult[T, C: (Cursor, TokenCursor)]:
    """Rule result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value
        C: The cursor type (Cursor for the lexer, TokenCursor for the parser)

    Every rule has signature:
        def rule(cursor: C) -> ParseResult[Foo, C] | None

    where None means "no match" and the caller still holds the cursor it
    passed in.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: C
