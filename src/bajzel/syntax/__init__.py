"""fuzl syntax package.

Provides the lexer, token model, parser, AST definitions and serializer.
Separate from the evaluator so tooling can work on programs without
evaluating them.

Python 3.13+.
"""

from collections.abc import Sequence

from .ast import (
    BytesLiteral,
    DefineConstField,
    DefineVariableField,
    Expr,
    GroupExpr,
    IntegerLiteral,
    Literal,
    LiteralExpr,
    MakeCurrentField,
    Program,
    ReservedLiteral,
    Run,
    StartFieldsSection,
    StartGeneratorDefinition,
    StartGroupDefinition,
    Statement,
    StringLiteral,
    UpdateField,
    UpdateParam,
)
from .cursor import Cursor, ParseResult, TokenCursor
from .lexer import lex
from .parser import FuzlParser
from .serializer import FuzlSerializer, serialize
from .tokens import Span, Token

__all__ = [
    "BytesLiteral",
    "Cursor",
    "DefineConstField",
    "DefineVariableField",
    "Expr",
    "FuzlParser",
    "FuzlSerializer",
    "GroupExpr",
    "IntegerLiteral",
    "Literal",
    "LiteralExpr",
    "MakeCurrentField",
    "ParseResult",
    "Program",
    "ReservedLiteral",
    "Run",
    "Span",
    "StartFieldsSection",
    "StartGeneratorDefinition",
    "StartGroupDefinition",
    "Statement",
    "StringLiteral",
    "Token",
    "TokenCursor",
    "UpdateField",
    "UpdateParam",
    "lex",
    "parse",
    "serialize",
]


def parse(tokens: Sequence[Token]) -> Program:
    """Parse lexer tokens into a Program.

    Convenience function for FuzlParser.parse().

    Args:
        tokens: Token sequence ending in EOF

    Returns:
        Program ending with one Run statement

    Raises:
        BajzelParseError: If the tokens do not form a program

    Example:
        >>> from bajzel.syntax import lex, parse
        >>> parse(lex("DEFINE cmd"))[0]
        StartGroupDefinition(name='cmd')
    """
    parser = FuzlParser()
    return parser.parse(tokens)
