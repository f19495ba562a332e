"""fuzl AST node definitions.

The parser turns tokens into a flat Program: an ordered sequence of
statements that the evaluator folds one by one. Nodes are frozen
dataclasses, so two parses of the same tokens compare equal.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeIs, overload

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Literals
    "IntegerLiteral",
    "StringLiteral",
    "BytesLiteral",
    "ReservedLiteral",
    # Expressions
    "LiteralExpr",
    "GroupExpr",
    # Statements
    "StartGroupDefinition",
    "StartGeneratorDefinition",
    "DefineVariableField",
    "DefineConstField",
    "MakeCurrentField",
    "UpdateField",
    "StartFieldsSection",
    "UpdateParam",
    "Run",
    # Program
    "Program",
    # Type aliases
    "Literal",
    "Expr",
    "Statement",
]

# ============================================================================
# LITERALS
# ============================================================================


@dataclass(frozen=True, slots=True)
class IntegerLiteral:
    """Signed 64-bit integer: 42, -7"""

    value: int


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """Double-quoted string: "HELLO" """

    value: str


@dataclass(frozen=True, slots=True)
class BytesLiteral:
    """Backtick byte sequence: `de ad be ef`"""

    value: bytes


@dataclass(frozen=True, slots=True)
class ReservedLiteral:
    """Reserved symbol: NULL, LF or RF (spelling as written)."""

    name: str

    @property
    def canonical(self) -> str:
        """Uppercase spelling used for lookups."""
        return self.name.upper()


type Literal = IntegerLiteral | StringLiteral | BytesLiteral | ReservedLiteral

# ============================================================================
# EXPRESSIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class LiteralExpr:
    """Single literal expression."""

    literal: Literal

    @staticmethod
    def guard(expr: object) -> TypeIs["LiteralExpr"]:
        """Type guard for LiteralExpr."""
        return isinstance(expr, LiteralExpr)


@dataclass(frozen=True, slots=True)
class GroupExpr:
    """Parenthesized list of two or more expressions.

    Example:
        RANGE(0 10) -> GroupExpr((LiteralExpr(IntegerLiteral(0)),
                                  LiteralExpr(IntegerLiteral(10))))
    """

    items: tuple["Expr", ...]

    @staticmethod
    def guard(expr: object) -> TypeIs["GroupExpr"]:
        """Type guard for GroupExpr."""
        return isinstance(expr, GroupExpr)


type Expr = LiteralExpr | GroupExpr

# ============================================================================
# STATEMENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class StartGroupDefinition:
    """Create a new group and make it current.

    Example:
        DEFINE cmd
    """

    name: str


@dataclass(frozen=True, slots=True)
class StartGeneratorDefinition:
    """Start the generator definition for a group.

    Example:
        GENERATE cmd WITH
    """

    name: str


@dataclass(frozen=True, slots=True)
class DefineVariableField:
    """Append a randomized field to the current group.

    Example:
        u32 AS size
    """

    kind: str
    alias: str | None = None


@dataclass(frozen=True, slots=True)
class DefineConstField:
    """Append a constant field to the current group.

    Example:
        "BM" AS magic
    """

    literal: Literal
    alias: str | None = None


@dataclass(frozen=True, slots=True)
class MakeCurrentField:
    """Make a field of the current group the target of attribute updates.

    Example:
        size -> ...
    """

    name: str


@dataclass(frozen=True, slots=True)
class UpdateField:
    """Call an attribute function on the current field.

    Example:
        RANGE(0 10)
    """

    attribute: str
    expr: Expr


@dataclass(frozen=True, slots=True)
class StartFieldsSection:
    """Bare WHERE: following updates address already declared fields."""


@dataclass(frozen=True, slots=True)
class UpdateParam:
    """Assign a generator parameter.

    Example:
        OUT_MAX = 32
    """

    name: str
    expr: Expr


@dataclass(frozen=True, slots=True)
class Run:
    """End of program marker, appended by the parser after the last statement."""


type Statement = (
    StartGroupDefinition
    | StartGeneratorDefinition
    | DefineVariableField
    | DefineConstField
    | MakeCurrentField
    | UpdateField
    | StartFieldsSection
    | UpdateParam
    | Run
)

# ============================================================================
# PROGRAM
# ============================================================================


@dataclass(frozen=True, slots=True)
class Program:
    """Parsed program: statements in source order, ending with Run."""

    statements: tuple[Statement, ...]

    def __iter__(self) -> Iterator[Statement]:
        return iter(self.statements)

    def __len__(self) -> int:
        return len(self.statements)

    @overload
    def __getitem__(self, index: int) -> Statement: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Statement, ...]: ...

    def __getitem__(self, index: int | slice) -> Statement | tuple[Statement, ...]:
        return self.statements[index]
