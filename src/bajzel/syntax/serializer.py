"""Serialize a fuzl Program back to spec-language text.

Converts statements to source text. Useful for:
- Dumping what the parser understood (``bajzel --dump statements``)
- Code generators writing .fuzl files
- Property-based testing (roundtrip: lex -> parse -> serialize -> lex -> parse)

Python 3.13+.
"""

from bajzel.diagnostics import SerializationError

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

__all__ = ["FuzlSerializer", "serialize"]

_INDENT = "    "


class FuzlSerializer:
    """Converts a Program back to fuzl source text.

    Section headers (DEFINE, WHERE, GENERATE) start at column 0 and the
    statements under them are indented. A MakeCurrentField and the
    UpdateFields after it share one ``alias -> A(x), B(y)`` line; when the
    addressed field was declared on the line just before, the clauses are
    attached to the declaration instead. Run is implied and never written.

    Usage:
        >>> from bajzel import lex, parse
        >>> program = parse(lex("DEFINE cmd string AS s -> LEN(3 3)"))
        >>> print(FuzlSerializer().serialize(program), end="")
        DEFINE cmd
            string AS s -> LEN(3 3)
    """

    def serialize(self, program: Program) -> str:
        """Serialize Program to fuzl text, one statement per line.

        Raises:
            SerializationError: If a statement cannot be expressed in the
                language
        """
        lines: list[str] = []
        statements = program.statements
        index = 0
        while index < len(statements):
            line, index = self._serialize_statement(statements, index)
            if line is not None:
                lines.append(line)
        return "".join(f"{line}\n" for line in lines)

    def _serialize_statement(
        self, statements: tuple[Statement, ...], index: int
    ) -> tuple[str | None, int]:
        """Render the statement at index (plus any it absorbs); return the next index."""
        statement = statements[index]
        match statement:
            case StartGroupDefinition(name=name):
                return f"DEFINE {name}", index + 1
            case StartGeneratorDefinition(name=name):
                return f"GENERATE {name} WITH", index + 1
            case StartFieldsSection():
                return "WHERE", index + 1
            case DefineVariableField(kind=kind, alias=alias):
                line = kind + self._alias(alias)
                clauses, after = self._inline_clauses(statements, index + 1, alias)
                if clauses:
                    return f"{_INDENT}{line} -> {clauses}", after
                return _INDENT + line, index + 1
            case DefineConstField(literal=literal, alias=alias):
                return _INDENT + self._literal(literal) + self._alias(alias), index + 1
            case MakeCurrentField(name=name):
                clauses, after = self._clauses(statements, index + 1)
                if not clauses:
                    msg = f"Field '{name}' is selected but no attribute update follows"
                    raise SerializationError(msg)
                return f"{_INDENT}{name} -> {clauses}", after
            case UpdateField(attribute=attribute):
                msg = f"{attribute}: attribute update without a preceding field selection"
                raise SerializationError(msg)
            case UpdateParam(name=name, expr=expr):
                return f"{_INDENT}{name} = {self._scalar(expr, name)}", index + 1
            case Run():
                return None, index + 1

    def _inline_clauses(
        self, statements: tuple[Statement, ...], index: int, alias: str | None
    ) -> tuple[str, int]:
        """Clauses of a MakeCurrentField(alias) directly after a declaration."""
        if alias is None or index >= len(statements):
            return "", index
        match statements[index]:
            case MakeCurrentField(name=name) if name == alias:
                return self._clauses(statements, index + 1)
            case _:
                return "", index

    def _clauses(self, statements: tuple[Statement, ...], index: int) -> tuple[str, int]:
        """Join consecutive UpdateFields starting at index."""
        clauses: list[str] = []
        while index < len(statements):
            match statements[index]:
                case UpdateField(attribute=attribute, expr=expr):
                    clauses.append(f"{attribute}({self._arguments(expr, attribute)})")
                    index += 1
                case _:
                    break
        return ", ".join(clauses), index

    @staticmethod
    def _alias(alias: str | None) -> str:
        return f" AS {alias}" if alias is not None else ""

    def _arguments(self, expr: Expr, context: str) -> str:
        if LiteralExpr.guard(expr):
            return self._literal(expr.literal)
        if len(expr.items) < 2:
            msg = f"{context}: argument group needs at least two items, got {len(expr.items)}"
            raise SerializationError(msg)
        return " ".join(self._scalar(item, context) for item in expr.items)

    def _scalar(self, expr: Expr, context: str) -> str:
        if GroupExpr.guard(expr):
            msg = f"{context}: nested group expressions cannot be written"
            raise SerializationError(msg)
        return self._literal(expr.literal)

    @staticmethod
    def _literal(literal: Literal) -> str:
        match literal:
            case IntegerLiteral(value=value):
                return str(value)
            case StringLiteral(value=value):
                if not value or '"' in value:
                    msg = f"String literal {value!r} cannot be written between double quotes"
                    raise SerializationError(msg)
                return f'"{value}"'
            case BytesLiteral(value=value):
                if not value:
                    msg = "Empty byte sequence cannot be written"
                    raise SerializationError(msg)
                return "`" + " ".join(f"{byte:02x}" for byte in value) + "`"
            case ReservedLiteral(name=name):
                return name


def serialize(program: Program) -> str:
    """Serialize Program to fuzl text.

    Convenience function for FuzlSerializer.serialize().

    Raises:
        SerializationError: If the program holds a statement or literal
            the language cannot express

    Example:
        >>> from bajzel import lex, parse, serialize
        >>> serialize(parse(lex("DEFINE cmd 42 AS x GENERATE cmd OUT_MAX = 3")))
        'DEFINE cmd\\n    42 AS x\\nGENERATE cmd WITH\\n    OUT_MAX = 3\\n'
    """
    return FuzlSerializer().serialize(program)
