"""Grammar rules for the fuzl parser.

Grammar (informal EBNF):

    program      := statement* EOF
    statement    := group_header | gen_header | field_decl | where_header
                  | field_update | param_assign
    group_header := DEFINE ident
    gen_header   := GENERATE ident [WITH]
    field_decl   := (type | literal) [AS ident] ['->' attr_clauses]
    attr_clauses := attr_clause ([','] attr_clause)* [',']
    attr_clause  := ident '(' expr+ ')'
    field_update := ident '->' attr_clauses
    param_assign := ident '=' expr
    expr         := literal

Statement forms are tried in order; the first one that matches wins.
Every rule takes an immutable TokenCursor and returns ParseResult or None,
so a failed alternative costs nothing to abandon.

Tie-break:
    A type token starts a variable field, which may carry inline attribute
    clauses (and then needs an alias). A literal starts a constant field,
    which never carries attribute clauses.
"""

from bajzel.enums import TokenKind
from bajzel.syntax.ast import (
    DefineConstField,
    DefineVariableField,
    Expr,
    GroupExpr,
    LiteralExpr,
    MakeCurrentField,
    StartFieldsSection,
    StartGeneratorDefinition,
    StartGroupDefinition,
    Statement,
    UpdateField,
    UpdateParam,
)
from bajzel.syntax.cursor import ParseResult, TokenCursor
from bajzel.syntax.parser.primitives import (
    parse_ident,
    parse_keyword,
    parse_literal,
    parse_type,
)

__all__ = ["parse_expr", "parse_statement"]

type StatementsResult = ParseResult[tuple[Statement, ...], TokenCursor]

# =============================================================================
# Expressions
# =============================================================================


def parse_expr(cursor: TokenCursor) -> ParseResult[Expr, TokenCursor] | None:
    """Parse expression: a single literal."""
    result = parse_literal(cursor)
    if result is None:
        return None
    return ParseResult(LiteralExpr(result.value), result.cursor)


def parse_attr_arguments(cursor: TokenCursor) -> ParseResult[Expr, TokenCursor] | None:
    """Parse attribute arguments: '(' expr+ ')'

    A single argument is unwrapped; two or more become a GroupExpr.

    Examples:
        (4)     -> LiteralExpr(IntegerLiteral(4))
        (1 10)  -> GroupExpr((LiteralExpr(...), LiteralExpr(...)))
        ()      -> None
    """
    after_paren = parse_keyword(cursor, TokenKind.LEFT_PAREN)
    if after_paren is None:
        return None

    items: list[Expr] = []
    cursor = after_paren
    while (expr_result := parse_expr(cursor)) is not None:
        items.append(expr_result.value)
        cursor = expr_result.cursor

    if not items:
        return None
    after_close = parse_keyword(cursor, TokenKind.RIGHT_PAREN)
    if after_close is None:
        return None

    expr: Expr = items[0] if len(items) == 1 else GroupExpr(tuple(items))
    return ParseResult(expr, after_close)


def parse_attr_clause(cursor: TokenCursor) -> ParseResult[UpdateField, TokenCursor] | None:
    """Parse attribute clause: ident '(' expr+ ')'

    Example:
        LEN(1 10) -> UpdateField("LEN", GroupExpr(...))
    """
    name_result = parse_ident(cursor)
    if name_result is None:
        return None
    args_result = parse_attr_arguments(name_result.cursor)
    if args_result is None:
        return None
    return ParseResult(UpdateField(name_result.value, args_result.value), args_result.cursor)


def parse_attr_clauses(
    cursor: TokenCursor,
) -> ParseResult[tuple[UpdateField, ...], TokenCursor] | None:
    """Parse one or more attribute clauses.

    Clauses may be separated by commas or just whitespace, and one trailing
    comma is accepted:

        RANGE(0 5) FORMAT("hex")
        RANGE(0 5), FORMAT("hex"),
    """
    first = parse_attr_clause(cursor)
    if first is None:
        return None

    clauses = [first.value]
    cursor = first.cursor
    while True:
        after_comma = parse_keyword(cursor, TokenKind.COMMA)
        clause = parse_attr_clause(after_comma if after_comma is not None else cursor)
        if clause is None:
            if after_comma is not None:
                cursor = after_comma
            break
        clauses.append(clause.value)
        cursor = clause.cursor

    return ParseResult(tuple(clauses), cursor)


# =============================================================================
# Statements
# =============================================================================


def parse_alias(cursor: TokenCursor) -> ParseResult[str | None, TokenCursor]:
    """Parse optional alias: [AS ident]

    Always succeeds; the value is None when no complete alias follows.
    """
    after_as = parse_keyword(cursor, TokenKind.AS)
    if after_as is not None:
        ident = parse_ident(after_as)
        if ident is not None:
            return ParseResult(ident.value, ident.cursor)
    return ParseResult(None, cursor)


def parse_group_header(cursor: TokenCursor) -> StatementsResult | None:
    """Parse group header: DEFINE ident"""
    after_define = parse_keyword(cursor, TokenKind.DEFINE)
    if after_define is None:
        return None
    name = parse_ident(after_define)
    if name is None:
        return None
    return ParseResult((StartGroupDefinition(name.value),), name.cursor)


def parse_generator_header(cursor: TokenCursor) -> StatementsResult | None:
    """Parse generator header: GENERATE ident [WITH]"""
    after_generate = parse_keyword(cursor, TokenKind.GENERATE)
    if after_generate is None:
        return None
    name = parse_ident(after_generate)
    if name is None:
        return None
    end = parse_keyword(name.cursor, TokenKind.WITH) or name.cursor
    return ParseResult((StartGeneratorDefinition(name.value),), end)


def parse_variable_field(cursor: TokenCursor) -> StatementsResult | None:
    """Parse variable field: type [AS ident] ['->' attr_clauses]

    Inline attribute clauses need an alias and expand to the field
    definition, a MakeCurrentField for the alias, then one UpdateField per
    clause.

    Examples:
        u32 AS size
            -> (DefineVariableField("u32", "size"),)
        string AS cmd -> LEN(4)
            -> (DefineVariableField("string", "cmd"),
                MakeCurrentField("cmd"),
                UpdateField("LEN", LiteralExpr(IntegerLiteral(4))))
    """
    kind = parse_type(cursor)
    if kind is None:
        return None
    alias = parse_alias(kind.cursor)
    definition = DefineVariableField(kind.value, alias.value)

    after_arrow = parse_keyword(alias.cursor, TokenKind.RIGHT_ARROW)
    if after_arrow is None:
        return ParseResult((definition,), alias.cursor)

    if alias.value is None:
        return None
    clauses = parse_attr_clauses(after_arrow)
    if clauses is None:
        return None
    statements = (definition, MakeCurrentField(alias.value), *clauses.value)
    return ParseResult(statements, clauses.cursor)


def parse_const_field(cursor: TokenCursor) -> StatementsResult | None:
    """Parse constant field: literal [AS ident]

    Examples:
        "BM" AS magic -> (DefineConstField(StringLiteral("BM"), "magic"),)
        42            -> (DefineConstField(IntegerLiteral(42), None),)
    """
    literal = parse_literal(cursor)
    if literal is None:
        return None
    alias = parse_alias(literal.cursor)
    return ParseResult((DefineConstField(literal.value, alias.value),), alias.cursor)


def parse_fields_section(cursor: TokenCursor) -> StatementsResult | None:
    """Parse section header: WHERE"""
    after_where = parse_keyword(cursor, TokenKind.WHERE)
    if after_where is None:
        return None
    return ParseResult((StartFieldsSection(),), after_where)


def parse_field_update(cursor: TokenCursor) -> StatementsResult | None:
    """Parse field update: ident '->' attr_clauses

    Example:
        size -> RANGE(0 7), FORMAT("hex")
            -> (MakeCurrentField("size"), UpdateField("RANGE", ...),
                UpdateField("FORMAT", ...))
    """
    name = parse_ident(cursor)
    if name is None:
        return None
    after_arrow = parse_keyword(name.cursor, TokenKind.RIGHT_ARROW)
    if after_arrow is None:
        return None
    clauses = parse_attr_clauses(after_arrow)
    if clauses is None:
        return None
    return ParseResult((MakeCurrentField(name.value), *clauses.value), clauses.cursor)


def parse_param_assign(cursor: TokenCursor) -> StatementsResult | None:
    """Parse generator parameter: ident '=' expr

    Example:
        OUT_MAX = 32 -> (UpdateParam("OUT_MAX", LiteralExpr(IntegerLiteral(32))),)
    """
    name = parse_ident(cursor)
    if name is None:
        return None
    after_assign = parse_keyword(name.cursor, TokenKind.ASSIGN)
    if after_assign is None:
        return None
    expr = parse_expr(after_assign)
    if expr is None:
        return None
    return ParseResult((UpdateParam(name.value, expr.value),), expr.cursor)


_STATEMENT_RULES = (
    parse_group_header,
    parse_generator_header,
    parse_variable_field,
    parse_const_field,
    parse_fields_section,
    parse_field_update,
    parse_param_assign,
)


def parse_statement(cursor: TokenCursor) -> StatementsResult | None:
    """Parse one statement form, returning the statements it expands to.

    Returns:
        ParseResult with one or more statements, or None if no form matches
    """
    for rule in _STATEMENT_RULES:
        result = rule(cursor)
        if result is not None:
            return result
    return None
