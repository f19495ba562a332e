"""Tests for the fuzl serializer.

Covers rendering of each statement, clause folding, unrepresentable
programs and the parse(lex(serialize(p))) == p roundtrip.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings

from bajzel.diagnostics import SerializationError
from bajzel.syntax import (
    BytesLiteral,
    DefineConstField,
    DefineVariableField,
    FuzlSerializer,
    GroupExpr,
    IntegerLiteral,
    LiteralExpr,
    MakeCurrentField,
    Program,
    Run,
    StringLiteral,
    UpdateField,
    UpdateParam,
    lex,
    parse,
    serialize,
)
from tests.strategies import fuzl_programs


def _int(value: int) -> LiteralExpr:
    return LiteralExpr(IntegerLiteral(value))


class TestSerialize:
    """Test rendered text."""

    def test_layout(self) -> None:
        """Headers start at column 0, statements under them are indented."""
        source = (
            'DEFINE req "GET " AS verb string AS path -> LEN(1 8), LEN(2) '
            "WHERE path -> LEN(3) GENERATE req OUT_MAX = 64 TERM = LF"
        )
        assert serialize(parse(lex(source))) == (
            "DEFINE req\n"
            '    "GET " AS verb\n'
            "    string AS path -> LEN(1 8), LEN(2)\n"
            "WHERE\n"
            "    path -> LEN(3)\n"
            "GENERATE req WITH\n"
            "    OUT_MAX = 64\n"
            "    TERM = LF\n"
        )

    def test_literals(self) -> None:
        """Each literal kind renders in its source form."""
        source = "DEFINE a -12 `de ad 0f` WHERE x -> T(NULL \"s\")"
        assert serialize(parse(lex(source))) == (
            "DEFINE a\n"
            "    -12\n"
            "    `de ad 0f`\n"
            "WHERE\n"
            '    x -> T(NULL "s")\n'
        )

    def test_selection_not_folded_into_other_alias(self) -> None:
        """Clauses stay on their own line when they address a different field."""
        program = Program(
            (
                DefineVariableField("u8", "a"),
                MakeCurrentField("b"),
                UpdateField("LEN", _int(1)),
                Run(),
            )
        )
        assert serialize(program) == "    u8 AS a\n    b -> LEN(1)\n"

    def test_run_not_written(self) -> None:
        """Run is implied by the end of the text."""
        assert serialize(Program((Run(),))) == ""

    def test_class_and_function_agree(self) -> None:
        """serialize() is FuzlSerializer().serialize()."""
        program = parse(lex('DEFINE a "x" GENERATE a'))
        assert FuzlSerializer().serialize(program) == serialize(program)


class TestUnrepresentable:
    """Test programs the language cannot express."""

    @pytest.mark.parametrize(
        "statements",
        [
            (DefineConstField(StringLiteral("")),),
            (DefineConstField(StringLiteral('say "hi"')),),
            (DefineConstField(BytesLiteral(b"")),),
            (UpdateField("LEN", _int(1)),),
            (MakeCurrentField("a"),),
            (MakeCurrentField("a"), UpdateField("LEN", GroupExpr((_int(1),)))),
            (
                MakeCurrentField("a"),
                UpdateField("LEN", GroupExpr((GroupExpr((_int(1), _int(2))), _int(3)))),
            ),
            (UpdateParam("OUT_MAX", GroupExpr((_int(1), _int(2)))),),
        ],
        ids=[
            "empty-string",
            "quote-in-string",
            "empty-bytes",
            "update-without-selection",
            "selection-without-update",
            "one-item-group",
            "nested-group",
            "group-parameter",
        ],
    )
    def test_raises(self, statements: tuple[object, ...]) -> None:
        """Statements without a source form raise SerializationError."""
        with pytest.raises(SerializationError):
            serialize(Program(statements))  # type: ignore[arg-type]


class TestRoundtrip:
    """Test serialize/parse roundtrips."""

    def test_example_roundtrip(self) -> None:
        """A hand-written program survives serialize then parse."""
        source = 'DEFINE a u8 AS n -> RANGE(1 2) "x" GENERATE a WITH OUT_MAX = 3'
        program = parse(lex(source))
        assert parse(lex(serialize(program))) == program

    @given(program=fuzl_programs())
    def test_roundtrip_property(self, program: Program) -> None:
        """PROPERTY: parse(lex(serialize(p))) == p for parser-shaped programs."""
        assert parse(lex(serialize(program))) == program

    @given(program=fuzl_programs())
    def test_serialize_is_stable(self, program: Program) -> None:
        """PROPERTY: serializing the reparsed program yields the same text."""
        text = serialize(program)
        assert serialize(parse(lex(text))) == text

    @pytest.mark.fuzz
    @settings(max_examples=2000, deadline=None)
    @given(program=fuzl_programs())
    def test_roundtrip_intensive(self, program: Program) -> None:
        """PROPERTY: the roundtrip holds over a large sample."""
        assert parse(lex(serialize(program))) == program
