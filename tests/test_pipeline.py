"""End-to-end tests: source text through to bytes, and the public API."""

from __future__ import annotations

import random
import struct
from pathlib import Path

import pytest

import bajzel
from bajzel import (
    BajzelParseError,
    BajzelSyntaxError,
    ExprError,
    compile_spec,
    generate_bytes,
    lex,
    parse,
    serialize,
)

EXAMPLES = Path(__file__).parent.parent / "examples"


def _example(name: str) -> str:
    return (EXAMPLES / name).read_text(encoding="utf-8")


class TestExamples:
    """Test the bundled example programs."""

    @pytest.mark.parametrize("name", ["http.fuzl", "bmp_header.fuzl", "command.fuzl"])
    def test_example_compiles_and_roundtrips(self, name: str) -> None:
        """Every example evaluates and survives serialize/parse."""
        source = _example(name)
        compile_spec(source)
        program = parse(lex(source))
        assert parse(lex(serialize(program))) == program

    def test_http(self, rng: random.Random) -> None:
        """The request line has the declared shape."""
        output = generate_bytes(_example("http.fuzl"), rng, append_terminator=True)
        assert output.startswith(b"GET ")
        assert output.endswith(b" HTTP/1.1\r\n")
        path = output[len(b"GET ") : -len(b" HTTP/1.1\r\n")]
        assert 4 <= len(path) <= 8
        assert path.isalnum()

    def test_bmp_header(self, rng: random.Random) -> None:
        """Little-endian header fields decode within their ranges."""
        output = generate_bytes(_example("bmp_header.fuzl"), rng)
        magic, file_size, reserved1, reserved2, offset = struct.unpack("<2sIHHI", output[:14])
        assert magic == b"BM"
        assert 54 <= file_size <= 4096
        assert (reserved1, reserved2, offset) == (0, 0, 54)
        assert len(output) <= 14 + 256

    def test_command(self, rng: random.Random) -> None:
        """Text numbers render in their declared base."""
        output = generate_bytes(_example("command.fuzl"), rng)
        op, key, value, ttl = output.split(b" ")
        assert op == b"SET"
        assert key.isalnum()
        assert 0 <= int(value, 16) <= 0xFFFF
        assert ttl.startswith(b"ttl=")
        assert 1 <= int(ttl[len(b"ttl=") :]) <= 3600


class TestStageErrors:
    """Test that each stage reports its own error type."""

    def test_parse_stage(self) -> None:
        """Grammar errors surface as BajzelParseError."""
        with pytest.raises(BajzelParseError):
            compile_spec("DEFINE a AS")

    def test_evaluation_stage(self) -> None:
        """Attribute errors surface as BajzelSyntaxError."""
        with pytest.raises(BajzelSyntaxError, match="LEN"):
            compile_spec("DEFINE a string AS s -> LEN(5 1) GENERATE a")

    def test_expression_shape(self) -> None:
        """Non-integer RANGE bounds surface as ExprError."""
        with pytest.raises(ExprError):
            compile_spec('DEFINE a u8 AS n -> RANGE(0 "x") GENERATE a')

    def test_size_limit(self) -> None:
        """compile_spec() forwards the source size limit."""
        with pytest.raises(BajzelParseError):
            compile_spec('DEFINE a "x" GENERATE a', max_source_size=4)


class TestPublicApi:
    """Test package-level exports."""

    def test_version(self) -> None:
        """__version__ is always a string."""
        assert isinstance(bajzel.__version__, str)
        assert bajzel.__version__

    def test_all_exports_resolve(self) -> None:
        """Every name in __all__ exists."""
        for name in bajzel.__all__:
            assert hasattr(bajzel, name), name
