"""bajzel - random test-data generator driven by the fuzl layout language.

A fuzl program describes the byte layout of a message as named groups of
fields, constant or random within declared bounds. bajzel lexes, parses and
evaluates the program, then emits one random byte sequence matching it.

Pipeline:
    lex(text) -> tokens -> parse(tokens) -> Program
    evaluate(Program) -> ProgramEnv -> generate(ProgramEnv) -> bytes

Public API:
    lex - Source text to tokens (never fails)
    parse - Tokens to Program
    evaluate - Program to ProgramEnv
    generate - ProgramEnv to bytes
    compile_spec - Source text to ProgramEnv, with the source size limit
    generate_bytes - Source text to bytes
    serialize - Program back to fuzl text

Exceptions:
    BajzelError - Base exception class
    BajzelSyntaxError - Grammar, ordering and attribute errors
    BajzelParseError - Token sequence does not parse
    ConversionError, ExprError, ProgramNotFinishedError,
    NotConstructedProperlyError, SerializationError

Submodules:
    bajzel.syntax - Tokens, lexer, AST, parser and serializer
    bajzel.evaluator - Field model and the statement state machine
    bajzel.generator - Byte emission and the RandomSource protocol
    bajzel.diagnostics - Error types, codes and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    BajzelError,
    BajzelParseError,
    BajzelSyntaxError,
    ConversionError,
    ExprError,
    NotConstructedProperlyError,
    ProgramNotFinishedError,
    SerializationError,
)
from .evaluator import ProgramEnv, evaluate
from .generator import Generator, RandomSource, generate
from .syntax import FuzlParser, Program, Token, lex, parse, serialize

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("bajzel")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BajzelError",
    "BajzelParseError",
    "BajzelSyntaxError",
    "ConversionError",
    "ExprError",
    "FuzlParser",
    "Generator",
    "NotConstructedProperlyError",
    "Program",
    "ProgramEnv",
    "ProgramNotFinishedError",
    "RandomSource",
    "SerializationError",
    "Token",
    "__version__",
    "compile_spec",
    "evaluate",
    "generate",
    "generate_bytes",
    "lex",
    "parse",
    "serialize",
]


def compile_spec(source: str, *, max_source_size: int | None = None) -> ProgramEnv:
    """Lex, parse and evaluate fuzl source.

    Args:
        source: fuzl program text
        max_source_size: Source size limit in characters (default: 1 MiB)

    Returns:
        ProgramEnv ready for generation

    Raises:
        BajzelError: Any lexing-to-evaluation failure, see the subclasses
    """
    parser = FuzlParser(max_source_size=max_source_size)
    return evaluate(parser.parse_source(source))


def generate_bytes(
    source: str, rng: RandomSource | None = None, *, append_terminator: bool = False
) -> bytes:
    """Run the full pipeline on fuzl source and return the generated bytes.

    Example:
        >>> import random
        >>> generate_bytes('DEFINE hello "HELLO" GENERATE hello', random.Random(0))
        b'HELLO'
    """
    env = compile_spec(source)
    return Generator(rng, append_terminator=append_terminator).generate(env)
