"""Byte generator: emits one random instance of the target group.

Emission rules, applied to the group's fields in declaration order:

    ConstString   its UTF-8 bytes
    AsciiString   a random number of random alphanumeric characters
    Bytes         a random number of random bytes (0-255)
    TextNumber    a random integer in range, rendered as text in its base
    ByteNumber    a random integer in range, as raw bytes in its byte order

Random lengths are drawn from the field's bounds clamped to the remaining
capacity. Output never exceeds OUT_MAX: a field that does not fit is cut
short and emission stops there. Once the buffer is full no further field
is visited.

Python 3.13+. Zero external dependencies.
"""

import logging
import random

from bajzel.constants import ALPHANUMERIC
from bajzel.enums import DisplayFormat
from bajzel.evaluator import (
    AsciiString,
    ByteNumber,
    Bytes,
    ConstString,
    FieldDefinition,
    ProgramEnv,
    TextNumber,
)

from .buffer import OutputBuffer
from .source import RandomSource

__all__ = ["Generator", "generate", "render_text_number"]

logger = logging.getLogger(__name__)

_FORMAT_SPECS: dict[DisplayFormat, str] = {
    DisplayFormat.BINARY: "b",
    DisplayFormat.OCTAL: "o",
    DisplayFormat.DECIMAL: "d",
    DisplayFormat.HEX: "x",
}


def render_text_number(value: int, display: DisplayFormat | None) -> bytes:
    """Render an integer as ASCII text, without any base prefix.

    Example:
        >>> render_text_number(255, DisplayFormat.HEX)
        b'ff'
        >>> render_text_number(-5, DisplayFormat.BINARY)
        b'-101'
    """
    spec = _FORMAT_SPECS[display] if display is not None else "d"
    return format(value, spec).encode("ascii")


class Generator:
    """Generates bytes from an evaluated ProgramEnv.

    Attributes:
        append_terminator: Reserve room for the generator's TERM bytes and
            append them after the fields

    Example:
        >>> from bajzel import compile_spec
        >>> gen = Generator(random.Random(7))
        >>> gen.generate(compile_spec('DEFINE a "hi" GENERATE a'))
        b'hi'
    """

    __slots__ = ("_append_terminator", "_rng")

    def __init__(
        self, rng: RandomSource | None = None, *, append_terminator: bool = False
    ) -> None:
        """Initialize generator.

        Args:
            rng: Random source; a fresh unseeded random.Random() when None
            append_terminator: Append TERM bytes to the output
        """
        if rng is None:
            rng = random.Random()  # noqa: S311 - test data, not crypto
        self._rng: RandomSource = rng
        self._append_terminator = append_terminator

    @property
    def append_terminator(self) -> bool:
        return self._append_terminator

    def generate(self, env: ProgramEnv) -> bytes:
        """Emit one instance of the generator's target group.

        Raises:
            NotConstructedProperlyError: If env has no generator definition or
                no group of the generator's target name
        """
        definition = env.get_generator()
        group = env.get_group(definition.name)
        if definition.out_min > definition.out_max:
            logger.warning(
                "OUT_MIN (%d) exceeds OUT_MAX (%d) for '%s'; output is capped at OUT_MAX",
                definition.out_min,
                definition.out_max,
                definition.name,
            )

        terminator = definition.term[: definition.out_max] if self._append_terminator else b""
        buffer = OutputBuffer(definition.out_max - len(terminator))

        for field in group:
            if buffer.is_full:
                logger.debug("Output full, skipping remaining fields of '%s'", group.name)
                break
            before = len(buffer)
            complete = self._emit(field.definition, buffer)
            logger.debug(
                "Emitted %d bytes for field %s", len(buffer) - before, field.alias or "<anonymous>"
            )
            if not complete:
                break

        return buffer.getvalue() + terminator

    def _emit(self, definition: FieldDefinition, buffer: OutputBuffer) -> bool:
        """Write one field; False means emission must stop."""
        match definition:
            case ConstString(value=value):
                return buffer.write(value.encode("utf-8"))
            case AsciiString():
                length = self._length(definition.length_min, definition.length_max, buffer)
                text = "".join(self._rng.choices(ALPHANUMERIC, k=length))
                return buffer.write(text.encode("ascii"))
            case Bytes():
                length = self._length(definition.length_min, definition.length_max, buffer)
                return buffer.write(self._rng.randbytes(length))
            case TextNumber():
                value = self._rng.randint(definition.min_value, definition.max_value)
                return buffer.write(render_text_number(value, definition.display))
            case ByteNumber():
                value = self._rng.randint(definition.min_value, definition.max_value)
                data = value.to_bytes(
                    definition.format.width,
                    byteorder=definition.byte_order.value,
                    signed=definition.format.signed,
                )
                return buffer.write(data)

    def _length(self, length_min: int, length_max: int, buffer: OutputBuffer) -> int:
        lower = min(length_min, buffer.available)
        upper = min(length_max, buffer.available)
        if lower == upper:
            return lower
        return self._rng.randint(lower, upper)


def generate(env: ProgramEnv, rng: RandomSource | None = None) -> bytes:
    """Generate bytes from an evaluated ProgramEnv.

    Convenience function for Generator(rng).generate(env).

    Example:
        >>> import random
        >>> from bajzel import compile_spec
        >>> env = compile_spec("DEFINE a string AS s -> LEN(3 3) GENERATE a OUT_MAX = 10")
        >>> len(generate(env, random.Random(0)))
        3
    """
    return Generator(rng).generate(env)
