"""Field model built by the evaluator.

A group is an ordered list of fields; each field wraps one definition:

    ConstString   fixed text, no attributes
    TextNumber    random integer rendered as text (RANGE, FORMAT)
    AsciiString   random alphanumeric text (LEN)
    ByteNumber    random integer rendered as raw bytes (RANGE)
    Bytes         random raw bytes (LEN)

Definitions are mutable while the evaluator applies attribute updates and
are treated as read-only by the generator afterwards.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar

from bajzel.constants import DEFAULT_LENGTH_MAX, DEFAULT_LENGTH_MIN
from bajzel.diagnostics import BajzelSyntaxError, ConversionError, ErrorTemplate
from bajzel.enums import ByteOrder, DisplayFormat
from bajzel.syntax.ast import (
    BytesLiteral,
    Expr,
    GroupExpr,
    IntegerLiteral,
    Literal,
    ReservedLiteral,
    StringLiteral,
)

from .expressions import describe_literal, expr_items, expr_literal, expr_to_int

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Formats
    "NumberFormat",
    # Definitions
    "ConstString",
    "TextNumber",
    "AsciiString",
    "ByteNumber",
    "Bytes",
    "FieldDefinition",
    # Containers
    "Field",
    "GroupDefinition",
    # Resolution
    "resolve_const_field",
    "resolve_variable_field",
]


class NumberFormat(StrEnum):
    """Integer format of a number field.

    The value is the type-name spelling. The natural range of each format
    is the default RANGE of a field before any update.
    """

    INT8 = "i8"
    INT16 = "i16"
    INT32 = "i32"
    INT64 = "i64"
    UINT8 = "u8"
    UINT16 = "u16"
    UINT32 = "u32"
    UINT64 = "u64"

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def bits(self) -> int:
        return int(self.value[1:])

    @property
    def width(self) -> int:
        """Size in bytes."""
        return self.bits // 8

    @property
    def minimum(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def maximum(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @classmethod
    def parse(cls, name: str) -> "NumberFormat":
        """Look up a format by its case-sensitive spelling.

        Raises:
            ConversionError: If name is not a number format
        """
        try:
            return cls(name)
        except ValueError:
            raise ConversionError(ErrorTemplate.unknown_type_name(name), type_name=name) from None


# ============================================================================
# DEFINITIONS
# ============================================================================


@dataclass(slots=True)
class ConstString:
    """Fixed text emitted as UTF-8."""

    KIND: ClassVar[str] = "constant string"

    value: str

    def update(self, attribute: str, expr: Expr) -> None:  # noqa: ARG002 - uniform interface
        raise BajzelSyntaxError(ErrorTemplate.attributes_not_allowed(self.KIND))


@dataclass(slots=True)
class _NumberRange:
    """Numeric range shared by text and byte numbers."""

    format: NumberFormat
    min_value: int
    max_value: int

    def set_range(self, expr: Expr) -> None:
        """RANGE(min max): both bounds inside the format's natural range, min <= max."""
        usage = "RANGE(min max)"
        items = expr_items(expr)
        if not GroupExpr.guard(expr) or len(items) != 2:
            raise BajzelSyntaxError(
                ErrorTemplate.invalid_attribute_value("RANGE", usage, "expects exactly 2 values")
            )
        lower = expr_to_int(items[0], usage)
        upper = expr_to_int(items[1], usage)
        for bound in (lower, upper):
            if not self.format.minimum <= bound <= self.format.maximum:
                raise BajzelSyntaxError(
                    ErrorTemplate.value_out_of_format(
                        "RANGE", bound, self.format, self.format.minimum, self.format.maximum
                    )
                )
        if lower > upper:
            raise BajzelSyntaxError(
                ErrorTemplate.invalid_attribute_value("RANGE", usage, "min > max is not allowed")
            )
        self.min_value = lower
        self.max_value = upper


@dataclass(slots=True)
class TextNumber(_NumberRange):
    """Random integer rendered as text.

    Example:
        u8 AS size -> RANGE(0 15), FORMAT("hex")   emits e.g. b"c"
    """

    KIND: ClassVar[str] = "text number"

    display: DisplayFormat | None = None

    @classmethod
    def of(cls, number_format: NumberFormat) -> "TextNumber":
        return cls(number_format, number_format.minimum, number_format.maximum)

    def update(self, attribute: str, expr: Expr) -> None:
        match attribute:
            case "RANGE":
                self.set_range(expr)
            case "FORMAT":
                self.set_display(expr)
            case _:
                raise BajzelSyntaxError(ErrorTemplate.unsupported_attribute(attribute, self.KIND))

    def set_display(self, expr: Expr) -> None:
        """FORMAT(name): one of bin, oct, dec, hex (any case)."""
        usage = "FORMAT(name)"
        if GroupExpr.guard(expr):
            raise BajzelSyntaxError(
                ErrorTemplate.invalid_attribute_value("FORMAT", usage, "expects exactly 1 value")
            )
        match expr.literal:
            case StringLiteral(value=name) | ReservedLiteral(name=name):
                try:
                    self.display = DisplayFormat(name.lower())
                except ValueError:
                    raise BajzelSyntaxError(ErrorTemplate.unknown_display_format(name)) from None
            case other:
                problem = f"format name expected, got {describe_literal(other)}"
                raise BajzelSyntaxError(
                    ErrorTemplate.invalid_attribute_value("FORMAT", usage, problem)
                )


@dataclass(slots=True)
class ByteNumber(_NumberRange):
    """Random integer rendered as raw bytes in a byte order.

    Example:
        be_u16 -> 305 emits b"\\x01\\x31"
    """

    KIND: ClassVar[str] = "byte number"

    byte_order: ByteOrder = ByteOrder.BIG_ENDIAN

    @classmethod
    def of(cls, number_format: NumberFormat, byte_order: ByteOrder) -> "ByteNumber":
        return cls(number_format, number_format.minimum, number_format.maximum, byte_order)

    def update(self, attribute: str, expr: Expr) -> None:
        if attribute != "RANGE":
            raise BajzelSyntaxError(ErrorTemplate.unsupported_attribute(attribute, self.KIND))
        self.set_range(expr)


@dataclass(slots=True)
class _LengthBounds:
    """Length range shared by random strings and random bytes."""

    KIND: ClassVar[str] = "string"

    length_min: int = DEFAULT_LENGTH_MIN
    length_max: int = DEFAULT_LENGTH_MAX

    def update(self, attribute: str, expr: Expr) -> None:
        if attribute != "LEN":
            raise BajzelSyntaxError(ErrorTemplate.unsupported_attribute(attribute, self.KIND))
        self.set_len(expr)

    def set_len(self, expr: Expr) -> None:
        """Set the length bounds.

        Syntax:
            LEN(value)      exactly value units
            LEN(min max)    between min and max units (inclusive)
        """
        if not GroupExpr.guard(expr):
            literal = expr_literal(expr, "LEN(value)")
            if not isinstance(literal, IntegerLiteral):
                problem = f"integer expected, got {describe_literal(literal)}"
                raise BajzelSyntaxError(
                    ErrorTemplate.invalid_attribute_value("LEN", "LEN(value)", problem)
                )
            if literal.value < 0:
                raise BajzelSyntaxError(
                    ErrorTemplate.invalid_attribute_value(
                        "LEN", "LEN(value)", "value < 0 is not allowed"
                    )
                )
            self.length_min = self.length_max = literal.value
            return

        usage = "LEN(min max)"
        if len(expr.items) != 2:
            raise BajzelSyntaxError(
                ErrorTemplate.invalid_attribute_value("LEN", usage, "expects 1 or 2 values")
            )
        lower = expr_to_int(expr.items[0], usage)
        upper = expr_to_int(expr.items[1], usage)
        if lower > upper:
            raise BajzelSyntaxError(
                ErrorTemplate.invalid_attribute_value("LEN", usage, "min > max is not allowed")
            )
        if lower < 0:
            raise BajzelSyntaxError(
                ErrorTemplate.invalid_attribute_value("LEN", usage, "min < 0 is not allowed")
            )
        self.length_min = lower
        self.length_max = upper


@dataclass(slots=True)
class AsciiString(_LengthBounds):
    """Random alphanumeric text."""

    KIND: ClassVar[str] = "string"


@dataclass(slots=True)
class Bytes(_LengthBounds):
    """Random bytes over the full 0-255 range."""

    KIND: ClassVar[str] = "bytes"


type FieldDefinition = ConstString | TextNumber | AsciiString | ByteNumber | Bytes

# ============================================================================
# CONTAINERS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Field:
    """Field definition plus the alias used to address it."""

    definition: FieldDefinition
    alias: str | None = None


@dataclass(slots=True)
class GroupDefinition:
    """Named, ordered field list; order is emission order."""

    name: str
    fields: list[Field] = field(default_factory=list)

    def add_field(self, new_field: Field) -> None:
        """Append a field.

        Raises:
            BajzelSyntaxError: If the alias is already used in this group
        """
        if new_field.alias is not None and self.find_field(new_field.alias) is not None:
            raise BajzelSyntaxError(ErrorTemplate.duplicate_alias(new_field.alias, self.name))
        self.fields.append(new_field)

    def find_field(self, alias: str) -> Field | None:
        for candidate in self.fields:
            if candidate.alias == alias:
                return candidate
        return None

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)


# ============================================================================
# RESOLUTION
# ============================================================================

_BYTE_ORDER_PREFIXES: dict[str, ByteOrder] = {
    "le_": ByteOrder.LITTLE_ENDIAN,
    "be_": ByteOrder.BIG_ENDIAN,
}


def resolve_variable_field(kind: str) -> FieldDefinition:
    """Build the definition for a declared type name.

    Matching is case-sensitive:

        le_/be_ + number format  -> ByteNumber
        string                   -> AsciiString
        bytes                    -> Bytes
        number format            -> TextNumber

    Raises:
        BajzelSyntaxError: If kind names no field type
    """
    definition: FieldDefinition | None = None
    try:
        if (byte_order := _BYTE_ORDER_PREFIXES.get(kind[:3])) is not None:
            definition = ByteNumber.of(NumberFormat.parse(kind[3:]), byte_order)
        elif kind == "string":
            definition = AsciiString()
        elif kind == "bytes":
            definition = Bytes()
        elif kind.startswith(("i", "u")):
            definition = TextNumber.of(NumberFormat.parse(kind))
    except ConversionError:
        definition = None

    if definition is None:
        raise BajzelSyntaxError(ErrorTemplate.unsupported_field_type(kind))
    return definition


def resolve_const_field(literal: Literal) -> FieldDefinition:
    """Build the definition for a constant field.

    An integer constant becomes a signed 64-bit TextNumber pinned to its
    value, so it always renders as that number.

    Raises:
        BajzelSyntaxError: For byte-sequence and reserved literals
    """
    match literal:
        case IntegerLiteral(value=value):
            return TextNumber(NumberFormat.INT64, value, value)
        case StringLiteral(value=value):
            return ConstString(value)
        case BytesLiteral():
            raise BajzelSyntaxError(ErrorTemplate.literal_field_not_implemented("bytes"))
        case ReservedLiteral():
            raise BajzelSyntaxError(ErrorTemplate.literal_field_not_implemented("reserved"))
