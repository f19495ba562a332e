"""Shared constants for bajzel.

Centralized configuration constants used across the syntax, evaluator and
generator packages. Placing constants here avoids circular imports and
provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

import string

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Generator defaults
    "DEFAULT_OUT_MIN",
    "DEFAULT_OUT_MAX",
    # Field defaults
    "DEFAULT_LENGTH_MIN",
    "DEFAULT_LENGTH_MAX",
    # Lexer vocabulary
    "TYPE_NAMES",
    "RESERVED_NAMES",
    "WHITESPACE",
    # Reserved byte values
    "RESERVED_BYTES",
    # Alphabets
    "ALPHANUMERIC",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Spec files are small hand-written layouts; 1 MiB is far beyond any real one.
MAX_SOURCE_SIZE: int = 1024 * 1024

# ============================================================================
# GENERATOR DEFAULTS
# ============================================================================

DEFAULT_OUT_MIN: int = 0
DEFAULT_OUT_MAX: int = 4096

# ============================================================================
# FIELD DEFAULTS
# ============================================================================

# Length bounds of random string/bytes fields before any LEN attribute.
DEFAULT_LENGTH_MIN: int = 0
DEFAULT_LENGTH_MAX: int = 4096

# ============================================================================
# LEXER VOCABULARY
# ============================================================================

# Lowercase spellings; the lexer compares case-insensitively.
TYPE_NAMES: frozenset[str] = frozenset(
    {
        "i8", "i16", "i32", "i64",
        "u8", "u16", "u32", "u64",
        "le_u16", "le_u32", "le_u64", "le_i16", "le_i32", "le_i64",
        "be_u16", "be_u32", "be_u64", "be_i16", "be_i32", "be_i64",
        "bytes", "ref", "string",
    }
)  # fmt: skip

RESERVED_NAMES: frozenset[str] = frozenset({"null", "lf", "rf"})

WHITESPACE: str = " \t\r\n"

# ============================================================================
# RESERVED BYTE VALUES
# ============================================================================

# Byte value of each reserved identifier when used as a TERM value.
RESERVED_BYTES: dict[str, int] = {
    "NULL": 0x00,
    "LF": 0x0A,
    "RF": 0x0D,
}

# ============================================================================
# ALPHABETS
# ============================================================================

ALPHANUMERIC: str = string.ascii_uppercase + string.ascii_lowercase + string.digits
