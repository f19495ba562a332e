"""Hypothesis strategies for bajzel property-based testing.

Usage:
    from tests.strategies import fuzl_programs, fuzl_chaos_source
"""

from .fuzl import (
    FUZL_IDENTIFIER_FIRST_CHARS,
    FUZL_IDENTIFIER_REST_CHARS,
    FUZL_KEYWORDS,
    FUZL_STRING_CHARS,
    fuzl_attribute_args,
    fuzl_chaos_source,
    fuzl_generatable_sources,
    fuzl_identifiers,
    fuzl_literal_exprs,
    fuzl_literals,
    fuzl_programs,
    fuzl_reserved_names,
    fuzl_statement_forms,
    fuzl_string_bodies,
    fuzl_type_names,
    fuzl_update_fields,
)

__all__ = [
    "FUZL_IDENTIFIER_FIRST_CHARS",
    "FUZL_IDENTIFIER_REST_CHARS",
    "FUZL_KEYWORDS",
    "FUZL_STRING_CHARS",
    "fuzl_attribute_args",
    "fuzl_chaos_source",
    "fuzl_generatable_sources",
    "fuzl_identifiers",
    "fuzl_literal_exprs",
    "fuzl_literals",
    "fuzl_programs",
    "fuzl_reserved_names",
    "fuzl_statement_forms",
    "fuzl_string_bodies",
    "fuzl_type_names",
    "fuzl_update_fields",
]
