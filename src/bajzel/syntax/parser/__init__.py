"""fuzl parser module.

Module Organization:
- core.py: FuzlParser class and its parse() entry point
- primitives.py: Single-token parsers (keywords, identifiers, literals)
- rules.py: Statement and attribute clause grammar rules

Public API:
    FuzlParser: Main parser class
"""

from bajzel.syntax.parser.core import FuzlParser

__all__ = ["FuzlParser"]
