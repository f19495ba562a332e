"""Evaluator: turns a parsed Program into a validated ProgramEnv.

Python 3.13+.
"""

from .environment import ProgramEnv
from .fields import (
    AsciiString,
    ByteNumber,
    Bytes,
    ConstString,
    Field,
    FieldDefinition,
    GroupDefinition,
    NumberFormat,
    TextNumber,
    resolve_const_field,
    resolve_variable_field,
)
from .generator_def import GenDefinition
from .state import Evaluator, EvaluatorState, evaluate

__all__ = [
    "AsciiString",
    "ByteNumber",
    "Bytes",
    "ConstString",
    "Evaluator",
    "EvaluatorState",
    "Field",
    "FieldDefinition",
    "GenDefinition",
    "GroupDefinition",
    "NumberFormat",
    "ProgramEnv",
    "TextNumber",
    "evaluate",
    "resolve_const_field",
    "resolve_variable_field",
]
