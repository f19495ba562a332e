"""Statement evaluator: a finite-state machine over program statements.

States and the statements each one accepts:

    Started             StartGroupDefinition
    DefiningFields      field definitions, MakeCurrentField, StartFieldsSection,
                        group and generator headers
    DefiningFieldAttr   UpdateField, field definitions, group and generator headers
    UpdatingFieldAttrs  MakeCurrentField, UpdateField, group and generator headers
    DefiningGenerator   UpdateParam, Run
    Finished            nothing

Entering DefiningFields clears the current field. Any other combination
is an error.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable
from enum import StrEnum

from bajzel.diagnostics import BajzelSyntaxError, ErrorTemplate, ProgramNotFinishedError
from bajzel.syntax.ast import (
    DefineConstField,
    DefineVariableField,
    MakeCurrentField,
    Run,
    StartFieldsSection,
    StartGeneratorDefinition,
    StartGroupDefinition,
    Statement,
    UpdateField,
    UpdateParam,
)

from .environment import ProgramEnv
from .fields import resolve_const_field, resolve_variable_field

__all__ = ["Evaluator", "EvaluatorState", "evaluate"]

logger = logging.getLogger(__name__)


class EvaluatorState(StrEnum):
    """Evaluator states; values are the names used in messages."""

    STARTED = "Started"
    DEFINING_FIELDS = "DefiningFields"
    DEFINING_FIELD_ATTR = "DefiningFieldAttr"
    UPDATING_FIELD_ATTRS = "UpdatingFieldAttrs"
    DEFINING_GENERATOR = "DefiningGenerator"
    FINISHED = "Finished"


_FIELD_SECTION_STATES = frozenset(
    {
        EvaluatorState.DEFINING_FIELDS,
        EvaluatorState.DEFINING_FIELD_ATTR,
        EvaluatorState.UPDATING_FIELD_ATTRS,
    }
)


class Evaluator:
    """Folds statements into a ProgramEnv one step at a time.

    Example:
        >>> evaluator = Evaluator()
        >>> evaluator.step(StartGroupDefinition("cmd"))
        <EvaluatorState.DEFINING_FIELDS: 'DefiningFields'>
    """

    __slots__ = ("_env", "_state")

    def __init__(self) -> None:
        self._env = ProgramEnv()
        self._state = EvaluatorState.STARTED

    @property
    def state(self) -> EvaluatorState:
        return self._state

    @property
    def env(self) -> ProgramEnv:
        return self._env

    def step(self, statement: Statement) -> EvaluatorState:
        """Apply one statement and move to the next state.

        Returns:
            The new state

        Raises:
            BajzelSyntaxError: If the statement is not allowed in the current
                state, or applying it fails
            ProgramNotFinishedError: If Run arrives before the GENERATE section
            ExprError: If an attribute argument has the wrong shape
        """
        env = self._env
        state = self._state
        match (state, statement):
            case (EvaluatorState.STARTED, StartGroupDefinition(name=name)):
                env.create_group(name)
                next_state = EvaluatorState.DEFINING_FIELDS
            case (EvaluatorState.STARTED, _):
                raise BajzelSyntaxError(ErrorTemplate.define_required())
            case (EvaluatorState.FINISHED, _):
                raise BajzelSyntaxError(
                    ErrorTemplate.unexpected_statement(type(statement).__name__, state)
                )
            case (
                EvaluatorState.DEFINING_FIELDS | EvaluatorState.DEFINING_FIELD_ATTR,
                DefineVariableField(kind=kind, alias=alias),
            ):
                env.create_field(resolve_variable_field(kind), alias)
                next_state = EvaluatorState.DEFINING_FIELDS
            case (
                EvaluatorState.DEFINING_FIELDS | EvaluatorState.DEFINING_FIELD_ATTR,
                DefineConstField(literal=literal, alias=alias),
            ):
                env.create_field(resolve_const_field(literal), alias)
                next_state = EvaluatorState.DEFINING_FIELDS
            case (EvaluatorState.DEFINING_FIELDS, MakeCurrentField(name=name)):
                env.use_field(name)
                next_state = EvaluatorState.DEFINING_FIELD_ATTR
            case (EvaluatorState.DEFINING_FIELDS, StartFieldsSection()):
                next_state = EvaluatorState.UPDATING_FIELD_ATTRS
            case (EvaluatorState.UPDATING_FIELD_ATTRS, MakeCurrentField(name=name)):
                env.use_field(name)
                next_state = state
            case (
                EvaluatorState.DEFINING_FIELD_ATTR | EvaluatorState.UPDATING_FIELD_ATTRS,
                UpdateField(attribute=attribute, expr=expr),
            ):
                env.update_field(attribute, expr)
                next_state = state
            case (_, StartGroupDefinition(name=name)) if state in _FIELD_SECTION_STATES:
                env.create_group(name)
                next_state = EvaluatorState.DEFINING_FIELDS
            case (_, StartGeneratorDefinition(name=name)) if state in _FIELD_SECTION_STATES:
                env.create_generator(name)
                next_state = EvaluatorState.DEFINING_GENERATOR
            case (EvaluatorState.DEFINING_GENERATOR, UpdateParam(name=name, expr=expr)):
                env.update_param(name, expr)
                next_state = state
            case (EvaluatorState.DEFINING_GENERATOR, Run()):
                next_state = EvaluatorState.FINISHED
            case (_, Run()):
                raise ProgramNotFinishedError(ErrorTemplate.program_not_finished(state))
            case _:
                raise BajzelSyntaxError(
                    ErrorTemplate.unexpected_statement(type(statement).__name__, state)
                )

        self._enter(next_state)
        logger.debug("%s: %r -> %s", state, statement, next_state)
        return next_state

    def _enter(self, state: EvaluatorState) -> None:
        if state is EvaluatorState.DEFINING_FIELDS:
            self._env.current_field = None
        elif state is EvaluatorState.FINISHED:
            self._env.clear_current()
        self._state = state


def evaluate(program: Iterable[Statement]) -> ProgramEnv:
    """Evaluate a program's statements into a ProgramEnv.

    Args:
        program: Parsed Program (or any statement iterable ending with Run)

    Returns:
        The environment, once the evaluator reached Finished

    Raises:
        BajzelSyntaxError: On a statement not allowed in its position or an
            invalid field, attribute or parameter
        ProgramNotFinishedError: If the statements end before Finished
        ExprError: If an argument has the wrong shape

    Example:
        >>> from bajzel import lex, parse
        >>> env = evaluate(parse(lex('DEFINE cmd "GET" GENERATE cmd')))
        >>> list(env.groups)
        ['cmd']
    """
    evaluator = Evaluator()
    for statement in program:
        evaluator.step(statement)
    if evaluator.state is not EvaluatorState.FINISHED:
        raise ProgramNotFinishedError(ErrorTemplate.program_not_finished(evaluator.state))
    return evaluator.env
