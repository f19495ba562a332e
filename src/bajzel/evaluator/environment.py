"""Program environment accumulated by the evaluator.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field

from bajzel.diagnostics import (
    BajzelSyntaxError,
    ErrorTemplate,
    NotConstructedProperlyError,
)
from bajzel.syntax.ast import Expr

from .fields import Field, FieldDefinition, GroupDefinition
from .generator_def import GenDefinition

__all__ = ["ProgramEnv"]


@dataclass(slots=True)
class ProgramEnv:
    """Groups and the generator definition of one program.

    Attributes:
        groups: Group definitions by name, in declaration order
        generator: The GENERATE section, once declared
        current_group: Group that new fields are appended to
        current_field: Alias of the field that attribute updates address

    The two ``current_*`` pointers are addressing context for the
    evaluator; they are cleared when evaluation finishes.
    """

    groups: dict[str, GroupDefinition] = field(default_factory=dict)
    generator: GenDefinition | None = None
    current_group: str | None = None
    current_field: str | None = None

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def create_group(self, name: str) -> None:
        """Create an empty group and make it current.

        Raises:
            BajzelSyntaxError: If a group with this name already exists
        """
        if name in self.groups:
            raise BajzelSyntaxError(ErrorTemplate.duplicate_group(name))
        self.groups[name] = GroupDefinition(name)
        self.current_group = name
        self.current_field = None

    def create_generator(self, name: str) -> None:
        """Create the generator definition.

        Raises:
            BajzelSyntaxError: If one already exists
        """
        if self.generator is not None:
            raise BajzelSyntaxError(ErrorTemplate.single_generate())
        self.generator = GenDefinition(name)

    def create_field(self, definition: FieldDefinition, alias: str | None) -> None:
        """Append a field to the current group."""
        self._group().add_field(Field(definition, alias))

    def use_field(self, alias: str) -> None:
        """Make a field of the current group the target of attribute updates.

        Raises:
            BajzelSyntaxError: If the current group has no such field
        """
        group = self._group()
        if group.find_field(alias) is None:
            raise BajzelSyntaxError(ErrorTemplate.field_not_found(alias, group.name))
        self.current_field = alias

    def update_field(self, attribute: str, expr: Expr) -> None:
        """Apply an attribute update to the current field.

        Raises:
            BajzelSyntaxError: If no field is current or the update is invalid
            ExprError: If an argument has the wrong shape
        """
        if self.current_field is None:
            raise BajzelSyntaxError(ErrorTemplate.no_current_field(attribute))
        target = self._group().find_field(self.current_field)
        if target is None:
            raise BajzelSyntaxError(
                ErrorTemplate.field_not_found(self.current_field, self._group().name)
            )
        target.definition.update(attribute, expr)

    def update_param(self, name: str, expr: Expr) -> None:
        """Apply a generator parameter assignment."""
        self.get_generator().update(name, expr)

    def clear_current(self) -> None:
        """Drop the addressing context."""
        self.current_group = None
        self.current_field = None

    def _group(self) -> GroupDefinition:
        if self.current_group is None:
            raise BajzelSyntaxError(ErrorTemplate.define_required())
        return self.groups[self.current_group]

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_group(self, name: str) -> GroupDefinition:
        """Look up a group by name.

        Raises:
            NotConstructedProperlyError: If there is no such group
        """
        group = self.groups.get(name)
        if group is None:
            raise NotConstructedProperlyError(ErrorTemplate.group_missing(name))
        return group

    def get_generator(self) -> GenDefinition:
        """Return the generator definition.

        Raises:
            NotConstructedProperlyError: If no GENERATE section was declared
        """
        if self.generator is None:
            raise NotConstructedProperlyError(ErrorTemplate.generator_missing())
        return self.generator

    def validate(self) -> None:
        """Check that the environment can be generated from.

        Raises:
            NotConstructedProperlyError: If the generator or its target group
                is missing
        """
        self.get_group(self.get_generator().name)
