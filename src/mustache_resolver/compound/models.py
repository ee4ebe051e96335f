"""Parsed compound expression values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["CompoundExpression", "UseVariable"]


@dataclass(frozen=True, slots=True)
class UseVariable:
    """One ``{name} => {{expression}} [condition]`` declaration."""

    name: str
    expression: str
    condition: str | None = None

    @property
    def has_condition(self) -> bool:
        return self.condition is not None

    @property
    def reference(self) -> str:
        """How the variable is referenced in the statement, e.g. ``{power}``."""
        return "{" + self.name + "}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "expression": self.expression,
            "condition": self.condition,
        }


@dataclass(frozen=True, slots=True)
class CompoundExpression:
    """A parsed ``USE ... && statement`` template.

    Attributes:
        variables: Declarations in source order.
        statement: Text after ``&&`` with ``{name}`` references.
        original: The template as given.
    """

    variables: tuple[UseVariable, ...]
    statement: str
    original: str

    @property
    def has_conditions(self) -> bool:
        return any(variable.has_condition for variable in self.variables)

    @property
    def variable_names(self) -> list[str]:
        return [variable.name for variable in self.variables]

    def get_variable(self, name: str) -> UseVariable | None:
        for variable in self.variables:
            if variable.name == name:
                return variable
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "variables": [variable.to_dict() for variable in self.variables],
            "statement": self.statement,
            "original": self.original,
        }
