"""Declarative cross-field constraints evaluated after per-field validation."""

from typing import Any, Mapping, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from ...exceptions import ValidationError


class OneOf(BaseModel):
    """At least one of ``field_names`` must be present and non-empty."""

    model_config = ConfigDict(frozen=True)

    field_names: Tuple[str, ...]

    def __init__(self, *fields: str):
        if len(fields) < 2:
            raise ValueError("OneOf needs at least two field names.")
        super().__init__(field_names=fields)

    def is_satisfied(self, arguments: Mapping[str, Any]) -> bool:
        return any(arguments.get(name) not in (None, "") for name in self.field_names)

    @property
    def message(self) -> str:
        if len(self.field_names) == 2:
            return f"Either {self.field_names[0]} or {self.field_names[1]} is required"
        return "One of " + ", ".join(self.field_names) + " is required"


def check_constraints(tool_name: str, arguments: Mapping[str, Any], constraints: Sequence[OneOf]) -> None:
    """Evaluate every constraint of a tool against its arguments.

    Raises:
        ValidationError: Naming the first constraint that is not satisfied.
    """
    for constraint in constraints:
        if not constraint.is_satisfied(arguments):
            raise ValidationError(f"{tool_name}: {constraint.message}", tool_name=tool_name)
