"""
Symbolic field references used by query and persistence code.
"""
import operator
from enum import Enum
from typing import Any, Type
from pydantic import BaseModel, ConfigDict


class Operator(Enum):
    eq = "eq"
    ne = "ne"


_OPERATORS = {
    Operator.eq: operator.eq,
    Operator.ne: operator.ne,
}


class Predicate(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    operator: Operator
    value: Any

    def __str__(self) -> str:
        return f"{self.field} {self.operator.value} {self.value!r}"

    def matches(self, record: Any) -> bool:
        return _OPERATORS[self.operator](getattr(record, self.field), self.value)


class QueryField(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    target_type: str = "String"
    required: bool = False

    def __str__(self) -> str:
        return self.name

    def eq(self, value: Any) -> Predicate:
        return Predicate(field=self.name, operator=Operator.eq, value=value)

    def ne(self, value: Any) -> Predicate:
        return Predicate(field=self.name, operator=Operator.ne, value=value)


ID = QueryField(name="id", target_type="ID", required=True)
NAME = QueryField(name="name", required=True)
DESCRIPTION = QueryField(name="description")
IMAGE = QueryField(name="image")


def model_fields_schema(model: Type[BaseModel]) -> dict[str, QueryField]:
    """
    Build QueryFields for each field of a pydantic model.

    Declarations in the model's QUERY_FIELDS mapping win; other fields fall
    back to a "String" field that is required when pydantic requires it.
    """
    declared = getattr(model, "QUERY_FIELDS", {})
    schema = {}
    for k, field in model.model_fields.items():
        schema[k] = declared.get(k) or QueryField(
            name=k, required=field.is_required()
        )
    return schema
