"""
Declarative authorization metadata.

Nothing here enforces access; the rules are data for an external
authorization component.
"""
from enum import Enum
from pydantic import BaseModel, ConfigDict


class AuthStrategy(Enum):
    owner = "owner"


class ModelOperation(Enum):
    create = "create"
    update = "update"
    delete = "delete"
    read = "read"


class AuthRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    allow: AuthStrategy
    owner_field: str = "owner"
    identity_claim: str = "cognito:username"
    operations: tuple[ModelOperation, ...] = tuple(ModelOperation)

    def __str__(self) -> str:
        ops = ", ".join(op.value for op in self.operations)
        return (
            f"allow {self.allow.value} ({self.owner_field} <- {self.identity_claim}): "
            f"{ops}"
        )

    def covers(self, operation: ModelOperation) -> bool:
        return operation in self.operations


class ModelConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    plural_name: str
    auth_rules: tuple[AuthRule, ...] = ()


NOTE_DATA_CONFIG = ModelConfig(
    plural_name="NoteData",
    auth_rules=(
        AuthRule(
            allow=AuthStrategy.owner,
            owner_field="owner",
            identity_claim="cognito:username",
            operations=(
                ModelOperation.create,
                ModelOperation.update,
                ModelOperation.delete,
                ModelOperation.read,
            ),
        ),
    ),
)
