from typing import ClassVar, Protocol
from pydantic import BaseModel, ConfigDict, field_validator
from structlog import get_logger

from . import fields
from .auth import NOTE_DATA_CONFIG, ModelConfig
from .exceptions import MissingRequiredField
from .ids import JUST_ID_MESSAGE, new_id, validate_id

log = get_logger()


class NoteData(BaseModel):
    """
    An immutable note record.

    Build new instances with NoteData.builder(), derive modified ones with
    copy_of_builder(), and use NoteData.just_id() for reference-only instances.
    """

    model_config = ConfigDict(frozen=True)

    ID: ClassVar[fields.QueryField] = fields.ID
    NAME: ClassVar[fields.QueryField] = fields.NAME
    DESCRIPTION: ClassVar[fields.QueryField] = fields.DESCRIPTION
    IMAGE: ClassVar[fields.QueryField] = fields.IMAGE

    QUERY_FIELDS: ClassVar[dict[str, fields.QueryField]] = {
        f.name: f for f in (fields.ID, fields.NAME, fields.DESCRIPTION, fields.IMAGE)
    }

    id: str
    name: str | None = None
    description: str | None = None
    image: str | None = None

    @field_validator("id")
    @classmethod
    def check_id_format(cls, value: str) -> str:
        return validate_id(value)

    def __hash__(self) -> int:
        return hash(f"{self.id}{self.name}{self.description}{self.image}")

    def __str__(self) -> str:
        return (
            f"NoteData {{id={self.id}, name={self.name}, "
            f"description={self.description}, image={self.image}}}"
        )

    @property
    def is_reference(self) -> bool:
        return self.name is None

    @staticmethod
    def builder() -> "NameStep":
        return Builder()

    @classmethod
    def just_id(cls, id: str) -> "NoteData":
        """
        Return an instance with only id populated.

        Not for creating new records: the result is meant as a deletion target
        or a foreign-key reference to an existing record.
        """
        return cls(id=validate_id(id, JUST_ID_MESSAGE))

    @staticmethod
    def auth_config() -> ModelConfig:
        return NOTE_DATA_CONFIG

    def copy_of_builder(self) -> "CopyOfBuilder":
        return CopyOfBuilder(self.id, self.name, self.description, self.image)


class BuildStep(Protocol):
    def build(self) -> NoteData:
        ...

    def id(self, id: str) -> "BuildStep":
        ...

    def description(self, description: str | None) -> "BuildStep":
        ...

    def image(self, image: str | None) -> "BuildStep":
        ...


class NameStep(Protocol):
    def name(self, name: str) -> BuildStep:
        ...


class Builder:
    """
    Accumulates field values; build() may be called more than once.
    """

    def __init__(self) -> None:
        self._id: str | None = None
        self._name: str | None = None
        self._description: str | None = None
        self._image: str | None = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id}, name={self._name})"

    def build(self) -> NoteData:
        if self._name is None:
            raise MissingRequiredField("name")
        generated = self._id is None
        id = new_id() if generated else self._id
        note = NoteData(
            id=id,
            name=self._name,
            description=self._description,
            image=self._image,
        )
        log.debug("note built", id=id, generated_id=generated)
        return note

    def name(self, name: str) -> "Builder":
        if name is None:
            raise MissingRequiredField("name")
        self._name = name
        return self

    def description(self, description: str | None) -> "Builder":
        self._description = description
        return self

    def image(self, image: str | None) -> "Builder":
        self._image = image
        return self

    def id(self, id: str) -> "Builder":
        """
        Set the id of an existing record. Leave unset for new records and
        one will be generated on build().
        """
        self._id = validate_id(id)
        return self


class CopyOfBuilder(Builder):
    def __init__(
        self, id: str, name: str | None, description: str | None, image: str | None
    ):
        super().__init__()
        self.id(id).name(name).description(description).image(image)  # type: ignore[arg-type]
