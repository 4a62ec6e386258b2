from typing import Iterable, Iterator
from pydantic import BaseModel, ConfigDict, field_validator
from structlog import get_logger

from .exceptions import MissingRequiredField
from .fields import Predicate
from .ids import validate_id
from .model import NoteData

log = get_logger()


class Note(BaseModel):
    """
    User-facing note, convertible to and from NoteData.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str
    name: str
    description: str | None = None
    image_name: str | None = None

    @field_validator("id")
    @classmethod
    def check_id_format(cls, value: str) -> str:
        return validate_id(value)

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_data(cls, data: NoteData) -> "Note":
        if data.name is None:
            raise MissingRequiredField("name")
        return cls(
            id=data.id,
            name=data.name,
            description=data.description,
            image_name=data.image,
        )

    def to_data(self) -> NoteData:
        return (
            NoteData.builder()
            .name(self.name)
            .id(self.id)
            .description(self.description)
            .image(self.image_name)
            .build()
        )


class NoteList:
    """
    Ordered, in-memory list of notes owned by a single task.
    """

    def __init__(self, notes: Iterable[Note] = ()):
        self._notes: list[Note] = list(notes)

    def __repr__(self) -> str:
        return f"NoteList({len(self._notes)})"

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self._notes)

    def add(self, note: Note) -> None:
        self._notes.append(note)
        log.info("note added", id=note.id, count=len(self._notes))

    def delete(self, at: int) -> Note | None:
        if not 0 <= at < len(self._notes):
            log.warning("note delete out of range", at=at, count=len(self._notes))
            return None
        note = self._notes.pop(at)
        log.info("note deleted", id=note.id, at=at, count=len(self._notes))
        return note

    def reset(self) -> int:
        removed = len(self._notes)
        self._notes = []
        log.info("notes reset", removed=removed)
        return removed

    def filter(self, predicate: Predicate) -> list[Note]:
        return [note for note in self._notes if predicate.matches(note.to_data())]
