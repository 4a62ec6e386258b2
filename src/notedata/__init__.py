from .model import NoteData, Builder, CopyOfBuilder, NameStep, BuildStep
from .note import Note, NoteList
from .exceptions import NoteDataError, MissingRequiredField, InvalidIdentifier

__all__ = [
    "NoteData",
    "Builder",
    "CopyOfBuilder",
    "NameStep",
    "BuildStep",
    "Note",
    "NoteList",
    "NoteDataError",
    "MissingRequiredField",
    "InvalidIdentifier",
]
