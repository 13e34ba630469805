"""Error kinds and exceptions raised across the package."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Category of a failed operation."""

    NOT_FOUND = "NOT_FOUND"
    DUPLICATE = "DUPLICATE"
    INVALID_FORMAT = "INVALID_FORMAT"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    UNPROCESSABLE_ENTITY = "UNPROCESSABLE_ENTITY"


class TournamentError(Exception):
    """Base error; carries the kind of failure."""

    kind: ErrorKind = ErrorKind.UNKNOWN_ERROR

    def __init__(self, message: str = "", kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class DuplicateError(TournamentError):
    """An entity with the same identity already exists."""

    kind = ErrorKind.DUPLICATE


class InvalidFormatError(TournamentError, ValueError):
    """Input does not have the expected shape or format."""

    kind = ErrorKind.INVALID_FORMAT


class NotFoundError(TournamentError, LookupError):
    """A requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND