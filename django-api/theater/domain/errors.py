"""Domain error codes for the theater module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    UNRESOLVED_PLAY = "UNRESOLVED_PLAY"
    UNKNOWN_GENRE = "UNKNOWN_GENRE"
    INVALID_AUDIENCE = "INVALID_AUDIENCE"
    INVALID_PLAY_NAME = "INVALID_PLAY_NAME"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UnresolvedPlayError(DomainError):
    """Raised when a performance references a play missing from the catalog."""

    def __init__(self, play_id: str) -> None:
        super().__init__(
            code=ErrorCode.UNRESOLVED_PLAY,
            message=f"No play with id {play_id!r} in the catalog",
        )
        self.play_id = play_id


class UnknownGenreError(DomainError):
    """Raised when a play's genre has no pricing rules."""

    def __init__(self, genre: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_GENRE,
            message=f"unknown type: {genre}",
        )
        self.genre = genre


class InvalidAudienceError(DomainError):
    """Raised when a performance audience is not a non-negative integer."""

    def __init__(self, audience: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_AUDIENCE,
            message="Audience must be a non-negative integer",
        )
        self.audience = audience


class InvalidPlayNameError(DomainError):
    """Raised when a play name is empty or not text."""

    def __init__(self, name: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PLAY_NAME,
            message="Play name must be non-empty text",
        )
        self.name = name
