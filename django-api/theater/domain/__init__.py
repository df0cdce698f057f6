from theater.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidAudienceError,
    InvalidPlayNameError,
    UnknownGenreError,
    UnresolvedPlayError,
)
from theater.domain.formatting import usd
from theater.domain.models import (
    Catalog,
    Invoice,
    Performance,
    Play,
    Statement,
    StatementLine,
)
from theater.domain.pricing import GENRE_RULES, Genre, GenreRules, amount_for, volume_credits_for

__all__ = [
    "Catalog",
    "Invoice",
    "Performance",
    "Play",
    "Statement",
    "StatementLine",
    "Genre",
    "GenreRules",
    "GENRE_RULES",
    "amount_for",
    "volume_credits_for",
    "usd",
    "DomainError",
    "ErrorCode",
    "InvalidAudienceError",
    "InvalidPlayNameError",
    "UnknownGenreError",
    "UnresolvedPlayError",
]
