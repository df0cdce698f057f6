"""Pricing and volume-credit rules per genre.

All thresholds and coefficients live in ``GENRE_RULES``. Supporting a new
genre means adding a ``Genre`` member and a row to the table.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Self

from theater.domain.errors import UnknownGenreError
from theater.domain.models import Performance, Play

VOLUME_CREDIT_THRESHOLD = 30


class Genre(Enum):
    """Genres with known pricing rules."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def parse(cls, tag: str) -> Self:
        try:
            return cls(tag)
        except ValueError:
            raise UnknownGenreError(tag) from None


@dataclass(frozen=True)
class GenreRules:
    """Charge and credit coefficients for one genre, in cents."""

    base_amount: int
    audience_threshold: int
    over_threshold_amount: int
    over_threshold_per_seat: int
    per_seat_amount: int = 0
    bonus_credit_divisor: int | None = None


GENRE_RULES: Mapping[Genre, GenreRules] = MappingProxyType(
    {
        Genre.TRAGEDY: GenreRules(
            base_amount=40000,
            audience_threshold=30,
            over_threshold_amount=0,
            over_threshold_per_seat=1000,
        ),
        Genre.COMEDY: GenreRules(
            base_amount=30000,
            audience_threshold=20,
            over_threshold_amount=10000,
            over_threshold_per_seat=500,
            per_seat_amount=300,
            bonus_credit_divisor=5,
        ),
    }
)


def rules_for(play: Play) -> GenreRules:
    """Return the rules for a play's genre.

    Raises:
        UnknownGenreError: If the genre is not in ``GENRE_RULES``.
    """
    return GENRE_RULES[Genre.parse(play.genre)]


def amount_for(performance: Performance, play: Play) -> int:
    """Return the charge for a performance in cents."""
    rules = rules_for(play)
    audience = performance.audience
    amount = rules.base_amount
    if audience > rules.audience_threshold:
        amount += rules.over_threshold_amount + rules.over_threshold_per_seat * (
            audience - rules.audience_threshold
        )
    amount += rules.per_seat_amount * audience
    return amount


def volume_credits_for(performance: Performance, play: Play) -> int:
    """Return the volume credits a performance earns.

    Unknown genres earn the base credits only; pricing is what rejects them.
    """
    audience = performance.audience
    credits = max(audience - VOLUME_CREDIT_THRESHOLD, 0)
    try:
        rules = rules_for(play)
    except UnknownGenreError:
        return credits
    if rules.bonus_credit_divisor:
        credits += audience // rules.bonus_credit_divisor
    return credits
