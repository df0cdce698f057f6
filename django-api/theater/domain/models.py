"""Domain models for billing statements.

These are pure domain objects with no API input rules.
Monetary values are integer cents throughout.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from theater.domain.errors import InvalidAudienceError, InvalidPlayNameError


@dataclass(frozen=True)
class Play:
    """A play in the catalog. ``genre`` is the raw tag, checked when priced."""

    name: str
    genre: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidPlayNameError(self.name)


@dataclass(frozen=True)
class Performance:
    """A single staging of a play with its seat count."""

    play_id: str
    audience: int

    def __post_init__(self) -> None:
        if isinstance(self.audience, bool) or not isinstance(self.audience, int):
            raise InvalidAudienceError(self.audience)
        if self.audience < 0:
            raise InvalidAudienceError(self.audience)


@dataclass(frozen=True)
class Invoice:
    """A customer's ordered performances, billed together."""

    customer: str
    performances: tuple[Performance, ...] = ()


Catalog = Mapping[str, Play]


@dataclass(frozen=True)
class StatementLine:
    """Priced and credited performance, ready for rendering."""

    play_name: str
    audience: int
    amount_cents: int
    credits: int


@dataclass(frozen=True)
class Statement:
    """Fully computed statement for one invoice."""

    customer: str
    lines: tuple[StatementLine, ...]
    total_amount_cents: int
    total_credits: int
