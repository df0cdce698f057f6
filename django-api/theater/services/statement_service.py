"""Statement service - all billing logic is orchestrated here.

Services:
- Depend only on interfaces (stores)
- Resolve plays and surface missing ones as domain errors
- Compute the whole statement before rendering any text
"""

import logging
import os

from theater.domain import (
    Catalog,
    Invoice,
    Performance,
    Play,
    Statement,
    StatementLine,
    UnresolvedPlayError,
    amount_for,
    usd,
    volume_credits_for,
)
from theater.stores import InMemoryPlayStore, PlayStore

logger = logging.getLogger(__name__)


class StatementService:
    """Service for producing customer billing statements."""

    def __init__(self, store: PlayStore, line_separator: str = os.linesep) -> None:
        self._store = store
        self._line_separator = line_separator

    def resolve_play(self, performance: Performance) -> Play:
        """Return the play a performance refers to.

        Raises:
            UnresolvedPlayError: If the store has no such play.
        """
        play = self._store.get_play(performance.play_id)
        if play is None:
            raise UnresolvedPlayError(performance.play_id)
        return play

    def build_statement(self, invoice: Invoice) -> Statement:
        """Price and credit every performance, in invoice order.

        Raises:
            UnresolvedPlayError: If a performance references an unknown play.
            UnknownGenreError: If a resolved play has no pricing rules.
        """
        lines = []
        for performance in invoice.performances:
            play = self.resolve_play(performance)
            lines.append(
                StatementLine(
                    play_name=play.name,
                    audience=performance.audience,
                    amount_cents=amount_for(performance, play),
                    credits=volume_credits_for(performance, play),
                )
            )

        statement = Statement(
            customer=invoice.customer,
            lines=tuple(lines),
            total_amount_cents=sum(line.amount_cents for line in lines),
            total_credits=sum(line.credits for line in lines),
        )
        logger.debug(
            "Built statement for %s: %d performances, %d cents, %d credits",
            statement.customer,
            len(statement.lines),
            statement.total_amount_cents,
            statement.total_credits,
        )
        return statement

    def render_text(self, statement: Statement) -> str:
        """Render a computed statement as plain text."""
        sep = self._line_separator
        parts = [f"Statement for {statement.customer}{sep}"]
        for line in statement.lines:
            parts.append(
                f"  {line.play_name}: {usd(line.amount_cents)} ({line.audience} seats){sep}"
            )
        parts.append(f"Amount owed is {usd(statement.total_amount_cents)}{sep}")
        parts.append(f"You earned {statement.total_credits} credits{sep}")
        return "".join(parts)

    def statement(self, invoice: Invoice) -> str:
        """Return the rendered statement for an invoice."""
        return self.render_text(self.build_statement(invoice))


def statement(invoice: Invoice, catalog: Catalog, line_separator: str = os.linesep) -> str:
    """Render the statement for ``invoice`` against a plain play mapping."""
    service = StatementService(InMemoryPlayStore(catalog), line_separator=line_separator)
    return service.statement(invoice)
