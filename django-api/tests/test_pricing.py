"""Unit tests for genre pricing and volume credits.

Run with: pytest tests/test_pricing.py -v
"""

import pytest

from theater.domain import (
    GENRE_RULES,
    Genre,
    Performance,
    Play,
    UnknownGenreError,
    amount_for,
    volume_credits_for,
)

BOUNDARIES = [
    ("tragedy", 0, 40000, 0),
    ("tragedy", 30, 40000, 0),
    ("tragedy", 31, 41000, 1),
    ("tragedy", 55, 65000, 25),
    ("comedy", 0, 30000, 0),
    ("comedy", 20, 36000, 4),
    ("comedy", 21, 46800, 4),
    ("comedy", 35, 58000, 12),
]


class TestAmountFor:
    """Tests for per-performance charges."""

    @pytest.mark.parametrize(("genre", "audience", "amount", "_credits"), BOUNDARIES)
    def test_boundary_amounts(self, genre, audience, amount, _credits):
        """Charges match the genre rule table at each threshold."""
        play = Play(name="Any", genre=genre)
        assert amount_for(Performance(play_id="p", audience=audience), play) == amount

    def test_unknown_genre_raises(self):
        """Pricing a play of unknown genre raises UnknownGenreError."""
        play = Play(name="Cats", genre="musical")
        with pytest.raises(UnknownGenreError, match="unknown type: musical"):
            amount_for(Performance(play_id="cats", audience=10), play)

    def test_depends_only_on_genre_and_audience(self):
        """Plays sharing a genre are priced identically."""
        first = Play(name="Hamlet", genre="tragedy")
        second = Play(name="Othello", genre="tragedy")
        assert amount_for(Performance("hamlet", 42), first) == amount_for(
            Performance("othello", 42), second
        )

    def test_every_genre_has_rules(self):
        """The rule table covers every Genre member."""
        assert set(GENRE_RULES) == set(Genre)


class TestVolumeCreditsFor:
    """Tests for per-performance volume credits."""

    @pytest.mark.parametrize(("genre", "audience", "_amount", "credits"), BOUNDARIES)
    def test_boundary_credits(self, genre, audience, _amount, credits):
        """Credits match the base threshold plus the comedy bonus."""
        play = Play(name="Any", genre=genre)
        assert volume_credits_for(Performance(play_id="p", audience=audience), play) == credits

    def test_unknown_genre_earns_base_credits(self):
        """Credit accrual does not reject unknown genres."""
        play = Play(name="Cats", genre="musical")
        assert volume_credits_for(Performance(play_id="cats", audience=40), play) == 10
