"""In-memory PlayStore over a caller-supplied catalog."""

from collections.abc import Mapping
from types import MappingProxyType

from theater.domain import Play
from theater.stores.interfaces import PlayStore


class InMemoryPlayStore(PlayStore):
    """Read-only snapshot of a play catalog mapping."""

    def __init__(self, plays: Mapping[str, Play]) -> None:
        self._plays = MappingProxyType(dict(plays))

    def get_play(self, play_id: str) -> Play | None:
        return self._plays.get(play_id)
