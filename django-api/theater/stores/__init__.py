from theater.stores.interfaces import PlayStore
from theater.stores.memory_store import InMemoryPlayStore

__all__ = ["PlayStore", "InMemoryPlayStore"]
