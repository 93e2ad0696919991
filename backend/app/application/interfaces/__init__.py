from .backing_store import BackingStore
from .collection_codec import CollectionCodec
from .collection_store import CollectionStore

__all__ = [
    "BackingStore",
    "CollectionCodec",
    "CollectionStore",
]
