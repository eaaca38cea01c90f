# ABOUTME: Store package for persisting the reading-log collection.
# ABOUTME: Exports CollectionStore and its error types.

from booklog.store.collection import (
    CollectionError,
    CollectionFormatError,
    CollectionStore,
    CollectionWriteError,
    append,
)

__all__ = [
    "CollectionError",
    "CollectionFormatError",
    "CollectionStore",
    "CollectionWriteError",
    "append",
]
