# Repositories package (collection stores behind list routes)

from src.restlist.repositories.interfaces import (
    CollectionModelInterface,
    SearchableCollectionInterface,
)
from src.restlist.repositories.memory_collection import (
    InMemoryCollection,
    JsonFileCollection,
)

__all__ = [
    "CollectionModelInterface",
    "InMemoryCollection",
    "JsonFileCollection",
    "SearchableCollectionInterface",
]
