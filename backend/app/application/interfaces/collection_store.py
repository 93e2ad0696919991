"""Abstract interface (port) for guarded read and read-modify-write of collections."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar

from app.domain.entities import CollectionSpec, Mutation

R = TypeVar("R")


class CollectionStore(ABC):
    """Port for collection access — implemented in the infrastructure layer."""

    @abstractmethod
    async def get(self, spec: CollectionSpec) -> Any:
        """Return the current value of a collection (its default if never written)."""
        ...

    @abstractmethod
    async def mutate(
        self, spec: CollectionSpec, fn: Callable[[Any], Mutation[R]]
    ) -> R:
        """Load a collection, apply ``fn`` and persist the result, exclusively per name.

        ``fn`` receives a freshly decoded value it may modify in place. An
        exception raised by ``fn`` propagates and nothing is written; so does
        a returned ``Mutation.unchanged(...)``.
        """
        ...
