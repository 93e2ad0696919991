"""Abstract interface (port) for durable byte storage addressed by collection name."""

from abc import ABC, abstractmethod


class BackingStore(ABC):
    """Port for durable collection bytes — implemented in the infrastructure layer.

    Methods are blocking; the collection store calls them from a worker thread.
    """

    @abstractmethod
    def read(self, name: str) -> bytes:
        """Return the bytes last written for ``name``.

        Raises:
            CollectionNotStoredError: if nothing was ever written for ``name``.
            PersistenceError: on any other I/O failure.
        """
        ...

    @abstractmethod
    def write(self, name: str, data: bytes) -> None:
        """Replace the bytes stored for ``name``.

        A concurrent or later ``read`` sees either the old bytes or the new
        bytes, never a mix.

        Raises:
            PersistenceError: if the bytes could not be stored.
        """
        ...
