"""Abstract interface (port) for turning collection values into bytes and back."""

from abc import ABC, abstractmethod
from typing import Any


class CollectionCodec(ABC):
    """Port for collection serialization — implemented in the infrastructure layer."""

    @abstractmethod
    def decode(self, data: bytes) -> Any:
        """Decode stored bytes into a collection value.

        Raises:
            CorruptCollectionError: if ``data`` is not a valid encoding.
        """
        ...

    @abstractmethod
    def encode(self, value: Any) -> bytes:
        """Encode a collection value deterministically.

        Raises:
            CorruptCollectionError: if ``value`` cannot be represented.
        """
        ...
