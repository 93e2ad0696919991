"""Domain-specific exceptions — framework-independent."""


class InvalidInputError(Exception):
    """Raised when caller input is malformed, before any collection is touched."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class CollectionNotStoredError(Exception):
    """Raised by a backing store when nothing was ever written for a collection.

    Not a failure: the collection store substitutes the default value.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Collection '{name}' has not been stored yet")


class CorruptCollectionError(Exception):
    """Raised when stored collection bytes cannot be decoded (or a value encoded)."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Corrupt collection data: {reason}")


class PersistenceError(Exception):
    """Raised when reading or writing durable storage fails for a reason other than absence."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Persistence failure: {reason}")
