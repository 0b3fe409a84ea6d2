"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class StorageError(Exception):
    """Base class for failures of the underlying key-value storage."""

    def __init__(self, key: str, message: str):
        self.key = key
        self.message = message
        super().__init__(f"[{key}] {message}")


class StorageUnavailableError(StorageError):
    """Raised when the storage backend cannot be read or written."""


class StorageCorruptedError(StorageError):
    """Raised when a stored collection is not a valid JSON array."""


class InvalidUpdateError(Exception):
    """Raised when a patch would leave a stored record unreadable. Nothing is written."""

    def __init__(self, entity_type: str, entity_id: str, message: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.message = message
        super().__init__(f"Cannot update {entity_type} '{entity_id}': {message}")
