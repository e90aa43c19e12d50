"""Domain-specific exceptions: framework-independent."""


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


class InvalidReferenceError(Exception):
    """Raised when a payload points at an entity that does not exist."""

    def __init__(self, entity_type: str, field: str, value: int):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{field} refers to unknown {entity_type} '{value}'")


class EntityInUseError(Exception):
    """Raised when deleting an entity that other records still reference."""

    def __init__(self, entity_type: str, entity_id: int, references: dict[str, int]):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.references = references
        used_by = ", ".join(f"{count} {name}" for name, count in references.items())
        super().__init__(f"{entity_type} with id '{entity_id}' is still used by {used_by}")


class FileStorageError(Exception):
    """Raised when photo content cannot be written to storage."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Could not store file '{name}': {reason}")
