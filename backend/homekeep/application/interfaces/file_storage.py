"""Port for storing photo binary content."""

from abc import ABC, abstractmethod


class FileStorage(ABC):
    """Maps photo ids to stored files. Names returned by ``save`` are opaque to callers."""

    @abstractmethod
    async def save(self, photo_id: int, extension: str, content: bytes) -> str:
        """Write ``content`` and return the stored file name. Raises FileStorageError."""
        ...

    @abstractmethod
    async def read(self, name: str) -> bytes | None:
        """Return the stored bytes, or None when missing or unreadable."""
        ...

    @abstractmethod
    async def remove(self, name: str) -> bool:
        """Delete a stored file. Never raises; returns False when nothing was removed."""
        ...
