"""Local filesystem storage for photo content.

Storage layout:
    <upload_dir>/photo_<id><ext>

The upload directory is created on the first write, not at construction,
so building the adapter never touches the disk.
"""

import logging
import re
from pathlib import Path

from homekeep.application.interfaces import FileStorage
from homekeep.domain.exceptions import FileStorageError

logger = logging.getLogger(__name__)

_MAX_EXTENSION_LEN = 10


def _sanitise_extension(extension: str) -> str:
    """Normalise ``"JPG"``, ``".jpg"`` or ``"tar.gz"`` into a safe ``".jpg"``-style suffix."""
    cleaned = re.sub(r"[^a-z0-9]", "", extension.lower())[:_MAX_EXTENSION_LEN]
    return f".{cleaned}" if cleaned else ""


class LocalFileStorage(FileStorage):
    """Infrastructure adapter for local file storage."""

    def __init__(self, upload_dir: str | Path):
        self._upload_dir = Path(upload_dir)

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    def _resolve(self, name: str) -> Path:
        # Only the base name is honoured; stored names never contain directories.
        return self._upload_dir / Path(name).name

    async def save(self, photo_id: int, extension: str, content: bytes) -> str:
        """Store photo content as ``photo_<id><ext>`` and return that name."""
        name = f"photo_{photo_id}{_sanitise_extension(extension)}"
        dest_path = self._resolve(name)
        try:
            self._upload_dir.mkdir(parents=True, exist_ok=True)
            dest_path.write_bytes(content)
        except OSError as exc:
            logger.error("Failed to write %s: %s", dest_path, exc)
            raise FileStorageError(name, str(exc)) from exc

        logger.info("Stored file: %s (%d bytes)", dest_path, len(content))
        return name

    async def read(self, name: str) -> bytes | None:
        file_path = self._resolve(name)
        if not file_path.is_file():
            logger.warning("Stored file missing: %s", file_path)
            return None
        try:
            return file_path.read_bytes()
        except OSError as exc:
            logger.error("Failed to read %s: %s", file_path, exc)
            return None

    async def remove(self, name: str) -> bool:
        """Delete a stored file from disk.

        Returns True if a file was deleted, False if it was missing or the
        removal failed (the failure is logged, never raised).
        """
        file_path = self._resolve(name)
        try:
            file_path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            logger.error("Failed to delete %s: %s", file_path, exc)
            return False

        logger.info("Deleted file from disk: %s", file_path)
        return True
