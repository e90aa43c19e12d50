"""Domain entity: a photo whose binary content lives in file storage."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Photo:
    """Photo metadata.

    ``file_path`` is the name of the stored file relative to the upload
    directory (``photo_<id><ext>``), not an absolute path.
    """

    title: str
    file_path: str
    content_type: str
    description: str | None = None
    category_id: int | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
