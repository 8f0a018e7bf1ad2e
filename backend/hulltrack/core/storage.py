"""Directory-backed object storage for uploaded boat order PDFs.

Each bucket is a directory under ``STORAGE_ROOT``; objects are keyed by their
original filename. The storage root is mounted as static files by the
application so public URLs resolve without going through the API.
"""

import logging
from pathlib import Path
from urllib.parse import quote

from hulltrack.core.config import settings

logger = logging.getLogger(__name__)

PUBLIC_MOUNT_PATH = "/files"


class StorageError(Exception):
    """Raised when an object cannot be stored or retrieved."""


class BucketStore:
    """A single named bucket on the local filesystem."""

    def __init__(self, root: Path, bucket: str, public_base_url: str) -> None:
        self.root = Path(root)
        self.bucket = bucket
        self.public_base_url = public_base_url.rstrip("/")
        self.path = self.root / bucket

    def ensure(self) -> None:
        self.path.mkdir(parents=True, exist_ok=True)

    def _object_path(self, key: str) -> Path:
        if not key or key in {".", ".."} or Path(key).name != key:
            raise StorageError(f"Invalid object key: {key!r}")
        return self.path / key

    def exists(self, key: str) -> bool:
        return self._object_path(key).is_file()

    def upload(self, key: str, data: bytes, *, upsert: bool = False) -> str:
        """Store ``data`` under ``key`` and return the key.

        Refuses to overwrite an existing object unless ``upsert`` is set.
        """
        target = self._object_path(key)
        if target.exists() and not upsert:
            raise StorageError("The resource already exists")
        self.ensure()
        try:
            target.write_bytes(data)
        except OSError as exc:
            raise StorageError(str(exc)) from exc
        logger.info("Stored %s/%s (%d bytes)", self.bucket, key, len(data))
        return key

    def download(self, key: str) -> bytes:
        target = self._object_path(key)
        if not target.is_file():
            raise StorageError("Object not found")
        return target.read_bytes()

    def remove(self, key: str) -> None:
        target = self._object_path(key)
        target.unlink(missing_ok=True)

    def public_url(self, key: str) -> str:
        self._object_path(key)
        return f"{self.public_base_url}{PUBLIC_MOUNT_PATH}/{quote(self.bucket)}/{quote(key)}"


def get_order_bucket() -> BucketStore:
    """FastAPI dependency returning the boat order bucket."""
    return BucketStore(
        root=Path(settings.STORAGE_ROOT),
        bucket=settings.BOAT_ORDER_BUCKET,
        public_base_url=settings.PUBLIC_BASE_URL,
    )
