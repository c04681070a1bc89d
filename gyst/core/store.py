"""Content-addressable object store for Gyst."""

import re
from pathlib import Path
from typing import List

from loguru import logger

from .errors import ObjectMissing
from .hash import hash_object
from .objects import GystObject, Blob
from gyst.utils.fileio import atomic_write_bytes


_DIGEST_RE = re.compile(r'^[0-9a-f]{40}$')


class ContentStore:
    """
    Stores byte content under the hex SHA-1 of that content.

    Layout is one flat file per object: ``objects/<digest>``. Blobs are
    stored as raw file bytes, commits as their canonical serialization.
    Objects are write-once; nothing here ever deletes one.
    """

    def __init__(self, objects_dir: Path):
        """
        Initialize store.

        Args:
            objects_dir: Directory holding object files
        """
        self.objects_dir = Path(objects_dir)

    @staticmethod
    def hash(content: bytes) -> str:
        """Digest that ``content`` would be stored under."""
        return hash_object(content)

    @staticmethod
    def is_digest(value: str) -> bool:
        """True if ``value`` looks like a full 40-character digest."""
        return bool(_DIGEST_RE.match(value or ''))

    def object_path(self, digest: str) -> Path:
        """
        Get filesystem path for an object.

        Args:
            digest: 40-character SHA-1 hash

        Returns:
            Path: Full path to object file

        Raises:
            ObjectMissing: If digest is not a well-formed hash
        """
        if not self.is_digest(digest):
            raise ObjectMissing(digest, f"Invalid object name: {digest!r}")
        return self.objects_dir / digest

    def put(self, content: bytes) -> str:
        """
        Store content and return its digest.

        Writing content that is already present leaves the existing
        object untouched.

        Args:
            content: Bytes to store

        Returns:
            str: 40-character SHA-1 hash
        """
        digest = self.hash(content)
        if self.exists(digest):
            return digest

        atomic_write_bytes(self.object_path(digest), content)
        logger.debug("Wrote object {} ({} bytes)", digest, len(content))
        return digest

    def get(self, digest: str) -> bytes:
        """
        Read stored content.

        Args:
            digest: 40-character SHA-1 hash

        Returns:
            bytes: Stored content

        Raises:
            ObjectMissing: If no object is stored under digest
        """
        path = self.object_path(digest)

        try:
            return path.read_bytes()
        except (FileNotFoundError, IsADirectoryError):
            raise ObjectMissing(digest)

    def exists(self, digest: str) -> bool:
        """
        Check if object exists in store.

        Args:
            digest: 40-character SHA-1 hash

        Returns:
            bool: True if object exists
        """
        if not self.is_digest(digest):
            return False
        return (self.objects_dir / digest).is_file()

    def find_by_prefix(self, prefix: str) -> List[str]:
        """
        List stored digests starting with prefix.

        Args:
            prefix: Leading hex characters of a digest

        Returns:
            Matching digests, sorted
        """
        prefix = prefix.lower()
        if not self.objects_dir.is_dir():
            return []
        return sorted(
            path.name for path in self.objects_dir.iterdir()
            if path.name.startswith(prefix) and self.is_digest(path.name)
        )

    def write_object(self, obj: GystObject) -> str:
        """
        Write a Gyst object to the store.

        Args:
            obj: Object to write

        Returns:
            str: SHA-1 hash of the object
        """
        return self.put(obj.serialize())

    def read_blob(self, digest: str) -> Blob:
        """
        Read a blob from the store.

        Raises:
            ObjectMissing: If no object is stored under digest
        """
        blob = Blob(self.get(digest))
        blob._hash = digest
        return blob

    def __repr__(self) -> str:
        return f"ContentStore(path={self.objects_dir})"
