"""Gyst objects: blobs and commits."""

import json
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional
from .errors import CorruptObject
from .hash import hash_object
from .index import IndexEntry


# Version of the commit record written by this release.
COMMIT_SCHEMA_VERSION = 1


class GystObject(ABC):
    """Base class for all Gyst objects."""

    def __init__(self):
        self._hash: Optional[str] = None

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.

        Returns:
            bytes: Serialized object data
        """
        pass

    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize object from bytes.

        Args:
            data: Serialized object data
        """
        pass

    @property
    def type(self) -> str:
        """
        Return object type name.

        Returns:
            str: Object type (blob, commit)
        """
        return self.__class__.__name__.lower()

    def compute_hash(self) -> str:
        """
        Compute and cache object hash.

        The hash covers exactly the bytes that are stored, so an object's
        digest is also the name of its slot in the object store.

        Returns:
            str: 40-character SHA-1 hash
        """
        if self._hash is None:
            self._hash = hash_object(self.serialize())
        return self._hash

    @property
    def hash(self) -> str:
        """
        Get object hash.

        Returns:
            str: 40-character SHA-1 hash
        """
        return self.compute_hash()


class Blob(GystObject):
    """
    Represents file content.

    A blob stores the raw content of a file without any metadata
    like filename or permissions.
    """

    def __init__(self, data: Optional[bytes] = None):
        """
        Initialize a blob.

        Args:
            data: File content as bytes
        """
        super().__init__()
        self.data = data or b''

    def serialize(self) -> bytes:
        return self.data

    def deserialize(self, data: bytes) -> None:
        self.data = data
        self._hash = None

    @classmethod
    def from_file(cls, filepath: str) -> 'Blob':
        """
        Create blob from file.

        Args:
            filepath: Path to file

        Returns:
            Blob: New blob containing file content
        """
        with open(filepath, 'rb') as f:
            return cls(f.read())

    def text(self) -> str:
        """Content decoded as UTF-8, undecodable bytes replaced."""
        return self.data.decode('utf-8', errors='replace')

    def __repr__(self) -> str:
        """String representation of blob."""
        size = len(self.data)
        return f"Blob(hash={self.hash[:7]}, size={size})"


class Commit(GystObject):
    """
    Represents a commit.

    A commit captures:
    - The staged files (path and blob hash of each)
    - The parent commit, or None for a root commit
    - Timestamp (ISO-8601, UTC)
    - Commit message

    Commits are stored as compact JSON with sorted keys and a ``schema``
    version tag. Records without a tag are the older unversioned layout
    (``timeStamp``/``message``/``files``/``parent``) and are still readable.
    """

    def __init__(self):
        """Initialize empty commit."""
        super().__init__()
        self.timestamp: str = ''
        self.message: str = ''
        self.files: List[IndexEntry] = []
        self.parent: Optional[str] = None
        self.schema: int = COMMIT_SCHEMA_VERSION

    def to_dict(self) -> dict:
        """Return the schema-1 record for this commit."""
        return {
            'schema': COMMIT_SCHEMA_VERSION,
            'type': 'commit',
            'timestamp': self.timestamp,
            'message': self.message,
            'files': [entry.to_dict() for entry in self.files],
            'parent': self.parent,
        }

    def serialize(self) -> bytes:
        """
        Serialize commit to its canonical form.

        Returns:
            bytes: UTF-8 JSON, sorted keys, no insignificant whitespace
        """
        return json.dumps(
            self.to_dict(),
            sort_keys=True,
            separators=(',', ':'),
            ensure_ascii=False,
        ).encode('utf-8')

    def deserialize(self, data: bytes) -> None:
        """
        Deserialize commit from stored bytes.

        Args:
            data: Serialized commit data

        Raises:
            CorruptObject: If data is not a commit record this release can read
        """
        try:
            record = json.loads(data.decode('utf-8'))
        except (UnicodeDecodeError, ValueError) as e:
            raise CorruptObject(self._hash or '', f"Not a commit object: {e}")

        if not isinstance(record, dict):
            raise CorruptObject(self._hash or '', "Not a commit object")

        schema = record.get('schema', 0)
        if not isinstance(schema, int) or schema > COMMIT_SCHEMA_VERSION:
            raise CorruptObject(
                self._hash or '',
                f"Unsupported commit schema version: {schema!r}"
            )

        if schema == 0:
            timestamp = record.get('timeStamp')
        else:
            if record.get('type') != 'commit':
                raise CorruptObject(self._hash or '', "Not a commit object")
            timestamp = record.get('timestamp')

        files = record.get('files')
        parent = record.get('parent')
        message = record.get('message')

        if not isinstance(files, list) or not isinstance(message, str):
            raise CorruptObject(self._hash or '', "Malformed commit record")
        if parent is not None and not isinstance(parent, str):
            raise CorruptObject(self._hash or '', "Malformed parent pointer")

        try:
            self.files = [IndexEntry.from_dict(item) for item in files]
        except (TypeError, KeyError) as e:
            raise CorruptObject(self._hash or '', f"Malformed file entry: {e}")

        self.schema = schema
        self.timestamp = str(timestamp or '')
        self.message = message
        # Older writers stored an empty HEAD as the parent of a root commit
        self.parent = (parent.strip() or None) if parent else None

    @classmethod
    def create(
        cls,
        message: str,
        files: List[IndexEntry],
        parent: Optional[str] = None,
        timestamp: Optional[str] = None
    ) -> 'Commit':
        """
        Create a new commit.

        Args:
            message: Commit message
            files: Staged entries captured by this commit
            parent: Hash of the parent commit (None for a root commit)
            timestamp: ISO-8601 timestamp (defaults to now, UTC)

        Returns:
            Commit: New commit object
        """
        commit = cls()
        commit.message = message
        commit.files = list(files)
        commit.parent = parent

        if timestamp is None:
            timestamp = datetime.now(timezone.utc).isoformat()

        commit.timestamp = timestamp
        return commit

    @classmethod
    def from_bytes(cls, data: bytes, digest: Optional[str] = None) -> 'Commit':
        """
        Decode a stored commit, keeping the digest it was stored under.

        Args:
            data: Stored bytes
            digest: Hash the bytes were read from

        Returns:
            Commit: Decoded commit
        """
        commit = cls()
        commit._hash = digest
        commit.deserialize(data)
        commit._hash = digest
        return commit

    @property
    def is_root(self) -> bool:
        """True when the commit has no parent."""
        return self.parent is None

    def get_file(self, path: str) -> Optional[IndexEntry]:
        """Return this commit's entry for ``path``, if any."""
        for entry in self.files:
            if entry.path == path:
                return entry
        return None

    def __repr__(self) -> str:
        """String representation."""
        parent_info = f", parent={self.parent[:7]}" if self.parent else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"
