"""Index (staging area) implementation."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import List

from loguru import logger

from gyst.core.errors import FileUnreadable
from gyst.utils.fileio import atomic_write_text


@dataclass(frozen=True)
class IndexEntry:
    """
    Represents a single entry in the index.

    Pairs a working-tree path (relative, '/'-separated) with the hash
    of the blob holding its staged content.
    """
    path: str
    hash: str

    def to_dict(self) -> dict:
        return {'path': self.path, 'hash': self.hash}

    @classmethod
    def from_dict(cls, data: dict) -> 'IndexEntry':
        """
        Build an entry from its stored form.

        Raises:
            TypeError: If data is not a mapping of string fields
            KeyError: If a field is missing
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected an object, got {type(data).__name__}")
        path = data['path']
        obj_hash = data['hash']
        if not isinstance(path, str) or not isinstance(obj_hash, str):
            raise TypeError("Entry path and hash must be strings")
        return cls(path=path, hash=obj_hash)

    def __repr__(self) -> str:
        """String representation."""
        return f"IndexEntry({self.hash[:7]} {self.path})"


class StagingIndex:
    """
    Gyst index (staging area) implementation.

    The index stores the ordered list of files to be included in the next
    commit. It never holds two entries for the same path: staging a path
    again replaces the earlier entry.

    Every mutation is a read-modify-write of the index file. The file is
    replaced atomically, but nothing serializes two processes staging at
    the same time; the later writer wins.
    """

    def __init__(self, repo):
        """
        Initialize index.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.index_file: Path = repo.index_file

    def load(self) -> List[IndexEntry]:
        """
        Read staged entries from disk.

        A missing or unreadable index is treated as empty.

        Returns:
            Staged entries in staging order
        """
        if not self.index_file.exists():
            return []

        try:
            raw = json.loads(self.index_file.read_text(encoding='utf-8'))
            if not isinstance(raw, list):
                raise TypeError(f"expected a list, got {type(raw).__name__}")
            entries = [IndexEntry.from_dict(item) for item in raw]
        except (OSError, ValueError, TypeError, KeyError) as e:
            logger.warning("Ignoring unreadable index {}: {}", self.index_file, e)
            return []

        return entries

    def write(self, entries: List[IndexEntry]) -> None:
        """
        Persist the full entry list.

        Args:
            entries: Entries to store, in order
        """
        payload = json.dumps([entry.to_dict() for entry in entries], indent=2)
        atomic_write_text(self.index_file, payload)

    def stage(self, path: str, digest: str) -> IndexEntry:
        """
        Add or replace the entry for ``path``.

        Args:
            path: File path relative to the work tree
            digest: Hash of the staged blob

        Returns:
            IndexEntry: The new entry
        """
        entry = IndexEntry(path=path, hash=digest)
        entries = [e for e in self.load() if e.path != path]
        entries.append(entry)
        self.write(entries)
        logger.debug("Staged {} as {}", path, digest)
        return entry

    def add_file(self, filepath: str) -> IndexEntry:
        """
        Stage a file for commit.

        Args:
            filepath: Path to file (absolute, or relative to the current directory)

        Returns:
            IndexEntry: Entry recorded for the file

        Raises:
            FileUnreadable: If the file is missing, not a regular file,
                unreadable, or outside the work tree
        """
        from gyst.core.objects import Blob

        file_path = Path(filepath)

        if not file_path.is_absolute():
            file_path = Path.cwd() / file_path

        if not file_path.exists():
            raise FileUnreadable(f"File not found: {filepath}")

        if not file_path.is_file():
            raise FileUnreadable(f"Not a file: {filepath}")

        try:
            rel_path = (file_path.parent.resolve() / file_path.name).relative_to(self.repo.work_tree)
        except ValueError:
            raise FileUnreadable(f"File is outside the repository: {filepath}")

        if rel_path.parts and rel_path.parts[0] == self.repo.gyst_dir.name:
            raise FileUnreadable(f"Cannot stage repository internals: {filepath}")

        try:
            blob = Blob.from_file(str(file_path))
        except OSError as e:
            raise FileUnreadable(f"Cannot read file '{filepath}': {e.strerror or e}")

        digest = self.repo.store.write_object(blob)
        return self.stage(rel_path.as_posix(), digest)

    def clear(self) -> None:
        """Remove all entries from the index."""
        self.write([])

    @property
    def entries(self) -> List[IndexEntry]:
        return self.load()

    def __repr__(self) -> str:
        """String representation."""
        return f"StagingIndex(path={self.index_file})"
