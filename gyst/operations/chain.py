"""Commit creation and history traversal."""

from typing import Iterator, List, Optional

from loguru import logger

from gyst.core.errors import CommitNotFound, NoStagedChanges, ObjectMissing
from gyst.core.index import IndexEntry
from gyst.core.objects import Commit


class CommitChain:
    """
    Builds commits from the staging index and walks the linear history.

    HEAD is advanced only as the last durable step of a commit. A commit
    runs in this order:
    1. store the commit object (write-once, harmless if we stop here)
    2. point HEAD at it
    3. clear the staging index

    There is no journal: a crash between steps can leave the index
    uncleared after HEAD moved.
    """

    def __init__(self, repo):
        """
        Initialize commit chain.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def current_head(self) -> Optional[str]:
        """Hash of the latest commit, or None before the first commit."""
        return self.repo.refs.resolve_head()

    def read_commit(self, digest: str) -> Commit:
        """
        Load a commit from the store.

        Args:
            digest: Commit hash

        Returns:
            Commit: Decoded commit

        Raises:
            ObjectMissing: If nothing is stored under digest
            CorruptObject: If the object is not a readable commit
        """
        return Commit.from_bytes(self.repo.store.get(digest), digest)

    def commit(self, message: str, entries: Optional[List[IndexEntry]] = None) -> str:
        """
        Record staged changes as a new commit.

        Args:
            message: Commit message
            entries: Entries to commit (defaults to the staging index)

        Returns:
            str: Hash of the new commit

        Raises:
            NoStagedChanges: If there is nothing to commit; nothing is written
        """
        if entries is None:
            entries = self.repo.index.entries

        if not entries:
            raise NoStagedChanges("No changes added to commit")

        commit = Commit.create(
            message=message,
            files=entries,
            parent=self.current_head(),
        )

        commit_hash = self.repo.store.write_object(commit)
        self.repo.refs.update_head(commit_hash)
        self.repo.index.clear()

        logger.info(
            "Created commit {} ({} file(s), parent {})",
            commit_hash, len(entries), commit.parent or 'none'
        )
        return commit_hash

    def history(self, start: Optional[str] = None) -> Iterator[Commit]:
        """
        Walk commit history from a commit back to the root.

        Commits are produced lazily, newest first. Only the starting commit
        is required to exist: if a later parent is missing or unreadable the
        walk stops there with a warning, since nothing beyond it can be
        trusted.

        Args:
            start: Commit hash to start from (defaults to HEAD)

        Yields:
            Commit: Each commit on the chain

        Raises:
            CommitNotFound: If start does not resolve to a commit
        """
        if start is None:
            start = self.current_head()
            if start is None:
                return

        try:
            commit = self.read_commit(start)
        except ObjectMissing as e:
            raise CommitNotFound(f"Commit {start} not found") from e

        seen = {start}

        while True:
            yield commit

            parent = commit.parent
            if parent is None:
                return

            if parent in seen:
                logger.warning(
                    "History truncated at {}: parent {} was already visited",
                    commit.hash, parent
                )
                return

            try:
                commit = self.read_commit(parent)
            except ObjectMissing as e:
                logger.warning("History truncated at {}: {}", commit.hash, e)
                return

            seen.add(parent)

    def __repr__(self) -> str:
        return f"CommitChain(repo={self.repo.work_tree})"
