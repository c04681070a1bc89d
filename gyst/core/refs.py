"""HEAD reference management for Gyst."""

from typing import Optional

from loguru import logger

from gyst.core.errors import ObjectMissing
from gyst.utils.fileio import atomic_write_text


class RefManager:
    """
    Manages the HEAD reference.

    History is linear, so HEAD is the only reference: a file holding
    the hash of the latest commit, or nothing before the first commit.
    """

    # Shortest hash prefix accepted when resolving a commit
    MIN_PREFIX = 4

    def __init__(self, repo):
        """
        Initialize reference manager.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.head_file = repo.head_file

    def resolve_head(self) -> Optional[str]:
        """
        Resolve HEAD to a commit hash.

        Returns:
            Commit hash, or None if HEAD is missing or empty
        """
        if not self.head_file.exists():
            return None

        content = self.head_file.read_text(encoding='utf-8').strip()
        return content or None

    def update_head(self, commit_hash: str) -> None:
        """
        Point HEAD at a commit.

        The file is replaced atomically. Concurrent writers are not
        serialized; the last one wins.

        Args:
            commit_hash: Hash of the new HEAD commit
        """
        previous = self.resolve_head()
        atomic_write_text(self.head_file, commit_hash)
        logger.debug("HEAD moved {} -> {}", previous or '(none)', commit_hash)

    def resolve_reference(self, ref: str) -> Optional[str]:
        """
        Resolve 'HEAD', a full hash or a unique hash prefix to a commit hash.

        Args:
            ref: Reference string (e.g., 'HEAD', 'a1b2c3d', full hash)

        Returns:
            Commit hash or None if the reference can't be resolved
            (unknown, ambiguous, or not a commit)
        """
        if ref == 'HEAD':
            return self.resolve_head()

        ref = ref.strip().lower()
        if len(ref) < self.MIN_PREFIX or any(c not in '0123456789abcdef' for c in ref):
            return None

        candidates = []
        for digest in self.repo.store.find_by_prefix(ref):
            try:
                self.repo.chain.read_commit(digest)
            except ObjectMissing:
                continue
            candidates.append(digest)

        if len(candidates) != 1:
            return None
        return candidates[0]

    def __repr__(self) -> str:
        return f"RefManager(head={self.head_file})"
