"""
Exceptions raised by the Gyst core.

Lower layers raise these; only the CLI turns them into an exit status.
"""


class GystError(Exception):
    """Base exception for all Gyst errors."""
    pass


class RepoNotInitialized(GystError):
    """Raised when no .gyst directory can be found."""
    pass


class UnsupportedRepositoryFormat(GystError):
    """Raised when the repository was written by a newer Gyst."""
    pass


class FileUnreadable(GystError):
    """Raised when a file given to ``add`` cannot be read."""
    pass


class NoStagedChanges(GystError):
    """Raised when committing with an empty staging index."""
    pass


class CommitNotFound(GystError):
    """Raised when a hash does not resolve to a stored commit."""
    pass


class ObjectMissing(GystError):
    """Raised when the object store has no slot for a digest."""
    
    def __init__(self, digest: str, message: str = None):
        self.digest = digest
        super().__init__(message or f"Object {digest} not found")


class CorruptObject(ObjectMissing):
    """Raised when a stored object cannot be decoded as the expected type."""
    pass
