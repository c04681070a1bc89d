"""Core functionality for Gyst.

This module contains the core data structures:
- Gyst objects (Blob, Commit)
- Content-addressable object store
- Index/staging area
- HEAD reference
- Repository context and configuration
- Hashing utilities and errors

For commit creation, history and diffs, see gyst.operations
"""

from gyst.core.errors import (GystError, RepoNotInitialized, UnsupportedRepositoryFormat,
                              FileUnreadable, NoStagedChanges, CommitNotFound,
                              ObjectMissing, CorruptObject)
from gyst.core.index import StagingIndex, IndexEntry
from gyst.core.objects import GystObject, Blob, Commit
from gyst.core.store import ContentStore
from gyst.core.refs import RefManager
from gyst.core.config import Config
from gyst.core.repository import Repository
from gyst.core.hash import hash_object

__all__ = [
    'GystError',
    'RepoNotInitialized',
    'UnsupportedRepositoryFormat',
    'FileUnreadable',
    'NoStagedChanges',
    'CommitNotFound',
    'ObjectMissing',
    'CorruptObject',
    'GystObject',
    'Blob',
    'Commit',
    'ContentStore',
    'StagingIndex',
    'IndexEntry',
    'RefManager',
    'Config',
    'Repository',
    'hash_object',
]
