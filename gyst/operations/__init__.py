"""Operations module for high-level Gyst operations.

This module contains the business logic for:
- Commit creation and history traversal
- Diff computation between a commit and its parent
"""

from gyst.operations.chain import CommitChain
from gyst.operations.diff import (DiffEngine, DiffRenderer, DiffRun, DiffKind,
                                  FileDiff, FileStatus)

__all__ = [
    'CommitChain',
    'DiffEngine', 'DiffRenderer', 'DiffRun', 'DiffKind',
    'FileDiff', 'FileStatus',
]
