"""Gyst - a minimal content-addressable version control store."""

__version__ = '0.1.0'

from gyst.core.repository import Repository
from gyst.core.objects import GystObject, Blob, Commit

__all__ = [
    'Repository',
    'GystObject',
    'Blob',
    'Commit',
]
