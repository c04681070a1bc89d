"""Utility modules for Gyst."""

from gyst.utils.fileio import atomic_write_bytes, atomic_write_text

__all__ = ['atomic_write_bytes', 'atomic_write_text']
