"""Command-line interface for Gyst."""
