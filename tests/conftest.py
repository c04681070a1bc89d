"""Shared pytest fixtures for Gyst tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from loguru import logger
from gyst.core.repository import Repository


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def in_repo(repo, monkeypatch):
    """Initialized repository that is also the current directory."""
    monkeypatch.chdir(repo.work_tree)
    return repo


@pytest.fixture
def make_file(repo):
    """Return a helper that writes a file into the work tree."""
    def _make_file(name, content):
        path = repo.work_tree / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path
    return _make_file


@pytest.fixture
def repo_with_commits(repo, make_file):
    """
    Repository with two commits.

    First commit: a.txt = "hello", b.txt = "world"
    Second commit: a.txt = "hello world", b.txt unchanged (staged again)

    Commit hashes are available as repo.commit_hashes, oldest first.
    """
    a = make_file("a.txt", "hello")
    b = make_file("b.txt", "world")
    repo.index.add_file(str(a))
    repo.index.add_file(str(b))
    first = repo.chain.commit("first")

    a.write_text("hello world")
    repo.index.add_file(str(a))
    repo.index.add_file(str(b))
    second = repo.chain.commit("second")

    repo.commit_hashes = [first, second]
    return repo


@pytest.fixture
def log_messages():
    """Collect loguru WARNING+ messages emitted during a test."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(message.record['message']),
        level='WARNING',
        format='{message}',
    )
    yield messages
    logger.remove(handler_id)
