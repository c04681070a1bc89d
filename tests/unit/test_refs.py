"""HEAD reference tests."""

from gyst.core.index import IndexEntry


def make_commit(repo, message='c'):
    digest = repo.store.put(message.encode())
    return repo.chain.commit(message, [IndexEntry('f.txt', digest)])


def test_resolve_head_empty(repo):
    assert repo.refs.resolve_head() is None


def test_update_head(repo):
    repo.refs.update_head('a' * 40)
    assert repo.refs.resolve_head() == 'a' * 40
    assert repo.head_file.read_text() == 'a' * 40


def test_resolve_head_strips_whitespace(repo):
    repo.head_file.write_text('b' * 40 + '\n')
    assert repo.refs.resolve_head() == 'b' * 40


def test_resolve_reference_head(repo):
    commit_hash = make_commit(repo)
    assert repo.refs.resolve_reference('HEAD') == commit_hash


def test_resolve_reference_full_and_prefix(repo):
    commit_hash = make_commit(repo)
    assert repo.refs.resolve_reference(commit_hash) == commit_hash
    assert repo.refs.resolve_reference(commit_hash[:7]) == commit_hash
    assert repo.refs.resolve_reference(commit_hash[:7].upper()) == commit_hash


def test_resolve_reference_rejects_short_or_invalid(repo):
    commit_hash = make_commit(repo)
    assert repo.refs.resolve_reference(commit_hash[:3]) is None
    assert repo.refs.resolve_reference('not-a-hash') is None
    assert repo.refs.resolve_reference('0' * 40) is None


def test_resolve_reference_ignores_blobs(repo):
    blob = repo.store.put(b'just a blob')
    assert repo.refs.resolve_reference(blob) is None
