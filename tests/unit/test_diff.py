"""Unit tests for the diff renderer and diff engine."""

import pytest
from gyst.core.errors import CommitNotFound
from gyst.core.index import IndexEntry
from gyst.operations.diff import (DiffEngine, DiffRenderer, DiffRun, DiffKind,
                                  FileDiff, FileStatus)


def kinds(runs):
    return [run.kind for run in runs]


@pytest.mark.parametrize('text', [
    '',
    'one line',
    'a\nb\nc\n',
    'no trailing newline\nsecond',
    '\n\n\n',
])
def test_render_identity(text):
    """Equal texts give one Equal run and nothing else."""
    runs = DiffRenderer.render(text, text)
    assert kinds(runs) == [DiffKind.EQUAL]
    assert runs[0].text == text


def test_render_single_line_change():
    runs = DiffRenderer.render('hello', 'hello world')
    assert runs == [
        DiffRun(DiffKind.REMOVED, ['hello']),
        DiffRun(DiffKind.ADDED, ['hello world']),
    ]


def test_render_runs_follow_document_order():
    old = 'a\nb\nc\nd\n'
    new = 'a\nB\nc\nd\ne\n'

    runs = DiffRenderer.render(old, new)

    assert [(r.kind, r.text) for r in runs] == [
        (DiffKind.EQUAL, 'a\n'),
        (DiffKind.REMOVED, 'b\n'),
        (DiffKind.ADDED, 'B\n'),
        (DiffKind.EQUAL, 'c\nd\n'),
        (DiffKind.ADDED, 'e\n'),
    ]


def test_render_pure_insertion_and_deletion():
    assert [(r.kind, r.text) for r in DiffRenderer.render('a\nc\n', 'a\nb\nc\n')] == [
        (DiffKind.EQUAL, 'a\n'),
        (DiffKind.ADDED, 'b\n'),
        (DiffKind.EQUAL, 'c\n'),
    ]
    assert [(r.kind, r.text) for r in DiffRenderer.render('a\nb\nc\n', 'a\nc\n')] == [
        (DiffKind.EQUAL, 'a\n'),
        (DiffKind.REMOVED, 'b\n'),
        (DiffKind.EQUAL, 'c\n'),
    ]


def test_render_runs_are_maximal():
    """Adjacent lines of the same kind form a single run."""
    runs = DiffRenderer.render('x\n', 'a\nb\nc\n')
    assert kinds(runs) == [DiffKind.REMOVED, DiffKind.ADDED]
    assert runs[1].lines == ['a\n', 'b\n', 'c\n']


def test_render_to_empty():
    assert [(r.kind, r.text) for r in DiffRenderer.render('a\nb\n', '')] == [
        (DiffKind.REMOVED, 'a\nb\n'),
    ]


def test_render_without_old_text():
    runs = DiffRenderer.render(None, 'a\nb\n')
    assert runs == [DiffRun(DiffKind.ADDED, ['a\n', 'b\n'])]


def test_render_reconstructs_both_sides():
    old = 'one\ntwo\nthree\nfour\n'
    new = 'zero\none\nthree\nfour\nfive\n'
    runs = DiffRenderer.render(old, new)

    assert ''.join(r.text for r in runs if r.kind is not DiffKind.ADDED) == old
    assert ''.join(r.text for r in runs if r.kind is not DiffKind.REMOVED) == new


def lcs_length(a, b):
    """Reference longest-common-subsequence length."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            table[i + 1][j + 1] = table[i][j] + 1 if x == y else max(table[i][j + 1], table[i + 1][j])
    return table[-1][-1]


@pytest.mark.parametrize('old, new', [
    ('A\nB\nC\nD\nx1\nx2\nx3\n', 'x1\nx2\nx3\nA\ny\nB\ny\nC\ny\nD\n'),
    ('a\nb\nc\na\nb\nb\na\n', 'c\nb\na\nb\na\nc\n'),
    ('1\n2\n3\n4\n5\n6\n', '6\n5\n4\n3\n2\n1\n'),
    ('x\na\ny\nb\nz\nc\n', 'a\nq\nb\nr\nc\ns\n'),
    ('same\n' * 5, 'same\n' * 3 + 'other\n'),
])
def test_render_equal_lines_form_longest_common_subsequence(old, new):
    runs = DiffRenderer.render(old, new)
    old_lines = old.splitlines(keepends=True)
    new_lines = new.splitlines(keepends=True)

    equal = sum(len(r.lines) for r in runs if r.kind is DiffKind.EQUAL)
    assert equal == lcs_length(old_lines, new_lines)
    assert ''.join(r.text for r in runs if r.kind is not DiffKind.ADDED) == old
    assert ''.join(r.text for r in runs if r.kind is not DiffKind.REMOVED) == new


def test_render_scattered_matches_survive():
    """A moved block does not hide the lines matched around it."""
    runs = DiffRenderer.render('A\nB\nC\nD\nx1\nx2\nx3\n', 'x1\nx2\nx3\nA\ny\nB\ny\nC\ny\nD\n')
    equal = [line for r in runs if r.kind is DiffKind.EQUAL for line in r.lines]
    assert equal == ['A\n', 'B\n', 'C\n', 'D\n']


def test_render_removed_precedes_added_in_each_change():
    runs = DiffRenderer.render('a\nb\nc\nd\n', 'x\nb\ny\nz\nd\n')
    changes = [r.kind for r in runs]
    for first, second in zip(changes, changes[1:]):
        assert (first, second) != (DiffKind.ADDED, DiffKind.REMOVED)
        assert first is not second


def test_file_diff_has_changes():
    unchanged = FileDiff('a.txt', FileStatus.UNCHANGED, [DiffRun(DiffKind.EQUAL, ['x'])])
    changed = FileDiff('a.txt', FileStatus.MODIFIED, [DiffRun(DiffKind.ADDED, ['x'])])
    assert not unchanged.has_changes
    assert changed.has_changes
    assert FileDiff('a.txt', FileStatus.NEW_FILE).note == "(new file in this commit)"


def test_diff_engine_init(repo):
    engine = DiffEngine(repo)
    assert engine.repo is repo
    assert repo.diff.repo is repo


def test_diff_first_commit(repo_with_commits):
    first, _ = repo_with_commits.commit_hashes

    diffs = repo_with_commits.diff.diff_commit(first)

    assert [(d.path, d.status) for d in diffs] == [
        ('a.txt', FileStatus.FIRST_COMMIT),
        ('b.txt', FileStatus.FIRST_COMMIT),
    ]
    assert all(d.runs == [] for d in diffs)
    assert [d.content for d in diffs] == ['hello', 'world']


def test_first_commit_does_not_render(repo_with_commits, monkeypatch):
    first, _ = repo_with_commits.commit_hashes

    def fail(*args, **kwargs):
        raise AssertionError("render called for a root commit")

    monkeypatch.setattr(DiffRenderer, 'render', fail)
    repo_with_commits.diff.diff_commit(first)


def test_diff_modified_and_unchanged(repo_with_commits):
    _, second = repo_with_commits.commit_hashes

    a_diff, b_diff = repo_with_commits.diff.diff_commit(second)

    assert a_diff.path == 'a.txt'
    assert a_diff.status == FileStatus.MODIFIED
    assert a_diff.runs == [
        DiffRun(DiffKind.REMOVED, ['hello']),
        DiffRun(DiffKind.ADDED, ['hello world']),
    ]

    assert b_diff.path == 'b.txt'
    assert b_diff.status == FileStatus.UNCHANGED
    assert kinds(b_diff.runs) == [DiffKind.EQUAL]


def test_diff_new_file(repo_with_commits, make_file):
    repo = repo_with_commits
    repo.index.add_file(str(make_file('c.txt', 'brand new')))
    third = repo.chain.commit('third')

    (c_diff,) = repo.diff.diff_commit(third)

    assert c_diff.status == FileStatus.NEW_FILE
    assert c_diff.runs == []
    assert c_diff.content == 'brand new'


def test_diff_parent_missing(repo_with_commits):
    repo = repo_with_commits
    first, second = repo.commit_hashes
    repo.store.object_path(first).unlink()

    diffs = repo.diff.diff_commit(second)

    assert [d.status for d in diffs] == [FileStatus.PARENT_MISSING] * 2


def test_diff_content_missing_only_affects_that_file(repo_with_commits):
    repo = repo_with_commits
    _, second = repo.commit_hashes
    a_entry = repo.chain.read_commit(second).get_file('a.txt')
    repo.store.object_path(a_entry.hash).unlink()

    a_diff, b_diff = repo.diff.diff_commit(second)

    assert a_diff.status == FileStatus.CONTENT_MISSING
    assert b_diff.status == FileStatus.UNCHANGED


def test_diff_first_commit_with_missing_blob(repo_with_commits):
    repo = repo_with_commits
    first, _ = repo.commit_hashes
    b_entry = repo.chain.read_commit(first).get_file('b.txt')
    repo.store.object_path(b_entry.hash).unlink()

    a_diff, b_diff = repo.diff.diff_commit(first)

    assert a_diff.status == FileStatus.FIRST_COMMIT
    assert b_diff.status == FileStatus.CONTENT_MISSING
    assert b_diff.content is None


def test_diff_unknown_commit(repo):
    with pytest.raises(CommitNotFound):
        repo.diff.diff_commit('0' * 40)


def test_diff_blob_is_not_a_commit(repo):
    digest = repo.store.put(b'plain text')
    with pytest.raises(CommitNotFound):
        repo.diff.diff_commit(digest)


def test_format_diff_plain(repo_with_commits):
    repo = repo_with_commits
    first, second = repo.commit_hashes

    text = repo.diff.format_diff(repo.diff.diff_commit(second), color=False)
    assert 'File: a.txt' in text
    assert '-- hello' in text
    assert '++ hello world' in text
    assert '   world' in text

    text = repo.diff.format_diff(repo.diff.diff_commit(first), color=False)
    assert text.count('(first commit, no parent to diff against)') == 2
    assert 'File: a.txt\n  (first commit, no parent to diff against)\n   hello\n' in text
    assert '   world' in text


def test_format_diff_color(repo_with_commits):
    from colorama import Fore

    _, second = repo_with_commits.commit_hashes
    diffs = repo_with_commits.diff.diff_commit(second)

    text = repo_with_commits.diff.format_diff(diffs, color=True)
    assert f"{Fore.GREEN}++ hello world" in text
    assert f"{Fore.RED}-- hello" in text
