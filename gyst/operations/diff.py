"""Line diffs between a commit and its parent."""

from enum import Enum
from typing import List, Optional, Tuple

from gyst.core.errors import CommitNotFound, ObjectMissing


class DiffKind(Enum):
    """Classification of a run of lines."""
    EQUAL = 'equal'
    ADDED = 'added'
    REMOVED = 'removed'


class DiffRun:
    """A maximal contiguous block of lines with the same classification."""

    def __init__(self, kind: DiffKind, lines: Optional[List[str]] = None):
        self.kind = kind
        self.lines = lines or []

    @property
    def text(self) -> str:
        """The run's lines joined back together, line endings included."""
        return ''.join(self.lines)

    def __eq__(self, other):
        if not isinstance(other, DiffRun):
            return NotImplemented
        return self.kind == other.kind and self.lines == other.lines

    def __repr__(self):
        return f"DiffRun({self.kind.value}, lines={len(self.lines)})"


class DiffRenderer:
    """
    Computes line-level edit runs between two texts.

    The edit script is minimal: the Equal lines form a longest common
    subsequence of the two line lists. Pure: no storage access, so it can
    be used on any two strings.
    """

    @staticmethod
    def split_lines(text: str) -> List[str]:
        return text.splitlines(keepends=True)

    @staticmethod
    def edit_script(old_lines: List[str], new_lines: List[str]) -> List[Tuple[DiffKind, str]]:
        """
        Classify every line of both sides with a longest common subsequence.

        Args:
            old_lines: Lines of the previous content
            new_lines: Lines of the current content

        Returns:
            (kind, line) pairs in document order
        """
        # Common prefix and suffix are always part of some LCS
        start = 0
        while (start < len(old_lines) and start < len(new_lines)
               and old_lines[start] == new_lines[start]):
            start += 1

        end_old, end_new = len(old_lines), len(new_lines)
        while end_old > start and end_new > start and old_lines[end_old - 1] == new_lines[end_new - 1]:
            end_old -= 1
            end_new -= 1

        old_mid = old_lines[start:end_old]
        new_mid = new_lines[start:end_new]
        n, m = len(old_mid), len(new_mid)

        # lcs[i][j] is the LCS length of old_mid[i:] and new_mid[j:]
        lcs = [[0] * (m + 1) for _ in range(n + 1)]
        for i in range(n - 1, -1, -1):
            row, below = lcs[i], lcs[i + 1]
            for j in range(m - 1, -1, -1):
                if old_mid[i] == new_mid[j]:
                    row[j] = below[j + 1] + 1
                else:
                    row[j] = max(below[j], row[j + 1])

        script = [(DiffKind.EQUAL, line) for line in old_lines[:start]]

        i = j = 0
        while i < n and j < m:
            if old_mid[i] == new_mid[j]:
                script.append((DiffKind.EQUAL, old_mid[i]))
                i += 1
                j += 1
            elif lcs[i + 1][j] >= lcs[i][j + 1]:
                script.append((DiffKind.REMOVED, old_mid[i]))
                i += 1
            else:
                script.append((DiffKind.ADDED, new_mid[j]))
                j += 1
        script.extend((DiffKind.REMOVED, line) for line in old_mid[i:])
        script.extend((DiffKind.ADDED, line) for line in new_mid[j:])

        script.extend((DiffKind.EQUAL, line) for line in old_lines[end_old:])
        return script

    @classmethod
    def render(cls, old_text: Optional[str], new_text: str) -> List[DiffRun]:
        """
        Diff two texts line by line.

        Runs come out in document order. Where the texts diverge the
        removed lines come first, then the added lines that replace them.

        Args:
            old_text: Previous content (None if there was none)
            new_text: Current content

        Returns:
            List of DiffRun
        """
        new_lines = cls.split_lines(new_text)

        if old_text is None:
            return [DiffRun(DiffKind.ADDED, new_lines)]

        if old_text == new_text:
            return [DiffRun(DiffKind.EQUAL, new_lines)]

        runs: List[DiffRun] = []
        removed: List[str] = []
        added: List[str] = []

        def flush_changes():
            for kind, lines in ((DiffKind.REMOVED, removed), (DiffKind.ADDED, added)):
                if lines:
                    runs.append(DiffRun(kind, list(lines)))
                    lines.clear()

        for kind, line in cls.edit_script(cls.split_lines(old_text), new_lines):
            if kind is DiffKind.REMOVED:
                removed.append(line)
            elif kind is DiffKind.ADDED:
                added.append(line)
            else:
                flush_changes()
                if runs and runs[-1].kind is DiffKind.EQUAL:
                    runs[-1].lines.append(line)
                else:
                    runs.append(DiffRun(DiffKind.EQUAL, [line]))
        flush_changes()

        return runs


class FileStatus(Enum):
    """Outcome of comparing one file against the parent commit."""
    MODIFIED = 'modified'
    UNCHANGED = 'unchanged'
    NEW_FILE = 'new'
    FIRST_COMMIT = 'first-commit'
    PARENT_MISSING = 'parent-missing'
    CONTENT_MISSING = 'content-missing'


STATUS_NOTES = {
    FileStatus.NEW_FILE: "(new file in this commit)",
    FileStatus.FIRST_COMMIT: "(first commit, no parent to diff against)",
    FileStatus.PARENT_MISSING: "(parent commit object missing)",
    FileStatus.CONTENT_MISSING: "(file content missing)",
}


class FileDiff:
    """Represents the diff for a single file of a commit."""

    def __init__(self, path: str, status: FileStatus, runs: Optional[List[DiffRun]] = None,
                 content: Optional[str] = None):
        self.path = path
        self.status = status
        self.runs = runs or []
        # Stored text of a file with nothing to diff against
        self.content = content

    @property
    def has_changes(self) -> bool:
        return any(run.kind is not DiffKind.EQUAL for run in self.runs)

    @property
    def note(self) -> Optional[str]:
        return STATUS_NOTES.get(self.status)

    def __repr__(self):
        return f"FileDiff({self.path}, {self.status.value}, runs={len(self.runs)})"


class DiffEngine:
    """
    Engine for diffing a commit against its parent.

    For each file recorded in the commit, the parent's version of the same
    path is looked up and the two contents are rendered. Problems with a
    secondary object (parent commit, a blob) are reported per file and do
    not stop the other files from being diffed.
    """

    def __init__(self, repo):
        """
        Initialize diff engine.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.renderer = DiffRenderer()

    def diff_commit(self, commit_hash: str) -> List[FileDiff]:
        """
        Compute the diff between a commit and its parent.

        Args:
            commit_hash: Commit to inspect

        Returns:
            One FileDiff per file in the commit, in commit order

        Raises:
            CommitNotFound: If commit_hash is not a stored commit
        """
        chain = self.repo.chain

        try:
            commit = chain.read_commit(commit_hash)
        except ObjectMissing as e:
            raise CommitNotFound(f"Commit {commit_hash} not found") from e

        if commit.is_root:
            return [self._snapshot(entry, FileStatus.FIRST_COMMIT) for entry in commit.files]

        try:
            parent = chain.read_commit(commit.parent)
        except ObjectMissing:
            return [FileDiff(entry.path, FileStatus.PARENT_MISSING) for entry in commit.files]

        diffs = []
        for entry in commit.files:
            parent_entry = parent.get_file(entry.path)
            if parent_entry is None:
                diffs.append(self._snapshot(entry, FileStatus.NEW_FILE))
                continue

            try:
                new_text = self.repo.store.read_blob(entry.hash).text()
                old_text = self.repo.store.read_blob(parent_entry.hash).text()
            except ObjectMissing:
                diffs.append(FileDiff(entry.path, FileStatus.CONTENT_MISSING))
                continue

            runs = self.renderer.render(old_text, new_text)
            file_diff = FileDiff(entry.path, FileStatus.UNCHANGED, runs)
            if file_diff.has_changes:
                file_diff.status = FileStatus.MODIFIED
            diffs.append(file_diff)

        return diffs

    def _snapshot(self, entry, status: FileStatus) -> FileDiff:
        """FileDiff carrying the stored content of a file with no parent version."""
        try:
            content = self.repo.store.read_blob(entry.hash).text()
        except ObjectMissing:
            return FileDiff(entry.path, FileStatus.CONTENT_MISSING)
        return FileDiff(entry.path, status, content=content)

    def format_diff(self, diffs: List[FileDiff], color: bool = True) -> str:
        """
        Format diffs for the terminal.

        Args:
            diffs: List of FileDiff objects
            color: Whether to use color output

        Returns:
            Formatted diff string
        """
        from colorama import Fore, Style

        def paint(text, style):
            return f"{style}{text}{Style.RESET_ALL}" if color else text

        output = []

        for diff in diffs:
            output.append(paint(f"File: {diff.path}", Style.BRIGHT))

            if diff.note:
                output.append(f"  {diff.note}")
                if diff.content is not None:
                    for line in diff.content.splitlines():
                        output.append(paint(f"   {line}", Style.DIM))
                output.append('')
                continue

            for run in diff.runs:
                for line in run.lines:
                    line = line.rstrip('\r\n')
                    if run.kind is DiffKind.ADDED:
                        output.append(paint(f"++ {line}", Fore.GREEN))
                    elif run.kind is DiffKind.REMOVED:
                        output.append(paint(f"-- {line}", Fore.RED))
                    else:
                        output.append(paint(f"   {line}", Style.DIM))
            output.append('')

        return '\n'.join(output)
