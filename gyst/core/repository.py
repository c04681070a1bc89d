"""Repository management for Gyst."""

from pathlib import Path
from typing import Optional

from loguru import logger

from .config import Config, REPOSITORY_FORMAT_VERSION
from .errors import RepoNotInitialized, UnsupportedRepositoryFormat


class Repository:
    """
    Represents a Gyst repository.

    A repository is the explicit context every operation runs against:
    it knows where the .gyst directory lives and hands out the store,
    index, HEAD and history components bound to it.
    """

    DIR_NAME = '.gyst'

    def __init__(self, path: str = '.'):
        """
        Initialize repository.

        Args:
            path: Path to the work tree (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.gyst_dir = self.work_tree / self.DIR_NAME
        self.objects_dir = self.gyst_dir / 'objects'
        self.head_file = self.gyst_dir / 'HEAD'
        self.index_file = self.gyst_dir / 'index'
        self.config_file = self.gyst_dir / 'config'

        # Components are created lazily to avoid circular imports
        self._store = None
        self._index = None
        self._ref_manager = None
        self._chain = None
        self._diff_engine = None
        self._config = None

    @property
    def store(self):
        """Get ContentStore instance."""
        if self._store is None:
            from .store import ContentStore
            self._store = ContentStore(self.objects_dir)
        return self._store

    @property
    def index(self):
        """Get StagingIndex instance."""
        if self._index is None:
            from .index import StagingIndex
            self._index = StagingIndex(self)
        return self._index

    @property
    def refs(self):
        """Get RefManager instance."""
        if self._ref_manager is None:
            from .refs import RefManager
            self._ref_manager = RefManager(self)
        return self._ref_manager

    @property
    def chain(self):
        """Get CommitChain instance."""
        if self._chain is None:
            from gyst.operations.chain import CommitChain
            self._chain = CommitChain(self)
        return self._chain

    @property
    def diff(self):
        """Get DiffEngine instance."""
        if self._diff_engine is None:
            from gyst.operations.diff import DiffEngine
            self._diff_engine = DiffEngine(self)
        return self._diff_engine

    @property
    def config(self) -> Config:
        """Get repository Config."""
        if self._config is None:
            self._config = Config(self.config_file)
        return self._config

    def exists(self) -> bool:
        """True if the .gyst directory is present."""
        return self.gyst_dir.is_dir()

    def init(self) -> bool:
        """
        Initialize a new repository.

        Creates the .gyst directory structure:
        .gyst/
        ├── objects/       # Object database
        ├── HEAD           # Latest commit hash (empty until first commit)
        ├── index          # Staging area, "[]" when empty
        └── config         # Repository configuration

        Running init on an existing repository changes nothing that is
        already there; missing pieces are recreated.

        Returns:
            bool: True if the repository was newly created
        """
        created = not self.gyst_dir.exists()

        self.objects_dir.mkdir(parents=True, exist_ok=True)

        if not self.head_file.exists():
            self.head_file.write_text('')

        if not self.index_file.exists():
            self.index_file.write_text('[]')

        if created:
            self.config.set('core', 'repositoryformatversion', str(REPOSITORY_FORMAT_VERSION))
            logger.info("Initialized empty Gyst repository in {}", self.gyst_dir)

        return created

    def check_format(self) -> None:
        """
        Make sure this release can operate on the repository.

        Raises:
            UnsupportedRepositoryFormat: If the layout is newer than supported
        """
        try:
            version = self.config.format_version
        except ValueError as e:
            raise UnsupportedRepositoryFormat(str(e))

        if version > REPOSITORY_FORMAT_VERSION:
            raise UnsupportedRepositoryFormat(
                f"Repository format version {version} is newer than supported "
                f"version {REPOSITORY_FORMAT_VERSION}"
            )

    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Searches from the given path upwards until it finds a .gyst directory
        or reaches the filesystem root.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / cls.DIR_NAME).is_dir():
                return cls(str(current))

            # Reached filesystem root
            if current == current.parent:
                return None

            current = current.parent

    @classmethod
    def require(cls, path: str = '.') -> 'Repository':
        """
        Find the enclosing repository or fail.

        Raises:
            RepoNotInitialized: If no repository encloses path
            UnsupportedRepositoryFormat: If the repository is too new
        """
        repo = cls.find_repository(path)
        if repo is None:
            raise RepoNotInitialized("Not a gyst repository (run 'gyst init' first)")
        repo.check_format()
        return repo

    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"
