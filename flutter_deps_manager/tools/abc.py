"""Base ABCs for the external tools the upgrade steps drive."""

from abc import ABC, abstractmethod
from pathlib import Path


class VersionControlBase(ABC):
    """Base ABC for version control clients."""

    @property
    @abstractmethod
    def root(self) -> Path:
        """Path to the root of the repository."""
        pass

    # Working tree state
    @abstractmethod
    def has_no_uncommitted_changes(self) -> bool:
        """Return True if tracked files match the last commit."""
        pass

    @abstractmethod
    def list_untracked_files(self) -> list[str]:
        """List untracked files that are not ignored."""
        pass

    @abstractmethod
    def status_summary(self) -> str:
        """Return a short listing of changed paths."""
        pass

    @abstractmethod
    def diff(self, path: Path | str) -> str:
        """Return the diff of a path against the index."""
        pass

    @abstractmethod
    def show_committed_file(self, path: Path | str) -> str | None:
        """Return the content of a file as of the last commit, if it exists there."""
        pass

    # Commits
    @abstractmethod
    def commit_all(self, message: str) -> None:
        """Stage all tracked changes and commit them."""
        pass


class FrameworkPackageManagerBase(ABC):
    """Base ABC for the framework's package manager."""

    @abstractmethod
    def get_dependencies(self) -> None:
        """Resolve and fetch dependencies as declared."""
        pass

    @abstractmethod
    def upgrade_dependencies(self) -> None:
        """Upgrade dependencies within the declared constraints."""
        pass

    @abstractmethod
    def upgrade_major_versions(self) -> None:
        """Upgrade dependencies ignoring the declared constraints."""
        pass

    @abstractmethod
    def version_banner(self) -> str:
        """Return the raw output of the version command."""
        pass


class NativePackageManagerBase(ABC):
    """Base ABC for the native dependency manager."""

    name: str

    @abstractmethod
    def is_installed(self) -> bool:
        """Return True if the tool can be found on the execution path."""
        pass

    @abstractmethod
    def update(self, project_directory: str) -> None:
        """Update dependencies for one native sub-project."""
        pass
