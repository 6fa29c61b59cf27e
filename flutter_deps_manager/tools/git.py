"""Git client built on the git command line."""

import shlex
from pathlib import Path

import structlog

from flutter_deps_manager.tools.abc import VersionControlBase
from flutter_deps_manager.tools.process import run_captured

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class GitClient(VersionControlBase):
    """Runs git commands against a single repository."""

    def __init__(self, root: Path, git_command: list[str] | None = None) -> None:
        """Initialize the client for the repository rooted at `root`."""
        self._root = root
        self.git_command = git_command or ["git"]

    @classmethod
    def discover(cls, cwd: Path, git_command: str = "git") -> "GitClient":
        """Create a client for the repository containing `cwd`."""
        command = shlex.split(git_command)
        result = run_captured([*command, "rev-parse", "--show-toplevel"], cwd=cwd)
        root = Path(result.stdout.strip())
        logger.debug("Discovered repository root", root=str(root))
        return cls(root, command)

    @property
    def root(self) -> Path:
        """Path to the root of the repository."""
        return self._root

    def _git(self, *args: str, allowed_returncodes: tuple[int, ...] = (0,)) -> str:
        result = run_captured([*self.git_command, *args], cwd=self._root, allowed_returncodes=allowed_returncodes)
        return result.stdout

    def has_no_uncommitted_changes(self) -> bool:
        """Return True if tracked files match HEAD. Untracked files are ignored."""
        # Refresh stat info first, or touched-but-unchanged files count as modified.
        self._git("update-index", "-q", "--refresh", allowed_returncodes=(0, 1))
        result = run_captured(
            [*self.git_command, "diff-index", "--quiet", "HEAD", "--"],
            cwd=self._root,
            allowed_returncodes=(0, 1),
        )
        return result.returncode == 0

    def list_untracked_files(self) -> list[str]:
        """List untracked files that are not ignored."""
        output = self._git("ls-files", "--others", "--exclude-standard")
        return [line for line in output.splitlines() if line.strip()]

    def status_summary(self) -> str:
        """Return `git status --short` output."""
        return self._git("status", "--short").rstrip()

    def diff(self, path: Path | str) -> str:
        """Return the diff of a path against the index."""
        return self._git("diff", "--", str(path))

    def show_committed_file(self, path: Path | str) -> str | None:
        """Return the content of a file at HEAD, or None if HEAD has no such file."""
        result = run_captured(
            [*self.git_command, "show", f"HEAD:{Path(path).as_posix()}"],
            cwd=self._root,
            allowed_returncodes=(0, 128),
        )
        if result.returncode != 0:
            return None
        return result.stdout

    def commit_all(self, message: str) -> None:
        """Stage all tracked changes and commit them with `message`."""
        self._git("commit", "--all", "--quiet", f"--message={message}")
        logger.info("Created commit", subject=message.splitlines()[0])
