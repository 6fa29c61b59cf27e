"""In-memory stand-ins for git, Flutter, and CocoaPods used by the unit tests."""

from collections.abc import Callable
from pathlib import Path

from flutter_deps_manager.tools.abc import FrameworkPackageManagerBase, NativePackageManagerBase, VersionControlBase


class FakeRepository(VersionControlBase):
    """In-memory stand-in for a git working tree.

    Every call is appended to the shared `calls` log, so tests can assert on
    the order of operations across all the fake tools.
    """

    def __init__(self, root: Path, calls: list[str]) -> None:
        self._root = root
        self.calls = calls
        self.tracked_changes = False
        self.untracked: list[str] = []
        self.commits: list[str] = []
        self.diffs: dict[str, str] = {}
        self.tracked_files: dict[str, str] = {}

    @property
    def root(self) -> Path:
        return self._root

    def track(self, path: str, content: str) -> None:
        """Write a file and treat its content as committed."""
        (self._root / path).write_text(content, encoding="utf-8")
        self.tracked_files[path] = content

    def _edited_files(self) -> list[str]:
        return [path for path, content in self.tracked_files.items() if (self._root / path).read_text(encoding="utf-8") != content]

    def has_no_uncommitted_changes(self) -> bool:
        return not self.tracked_changes and not self._edited_files()

    def list_untracked_files(self) -> list[str]:
        return list(self.untracked)

    def status_summary(self) -> str:
        lines = [" M pubspec.lock"] if self.tracked_changes else []
        lines += [f" M {path}" for path in self._edited_files()]
        lines += [f"?? {path}" for path in self.untracked]
        return "\n".join(lines)

    def diff(self, path: Path | str) -> str:
        self.calls.append(f"git diff {path}")
        return self.diffs.get(str(path), "")

    def show_committed_file(self, path: Path | str) -> str | None:
        return self.tracked_files.get(str(path))

    def commit_all(self, message: str) -> None:
        self.calls.append("git commit")
        self.commits.append(message)
        self.tracked_changes = False
        for path in self.tracked_files:
            self.tracked_files[path] = (self._root / path).read_text(encoding="utf-8")


class FakeFlutter(FrameworkPackageManagerBase):
    """Stand-in for `flutter`. Each command's effect on the tree is configurable."""

    def __init__(self, repository: FakeRepository, calls: list[str]) -> None:
        self.repository = repository
        self.calls = calls
        self.banner = ""
        self.effects: dict[str, Callable[[], None]] = {}

    def _run(self, command: str) -> None:
        self.calls.append(command)
        effect = self.effects.get(command)
        if effect is not None:
            effect()

    def get_dependencies(self) -> None:
        self._run("flutter pub get")

    def upgrade_dependencies(self) -> None:
        self._run("flutter pub upgrade")

    def upgrade_major_versions(self) -> None:
        self._run("flutter pub upgrade --major-versions")

    def version_banner(self) -> str:
        self.calls.append("flutter --version")
        return self.banner


class FakeCocoaPods(NativePackageManagerBase):
    """Stand-in for `pod`."""

    name = "pod"

    def __init__(self, repository: FakeRepository, calls: list[str]) -> None:
        self.repository = repository
        self.calls = calls
        self.installed = True
        self.changes_tree = False

    def is_installed(self) -> bool:
        return self.installed

    def update(self, project_directory: str) -> None:
        self.calls.append(f"pod update {project_directory}")
        if self.changes_tree:
            self.repository.tracked_changes = True


def dirty_tree(repository: FakeRepository) -> Callable[[], None]:
    """Return an effect that leaves tracked changes in the fake repository."""

    def effect() -> None:
        repository.tracked_changes = True

    return effect
