"""Client for the Flutter command line and its `pub` package manager."""

import shlex
from pathlib import Path

from flutter_deps_manager.tools.abc import FrameworkPackageManagerBase
from flutter_deps_manager.tools.process import run_captured, run_visibly


class FlutterClient(FrameworkPackageManagerBase):
    """Runs `flutter` commands in a project directory."""

    def __init__(self, project_root: Path, flutter_command: str = "flutter") -> None:
        """Initialize the client. `flutter_command` may hold several words, e.g. "fvm flutter"."""
        self.project_root = project_root
        self.flutter_command = shlex.split(flutter_command)

    def _run(self, *args: str) -> None:
        run_visibly([*self.flutter_command, *args], cwd=self.project_root)

    def get_dependencies(self) -> None:
        """Run `flutter pub get`."""
        self._run("pub", "get")

    def upgrade_dependencies(self) -> None:
        """Run `flutter pub upgrade`."""
        self._run("pub", "upgrade")

    def upgrade_major_versions(self) -> None:
        """Run `flutter pub upgrade --major-versions`, which may rewrite pubspec.yaml."""
        self._run("pub", "upgrade", "--major-versions")

    def version_banner(self) -> str:
        """Return the output of `flutter --version`."""
        command = [*self.flutter_command, "--version"]
        return run_captured(command, cwd=self.project_root).stdout
