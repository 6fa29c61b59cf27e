"""Client for CocoaPods, the native dependency manager for iOS and macOS."""

import shlex
import shutil
from pathlib import Path

from flutter_deps_manager.tools.abc import NativePackageManagerBase
from flutter_deps_manager.tools.process import run_visibly


class CocoaPodsClient(NativePackageManagerBase):
    """Runs `pod` commands for the native sub-projects of a Flutter app."""

    name = "pod"

    def __init__(self, project_root: Path, pod_command: str = "pod") -> None:
        """Initialize the client for the project at `project_root`."""
        self.project_root = project_root
        self.pod_command = shlex.split(pod_command)

    def is_installed(self) -> bool:
        """Return True if the pod executable is on PATH."""
        return shutil.which(self.pod_command[0]) is not None

    def update(self, project_directory: str) -> None:
        """Run `pod update` for one sub-project, such as `ios` or `macos`."""
        run_visibly(
            [*self.pod_command, "update", f"--project-directory={project_directory.rstrip('/')}/"],
            cwd=self.project_root,
        )
