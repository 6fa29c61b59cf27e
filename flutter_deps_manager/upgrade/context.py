"""Per-run state shared by the upgrade steps."""

from dataclasses import dataclass

from flutter_deps_manager.configuration.models import RunConfiguration
from flutter_deps_manager.tools.abc import FrameworkPackageManagerBase, NativePackageManagerBase, VersionControlBase


@dataclass
class RunContext:
    """Everything a step needs: configuration, tool clients, and run-scoped state.

    `manifest_known_clean` is set once `flutter pub get` has been seen to
    leave the tree unchanged, and stays set for the rest of the run.
    """

    config: RunConfiguration
    vcs: VersionControlBase
    framework: FrameworkPackageManagerBase
    native: NativePackageManagerBase
    manifest_known_clean: bool = False
