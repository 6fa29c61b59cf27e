"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class StepName(str, Enum):
    """Enum for the upgrade steps the pipeline can run."""

    POD = "pod"
    FLUTTER_LOCAL = "flutter-local"
    PUB = "pub"
    PUB_MAJOR = "pub-major"


@dataclass(frozen=True)
class RunConfiguration:
    """Configuration for a single upgrade run."""

    steps: list[StepName]
    run_pods: bool = True
    native_project_directories: list[str] = field(default_factory=lambda: ["ios", "macos"])
    manifest_path: Path = Path("pubspec.yaml")
    lockfile_path: Path = Path("pubspec.lock")
