"""Utility functions for integration tests."""

import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent

MANIFEST = """\
name: app
publish_to: 'none'

environment:
  sdk: '>=3.5.0-100.0.dev <4.0.0'
  flutter: '>=3.23.0-0.1.pre'  # 1a2b3c4d5e

dependencies:
  flutter:
    sdk: flutter
  http: ^1.0.0
"""

LOCKFILE = """\
packages:
  http:
    dependency: "direct main"
    source: hosted
    version: "1.2.2"
sdks:
  dart: ">=3.5.0-100.0.dev <4.0.0"
  flutter: ">=3.23.0-0.1.pre"
"""

# Stand-in for `flutter`: prints a main-channel banner, and each upgrade
# command leaves a change in the lockfile.
FLUTTER_STUB = """\
#!/bin/sh
case "$*" in
  "--version")
    cat <<'BANNER'
Flutter 3.24.0-1.0.pre.560 • channel main • https://github.com/flutter/flutter.git
Framework • revision d67e3e38f0 (2 days ago) • 2024-08-14 10:51:03 -0700
Engine • revision 0f8d3aa5c2
Tools • Dart 3.6.0 (build 3.6.0-142.0.dev) • DevTools 2.38.0
BANNER
    ;;
  "pub get") ;;
  "pub upgrade") echo "# pub upgrade" >> pubspec.lock ;;
  "pub upgrade --major-versions") echo "# pub upgrade --major-versions" >> pubspec.lock ;;
  *) echo "unexpected flutter arguments: $*" >&2; exit 64 ;;
esac
"""

# Stand-in for `pod`: every update changes the sub-project's Podfile.lock.
POD_STUB = """\
#!/bin/sh
for arg in "$@"; do
  case "$arg" in
    --project-directory=*) directory="${arg#--project-directory=}" ;;
  esac
done
echo "# pod update" >> "${directory}Podfile.lock"
"""


def write_executable(path: Path, content: str) -> Path:
    """Write a shell script and make it executable."""
    path.write_text(content, encoding="utf-8")
    path.chmod(0o755)
    return path


def build_cli_environment(bin_dir: Path, git_config: Path) -> dict[str, str]:
    """Environment for running the CLI against the stub tools, isolated from the user's settings."""
    env = {key: value for key, value in os.environ.items() if key not in ("NO_POD", "DEBUG") and not key.startswith("GIT_")}
    env.update(
        {
            "FLUTTER_COMMAND": str(write_executable(bin_dir / "flutter", FLUTTER_STUB)),
            "POD_COMMAND": str(write_executable(bin_dir / "pod", POD_STUB)),
            "PYTHONPATH": os.pathsep.join(filter(None, [str(PROJECT_ROOT), os.environ.get("PYTHONPATH")])),
            "GIT_CONFIG_GLOBAL": str(git_config),
            "GIT_CONFIG_NOSYSTEM": "1",
            "GIT_AUTHOR_NAME": "Integration Test",
            "GIT_AUTHOR_EMAIL": "integration@example.com",
            "GIT_COMMITTER_NAME": "Integration Test",
            "GIT_COMMITTER_EMAIL": "integration@example.com",
        }
    )
    return env


def git(project: Path, env: dict[str, str], *args: str) -> str:
    """Run a git command in the project and return its output."""
    result = subprocess.run(["git", *args], cwd=project, env=env, capture_output=True, text=True, check=True)
    return result.stdout


def init_project(project: Path, env: dict[str, str]) -> None:
    """Create a committed Flutter-like project with iOS and macOS sub-projects."""
    project.mkdir()
    (project / "pubspec.yaml").write_text(MANIFEST, encoding="utf-8")
    (project / "pubspec.lock").write_text(LOCKFILE, encoding="utf-8")
    for directory in ("ios", "macos"):
        (project / directory).mkdir()
        (project / directory / "Podfile.lock").write_text("PODFILE CHECKSUM: 0\n", encoding="utf-8")
    git(project, env, "init", "--quiet")
    git(project, env, "add", "--all")
    git(project, env, "commit", "--quiet", "--message=Initial commit")


def commit_subjects(project: Path, env: dict[str, str]) -> list[str]:
    """Commit subjects from oldest to newest."""
    return git(project, env, "log", "--reverse", "--format=%s").splitlines()


def run_cli(args: list[str], cwd: Path, env: dict[str, str]) -> subprocess.CompletedProcess[str]:
    """Helper to run the CLI as a subprocess and capture output.

    Args:
        args: List of command line arguments to pass to the CLI.
        cwd: Directory to run the CLI in.
        env: Environment for the CLI process.

    Returns:
        subprocess.CompletedProcess: The result of running the CLI command.
    """
    complete_command = [sys.executable, "-m", "flutter_deps_manager.configuration.cli", *args]
    print(f"Running command: {' '.join(complete_command)}")
    result = subprocess.run(complete_command, cwd=cwd, env=env, capture_output=True, text=True)
    print(f"Command result: {result.returncode}")
    print(f"Command stdout: {result.stdout}")
    print(f"Command stderr: {result.stderr}")
    return result
