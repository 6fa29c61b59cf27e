"""Pytest configuration for integration tests.

These tests run the real CLI and real git against a throwaway repository.
`flutter` and `pod` are replaced by shell scripts, so neither needs to be
installed.
"""

import shutil
from pathlib import Path

import pytest

from tests.integration.utils import build_cli_environment, init_project


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Skip integration tests when git or a POSIX shell is not available."""
    if shutil.which("git") and shutil.which("sh"):
        return
    skip = pytest.mark.skip(reason="integration tests need git and sh")
    for item in items:
        if "integration" in item.path.parts:
            item.add_marker(skip)


@pytest.fixture
def cli_env(tmp_path: Path) -> dict[str, str]:
    """Environment pointing the CLI at the stub tools."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    git_config = tmp_path / "gitconfig"
    git_config.write_text("[init]\n\tdefaultBranch = main\n", encoding="utf-8")
    return build_cli_environment(bin_dir, git_config)


@pytest.fixture
def project(tmp_path: Path, cli_env: dict[str, str]) -> Path:
    """A committed, clean project repository."""
    project = tmp_path / "app"
    init_project(project, cli_env)
    return project
