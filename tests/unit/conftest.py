"""Fixtures for unit tests."""

from collections.abc import Callable
from pathlib import Path
from typing import Generator

import pytest
import structlog
from fakes import FakeCocoaPods, FakeFlutter, FakeRepository

from flutter_deps_manager.configuration.models import RunConfiguration, StepName
from flutter_deps_manager.upgrade.context import RunContext


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def calls() -> list[str]:
    """Shared log of tool invocations."""
    return []


@pytest.fixture
def repository(tmp_path: Path, calls: list[str]) -> FakeRepository:
    """Fake git repository rooted at a temporary directory."""
    return FakeRepository(tmp_path, calls)


@pytest.fixture
def flutter(repository: FakeRepository, calls: list[str]) -> FakeFlutter:
    """Fake Flutter tool."""
    return FakeFlutter(repository, calls)


@pytest.fixture
def pods(repository: FakeRepository, calls: list[str]) -> FakeCocoaPods:
    """Fake CocoaPods tool."""
    return FakeCocoaPods(repository, calls)


@pytest.fixture
def make_context(repository: FakeRepository, flutter: FakeFlutter, pods: FakeCocoaPods) -> Callable[..., RunContext]:
    """Factory for run contexts wired to the fake tools."""

    def factory(steps: list[StepName] | None = None, run_pods: bool = True) -> RunContext:
        config = RunConfiguration(steps=steps or [], run_pods=run_pods)
        return RunContext(config=config, vcs=repository, framework=flutter, native=pods)

    return factory
