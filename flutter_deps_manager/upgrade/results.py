"""Contains results of upgrade step execution."""

from dataclasses import dataclass
from enum import Enum

from flutter_deps_manager.configuration.models import StepName


class CommitOutcome(str, Enum):
    """Whether a step recorded a commit."""

    COMMITTED = "committed"
    NO_CHANGES = "no-changes"


@dataclass
class StepResult:
    """Result of running one upgrade step."""

    step: StepName
    outcome: CommitOutcome
    commit_message: str | None = None
    follow_up: str | None = None

    @property
    def committed(self) -> bool:
        """Whether the step created a commit."""
        return self.outcome is CommitOutcome.COMMITTED
