"""Orchestrates an upgrade run: each configured step, in order."""

import time
from collections.abc import Callable

import structlog
import typer

from flutter_deps_manager.configuration.models import StepName
from flutter_deps_manager.exceptions import InternalStepError
from flutter_deps_manager.upgrade.context import RunContext
from flutter_deps_manager.upgrade.results import StepResult
from flutter_deps_manager.upgrade.steps import upgrade_flutter_local, upgrade_native, upgrade_pub, upgrade_pub_major
from flutter_deps_manager.utils.constants import PROGRAM_NAME

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

StepExecutor = Callable[[RunContext], StepResult]

STEP_EXECUTORS: dict[StepName, StepExecutor] = {
    StepName.POD: upgrade_native,
    StepName.FLUTTER_LOCAL: upgrade_flutter_local,
    StepName.PUB: upgrade_pub,
    StepName.PUB_MAJOR: upgrade_pub_major,
}


def run_step(context: RunContext, step: StepName) -> StepResult:
    """Run a single step.

    Raises:
        InternalStepError: If there is no executor for `step`.
    """
    executor = STEP_EXECUTORS.get(step)
    if executor is None:
        raise InternalStepError(str(step))
    return executor(context)


def run_upgrade_workflow(context: RunContext) -> list[StepResult]:
    """Run every configured step in order, stopping at the first failure.

    A banner is printed before each step, and any follow-up instructions a
    step returns are printed right after it.
    """
    results: list[StepResult] = []
    for step in context.config.steps:
        step_name = step.value if isinstance(step, StepName) else str(step)
        typer.echo("")
        typer.echo(f"======== {PROGRAM_NAME} {step_name}")
        start_time = time.time()
        result = run_step(context, step)
        logger.info(
            "Finished step",
            step=step_name,
            outcome=result.outcome.value,
            duration=round(time.time() - start_time, 2),
        )
        if result.follow_up:
            typer.echo("")
            typer.echo(result.follow_up)
        results.append(result)
    return results
