"""Reconcile CLI arguments and environment settings into a run configuration."""

from collections.abc import Sequence

from flutter_deps_manager.configuration.env import Settings
from flutter_deps_manager.configuration.models import RunConfiguration, StepName

# The flutter-local step is experimental, so it only runs when asked for.
DEFAULT_STEPS: tuple[StepName, ...] = (StepName.POD, StepName.PUB, StepName.PUB_MAJOR)


def resolve_steps(requested_steps: Sequence[StepName] | None) -> list[StepName]:
    """Return the steps to run, in order.

    Steps named on the command line run exactly as given, repeats included.
    With no steps named, the default list is used.
    """
    if requested_steps:
        return list(requested_steps)
    return list(DEFAULT_STEPS)


def reconcile_run_configuration(
    cli_steps: Sequence[StepName] | None,
    cli_no_pod: bool,
    settings: Settings,
) -> RunConfiguration:
    """Build the run configuration from the command line and the environment.

    Args:
        cli_steps: Step names given on the command line, if any.
        cli_no_pod: Whether --no-pod was passed.
        settings: Environment settings.

    Returns:
        RunConfiguration: The resolved, read-only configuration for this run.
    """
    return RunConfiguration(
        steps=resolve_steps(cli_steps),
        run_pods=not (cli_no_pod or settings.NO_POD),
        native_project_directories=list(settings.NATIVE_PROJECT_DIRECTORIES),
        manifest_path=settings.MANIFEST_PATH,
        lockfile_path=settings.LOCKFILE_PATH,
    )
