"""Defines the Command Line Interface (CLI) using Typer."""

from pathlib import Path

import structlog
import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from flutter_deps_manager.configuration.env import Settings
from flutter_deps_manager.configuration.models import StepName
from flutter_deps_manager.configuration.reconcile import reconcile_run_configuration
from flutter_deps_manager.exceptions import UpgradeError
from flutter_deps_manager.tools.cocoapods import CocoaPodsClient
from flutter_deps_manager.tools.flutter import FlutterClient
from flutter_deps_manager.tools.git import GitClient
from flutter_deps_manager.upgrade.context import RunContext
from flutter_deps_manager.upgrade.driver import run_upgrade_workflow
from flutter_deps_manager.utils.logging_config import configure_logging

load_dotenv()

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

typer_app = typer.Typer(pretty_exceptions_show_locals=False, add_completion=False)


@typer_app.command(name="upgrade")
def upgrade_cli(
    steps: Annotated[
        list[StepName] | None,
        Argument(
            help="Steps to run, in order. Defaults to: pod pub pub-major. The flutter-local step is experimental and only runs when named.",
            show_default=False,
        ),
    ] = None,
    no_pod: Annotated[bool, Option("--no-pod", envvar="NO_POD", help="Skip CocoaPods entirely, e.g. when not on macOS.")] = False,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Upgrade the app's dependencies, making one commit per step.

    \b
    Steps:
      pod            Update CocoaPods pods for the native sub-projects.
      flutter-local  Update pubspec.yaml to the locally installed Flutter.
      pub            Upgrade packages within the constraints in pubspec.yaml.
      pub-major      Upgrade packages past those constraints, as a draft commit.

    Every step needs a clean working tree, and stops with "No changes."
    when there is nothing to commit.
    """
    settings = Settings()
    configure_logging(debug=debug or settings.DEBUG)
    config = reconcile_run_configuration(cli_steps=steps, cli_no_pod=no_pod, settings=settings)
    logger.debug("Resolved run configuration", steps=[step.value for step in config.steps], run_pods=config.run_pods)

    try:
        git = GitClient.discover(Path.cwd(), git_command=settings.GIT_COMMAND)
        context = RunContext(
            config=config,
            vcs=git,
            framework=FlutterClient(git.root, flutter_command=settings.FLUTTER_COMMAND),
            native=CocoaPodsClient(git.root, pod_command=settings.POD_COMMAND),
        )
        run_upgrade_workflow(context)
    except UpgradeError as exc:
        typer.echo("", err=True)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc


if __name__ == "__main__":
    typer_app()
