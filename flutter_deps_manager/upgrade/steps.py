"""The upgrade steps.

Each step runs its stages in order: check preconditions, mutate the
project, see whether anything changed, and commit. A step either commits
everything it changed or leaves the tree as it found it; when a mutating
command changes nothing, the step reports "No changes." and stops.
"""

import structlog
import typer

from flutter_deps_manager.configuration.models import StepName
from flutter_deps_manager.exceptions import UpgradeError
from flutter_deps_manager.upgrade.checks import (
    check_have_tool,
    check_no_uncommitted_or_untracked_changes,
    ensure_manifest_synced,
)
from flutter_deps_manager.upgrade.context import RunContext
from flutter_deps_manager.upgrade.manifest import (
    changed_dependency_constraints,
    lockfile_diff_has_library_changes,
    read_manifest_text,
    update_manifest_file,
)
from flutter_deps_manager.upgrade.messages import (
    FlutterLocalCommitFields,
    MajorUpgradeChecklistFields,
    constrained_upgrade_commit_message,
    flutter_local_commit_message,
    flutter_local_follow_up,
    major_upgrade_checklist,
    major_upgrade_commit_message,
    native_refresh_commit_message,
    stale_native_lockfiles_warning,
)
from flutter_deps_manager.upgrade.results import CommitOutcome, StepResult
from flutter_deps_manager.upgrade.version import parse_flutter_version_banner

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def _no_changes(context: RunContext, step: StepName, command: str) -> StepResult | None:
    """Return a no-changes result if the tree is clean, else None."""
    if not context.vcs.has_no_uncommitted_changes():
        return None
    typer.echo(f"{command}: No changes.")
    logger.info("No changes", step=step.value)
    return StepResult(step=step, outcome=CommitOutcome.NO_CHANGES)


def _commit(context: RunContext, step: StepName, message: str, follow_up: str | None = None) -> StepResult:
    context.vcs.commit_all(message)
    return StepResult(step=step, outcome=CommitOutcome.COMMITTED, commit_message=message, follow_up=follow_up)


def refresh_native_dependencies(context: RunContext) -> bool:
    """Run the native package manager for each native sub-project.

    Returns:
        bool: False if the native package manager is disabled and nothing ran.
    """
    if not context.config.run_pods:
        return False
    for directory in context.config.native_project_directories:
        context.native.update(directory)
    return True


def upgrade_native(context: RunContext) -> StepResult:
    """Update CocoaPods pods in every native sub-project (the pod step)."""
    check_have_tool(context)
    check_no_uncommitted_or_untracked_changes(context)
    ensure_manifest_synced(context)

    refresh_native_dependencies(context)

    no_changes = _no_changes(context, StepName.POD, "pod update")
    if no_changes is not None:
        return no_changes
    return _commit(context, StepName.POD, native_refresh_commit_message())


def upgrade_flutter_local(context: RunContext) -> StepResult:
    """Raise the SDK bounds in the manifest to the locally installed Flutter (the flutter-local step).

    There is no manifest sync check here: this step exists to catch the
    manifest up with a local Flutter that is ahead of it.
    """
    check_no_uncommitted_or_untracked_changes(context)

    version = parse_flutter_version_banner(context.framework.version_banner())
    manifest_path = context.vcs.root / context.config.manifest_path
    original_text = read_manifest_text(manifest_path)
    previous_revision = update_manifest_file(manifest_path, version)

    no_changes = _no_changes(context, StepName.FLUTTER_LOCAL, "flutter-local")
    if no_changes is not None:
        return no_changes

    try:
        context.framework.get_dependencies()
    except UpgradeError:
        manifest_path.write_text(original_text, encoding="utf-8")
        logger.warning("Restored manifest after failed dependency resolution", manifest_path=str(manifest_path))
        raise
    libraries_changed = lockfile_diff_has_library_changes(context.vcs.diff(context.config.lockfile_path))
    logger.info(
        "Updated Flutter constraints",
        flutter_version=version.flutter_version,
        libraries_changed=libraries_changed,
    )
    message = flutter_local_commit_message(
        FlutterLocalCommitFields(
            flutter_version=version.flutter_version,
            flutter_revision=version.flutter_revision,
            previous_revision=previous_revision,
            libraries_changed=libraries_changed,
        )
    )
    return _commit(context, StepName.FLUTTER_LOCAL, message, follow_up=flutter_local_follow_up())


def upgrade_pub(context: RunContext) -> StepResult:
    """Upgrade packages within the manifest's constraints (the pub step)."""
    check_have_tool(context)
    check_no_uncommitted_or_untracked_changes(context)
    ensure_manifest_synced(context)

    context.framework.upgrade_dependencies()
    no_changes = _no_changes(context, StepName.PUB, "pub upgrade")
    if no_changes is not None:
        return no_changes

    if not refresh_native_dependencies(context):
        warning = stale_native_lockfiles_warning(context.config.native_project_directories)
        typer.echo(warning, err=True)
        logger.warning("Native lockfiles may be stale", step=StepName.PUB.value)
    return _commit(context, StepName.PUB, constrained_upgrade_commit_message())


def upgrade_pub_major(context: RunContext) -> StepResult:
    """Upgrade packages past the manifest's constraints, as a draft commit (the pub-major step).

    The commit message is a draft with TODO placeholders; the returned
    result carries a checklist for the operator to finish it.
    """
    check_have_tool(context)
    check_no_uncommitted_or_untracked_changes(context)
    ensure_manifest_synced(context)

    context.framework.upgrade_major_versions()
    no_changes = _no_changes(context, StepName.PUB_MAJOR, "pub upgrade --major-versions")
    if no_changes is not None:
        return no_changes

    pods_refreshed = refresh_native_dependencies(context)
    if not pods_refreshed:
        warning = stale_native_lockfiles_warning(context.config.native_project_directories)
        typer.echo(warning, err=True)
        logger.warning("Native lockfiles may be stale", step=StepName.PUB_MAJOR.value)

    changed_packages: list[str] = []
    committed_manifest = context.vcs.show_committed_file(context.config.manifest_path)
    manifest_path = context.vcs.root / context.config.manifest_path
    if committed_manifest is not None and manifest_path.exists():
        changed_packages = changed_dependency_constraints(committed_manifest, read_manifest_text(manifest_path))
    logger.info("Upgraded packages past constraints", changed_packages=changed_packages)

    checklist = major_upgrade_checklist(
        MajorUpgradeChecklistFields(
            changed_packages=changed_packages,
            pods_refreshed=pods_refreshed,
            native_project_directories=context.config.native_project_directories,
        )
    )
    return _commit(context, StepName.PUB_MAJOR, major_upgrade_commit_message(), follow_up=checklist)
