"""Precondition checks run before an upgrade step mutates anything."""

import structlog

from flutter_deps_manager.exceptions import DirtyTreeError, ManifestDriftError, MissingToolError
from flutter_deps_manager.upgrade.context import RunContext

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def check_have_tool(context: RunContext) -> None:
    """Check that the native package manager is installed, unless it is disabled.

    Raises:
        MissingToolError: If the tool is enabled but not on PATH.
    """
    if not context.config.run_pods:
        return
    if not context.native.is_installed():
        raise MissingToolError(
            context.native.name,
            "This command requires CocoaPods, in order to keep the\n"
            "CocoaPods lockfiles in sync with the other dependencies.\n"
            "Install CocoaPods and try again on macOS, or pass --no-pod to skip it.",
        )


def check_no_uncommitted_or_untracked_changes(context: RunContext) -> None:
    """Check that the working tree is clean, counting untracked files.

    Raises:
        DirtyTreeError: If there is any tracked or untracked change.
    """
    vcs = context.vcs
    if vcs.has_no_uncommitted_changes() and not vcs.list_untracked_files():
        return
    status_summary = vcs.status_summary()
    logger.error("Working tree is not clean", status=status_summary)
    raise DirtyTreeError(status_summary)


def ensure_manifest_synced(context: RunContext) -> None:
    """Check that resolving dependencies leaves the tree unchanged.

    The result is remembered on the context, so this runs `flutter pub get`
    at most once per run.

    Raises:
        ManifestDriftError: If resolving dependencies changed any tracked file.
    """
    if context.manifest_known_clean:
        logger.debug("Manifest already known to be in sync")
        return
    context.framework.get_dependencies()
    if not context.vcs.has_no_uncommitted_changes():
        raise ManifestDriftError("flutter pub get", context.vcs.status_summary())
    context.manifest_known_clean = True
