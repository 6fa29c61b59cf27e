"""Build commit messages and operator follow-up text for the upgrade steps."""

from pydantic import BaseModel

from flutter_deps_manager.utils.constants import FLUTTER_REPOSITORY_URL, PROGRAM_NAME
from flutter_deps_manager.utils.templates import load_bundled_template, render_template_with_model


class FlutterLocalCommitFields(BaseModel):
    """Fields for the commit message of the flutter-local step."""

    flutter_version: str
    flutter_revision: str
    previous_revision: str | None = None
    libraries_changed: bool = False
    flutter_repository_url: str = FLUTTER_REPOSITORY_URL
    program_name: str = PROGRAM_NAME


class MajorUpgradeCommitFields(BaseModel):
    """Fields for the draft commit message of the pub-major step."""

    program_name: str = PROGRAM_NAME


class MajorUpgradeChecklistFields(BaseModel):
    """Fields for the review checklist printed after the pub-major step."""

    changed_packages: list[str] = []
    pods_refreshed: bool = True
    native_project_directories: list[str] = ["ios", "macos"]


def native_refresh_commit_message() -> str:
    """Commit message for the pod step."""
    return f"deps: Update CocoaPods pods ({PROGRAM_NAME} pod)"


def constrained_upgrade_commit_message() -> str:
    """Commit message for the pub step."""
    return f"deps: Upgrade packages within constraints ({PROGRAM_NAME} pub)"


def flutter_local_commit_message(fields: FlutterLocalCommitFields) -> str:
    """Commit message for the flutter-local step, with TODO lines left for review."""
    return render_template_with_model(fields, load_bundled_template("flutter_local_commit.j2")).strip()


def flutter_local_follow_up() -> str:
    """Instructions printed after the flutter-local step commits."""
    return (
        "The commit message has TODO lines. Review the Flutter changes it links to,\n"
        "run the app and the tests, then reword the commit with `git commit --amend`."
    )


def major_upgrade_commit_message(fields: MajorUpgradeCommitFields | None = None) -> str:
    """Draft commit message for the pub-major step."""
    return render_template_with_model(fields or MajorUpgradeCommitFields(), load_bundled_template("major_upgrade_commit.j2")).strip()


def major_upgrade_checklist(fields: MajorUpgradeChecklistFields) -> str:
    """Review checklist printed after the pub-major step commits."""
    return render_template_with_model(fields, load_bundled_template("major_upgrade_checklist.j2")).rstrip()


def stale_native_lockfiles_warning(native_project_directories: list[str]) -> str:
    """Warning shown when packages changed but CocoaPods was skipped."""
    directories = " and ".join(native_project_directories)
    return (
        "warning: Skipped `pod update` because CocoaPods is disabled (--no-pod / NO_POD).\n"
        f"The Podfile.lock files in {directories} may now be out of date with the upgraded packages."
    )
