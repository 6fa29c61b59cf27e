"""Read and rewrite the dependency manifest (pubspec.yaml) and inspect its lockfile."""

from pathlib import Path
from typing import Any

import structlog
from ruamel.yaml import YAMLError

from flutter_deps_manager.exceptions import ManifestFormatError
from flutter_deps_manager.upgrade.version import FlutterVersion
from flutter_deps_manager.utils.constants import (
    DART_SDK_UPPER_BOUND,
    DEPENDENCY_SECTIONS,
    LOCKFILE_TOOLCHAIN_LINE_PATTERN,
    MANIFEST_ENVIRONMENT_PATTERN,
    MANIFEST_FLUTTER_REVISION_PATTERN,
)
from flutter_deps_manager.utils.yaml import load_yaml_string

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def build_environment_constraints(version: FlutterVersion) -> str:
    """Build the `sdk:` and `flutter:` lines of the manifest's environment block."""
    return (
        f"  sdk: '>={version.dart_version} <{DART_SDK_UPPER_BOUND}'\n"
        f"  flutter: '>={version.flutter_version}'  # {version.flutter_revision}\n"
    )


def read_flutter_revision(manifest_text: str) -> str | None:
    """Return the Flutter commit hash recorded in the manifest's comment, if any."""
    match = MANIFEST_FLUTTER_REVISION_PATTERN.search(manifest_text)
    return match.group("revision") if match else None


def rewrite_environment_constraints(manifest_text: str, version: FlutterVersion) -> str:
    """Return the manifest text with the environment constraints set to `version`.

    Raises:
        ManifestFormatError: If the manifest has no `sdk:` line directly followed by a `flutter:` line.
    """
    # A lambda keeps backslashes in the replacement from being read as group references.
    new_text, count = MANIFEST_ENVIRONMENT_PATTERN.subn(lambda _: build_environment_constraints(version), manifest_text, count=1)
    if count == 0:
        raise ManifestFormatError(
            "Could not find the environment constraints to update. Expected two lines like:\n\n"
            "  sdk: '>=3.x <4.0.0'\n"
            "  flutter: '>=3.x'"
        )
    return new_text


def read_manifest_text(manifest_path: Path) -> str:
    """Read the manifest as UTF-8 text.

    Raises:
        ManifestFormatError: If the file is missing, unreadable, or not UTF-8.
    """
    try:
        return manifest_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestFormatError(f"Could not read {manifest_path}: {exc}") from exc


def update_manifest_file(manifest_path: Path, version: FlutterVersion) -> str | None:
    """Rewrite the manifest file in place for `version`.

    The rewritten text is parsed back as YAML before anything is written.

    Returns:
        str | None: The Flutter commit hash the manifest recorded before the edit, if any.

    Raises:
        ManifestFormatError: If the manifest cannot be read or rewritten, or would no longer parse.
    """
    original_text = read_manifest_text(manifest_path)
    previous_revision = read_flutter_revision(original_text)
    new_text = rewrite_environment_constraints(original_text, version)
    try:
        environment = load_yaml_string(new_text).get("environment") or {}
    except (YAMLError, ValueError) as exc:
        raise ManifestFormatError(f"{manifest_path} would no longer parse after the update: {exc}") from exc
    if str(environment.get("flutter")) != f">={version.flutter_version}":
        raise ManifestFormatError(f"The rewritten lines in {manifest_path} are not the `environment:` block")
    manifest_path.write_text(new_text, encoding="utf-8")
    logger.info(
        "Updated manifest environment constraints",
        manifest_path=str(manifest_path),
        flutter_version=version.flutter_version,
        dart_version=version.dart_version,
        previous_revision=previous_revision,
    )
    return previous_revision


def lockfile_diff_has_library_changes(diff_text: str) -> bool:
    """Return True if a lockfile diff changes more than the toolchain's own `sdks:` entries."""
    for line in diff_text.splitlines():
        if line.startswith(("+++", "---")) or not line.startswith(("+", "-")):
            continue
        if not LOCKFILE_TOOLCHAIN_LINE_PATTERN.match(line):
            return True
    return False


def _dependency_constraints(manifest: dict[str, Any]) -> dict[str, Any]:
    constraints: dict[str, Any] = {}
    for section in DEPENDENCY_SECTIONS:
        for name, constraint in (manifest.get(section) or {}).items():
            constraints[f"{section}:{name}"] = constraint
    return constraints


def changed_dependency_constraints(old_manifest_text: str, new_manifest_text: str) -> list[str]:
    """List the packages whose declared constraints differ between two manifest versions.

    Packages added or removed count as changed. Names are sorted and deduplicated
    across the dependency sections.
    """
    old = _dependency_constraints(load_yaml_string(old_manifest_text))
    new = _dependency_constraints(load_yaml_string(new_manifest_text))
    changed = {key.split(":", 1)[1] for key in old.keys() | new.keys() if old.get(key) != new.get(key)}
    return sorted(changed)
