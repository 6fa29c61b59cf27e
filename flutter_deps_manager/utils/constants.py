"""Shared constants used across the application."""

import re

PROGRAM_NAME = "flutter-deps-upgrade"
"""Name of the command line entry point, used in banners and commit messages."""

# Version Banner Constants
# ------------------------

FLUTTER_VERSION_BANNER_PATTERN = re.compile(
    r"^Flutter (?P<flutter_version>\S+) .*\n"
    r"^Framework\b.*\brevision (?P<flutter_revision>[0-9a-f]+)\b.*\n"
    r"(?:^.*\n)*?"
    r"^Tools\b.*\bDart (?P<dart_version>3\.\S+)(?: \(build (?P<dart_build>\S+)\))?",
    re.MULTILINE,
)
"""Pattern to match `flutter --version` output. Leading lines are allowed; Dart must be 3.x."""

DART_SDK_UPPER_BOUND = "4.0.0"
"""Exclusive upper bound written for the Dart SDK, one major version above the accepted 3.x line."""

# Manifest Constants
# ------------------

MANIFEST_ENVIRONMENT_PATTERN = re.compile(r"^  sdk: .*\n  flutter: .*\n", re.MULTILINE)
"""Pattern to match the two `environment:` lines rewritten by the flutter-local step."""

MANIFEST_FLUTTER_REVISION_PATTERN = re.compile(r"^  flutter: .*#\s*(?P<revision>[0-9a-f]{7,40})\s*$", re.MULTILINE)
"""Pattern to pull the Flutter commit hash back out of the manifest's traceability comment."""

LOCKFILE_TOOLCHAIN_LINE_PATTERN = re.compile(r"^[-+]\s+(?:dart|flutter): \"[^\"]*\"\s*$")
"""Pattern to match changed lines in the lockfile's `sdks:` section."""

DEPENDENCY_SECTIONS = ("dependencies", "dev_dependencies", "dependency_overrides")
"""Manifest sections that declare package constraints."""

FLUTTER_REPOSITORY_URL = "https://github.com/flutter/flutter"
"""Base URL used to build links to Flutter commits."""
