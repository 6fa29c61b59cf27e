"""Parse the version banner printed by `flutter --version`."""

import structlog
from pydantic import BaseModel

from flutter_deps_manager.exceptions import UnrecognizedVersionOutputError
from flutter_deps_manager.utils.constants import FLUTTER_VERSION_BANNER_PATTERN

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class FlutterVersion(BaseModel):
    """Versions of the locally installed Flutter toolchain."""

    flutter_version: str
    flutter_revision: str
    dart_version: str


def parse_flutter_version_banner(output: str) -> FlutterVersion:
    """Parse `flutter --version` output into a FlutterVersion.

    The banner looks like::

        Flutter 3.24.0-1.0.pre.560 • channel main • https://github.com/flutter/flutter.git
        Framework • revision d67e3e38f0 (2 days ago) • 2024-08-14 10:51:03 -0700
        Engine • revision 0f8d3aa5c2
        Tools • Dart 3.6.0 (build 3.6.0-142.0.dev) • DevTools 2.38.0

    Informational lines before the first `Flutter` line are skipped. When
    Dart reports a build version in parentheses, that more precise version
    is used. Only Dart 3.x is accepted.

    Raises:
        UnrecognizedVersionOutputError: If the output does not have this shape.
    """
    match = FLUTTER_VERSION_BANNER_PATTERN.search(output)
    if match is None:
        logger.error("Unrecognized flutter --version output", output=output)
        raise UnrecognizedVersionOutputError(output)
    version = FlutterVersion(
        flutter_version=match.group("flutter_version"),
        flutter_revision=match.group("flutter_revision"),
        dart_version=match.group("dart_build") or match.group("dart_version"),
    )
    logger.debug("Parsed flutter --version output", **version.model_dump())
    return version
