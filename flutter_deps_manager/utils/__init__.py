"""Utility modules for shared functionality."""

from .constants import (
    DART_SDK_UPPER_BOUND,
    FLUTTER_VERSION_BANNER_PATTERN,
    MANIFEST_ENVIRONMENT_PATTERN,
    PROGRAM_NAME,
)

__all__ = [
    "DART_SDK_UPPER_BOUND",
    "FLUTTER_VERSION_BANNER_PATTERN",
    "MANIFEST_ENVIRONMENT_PATTERN",
    "PROGRAM_NAME",
]
