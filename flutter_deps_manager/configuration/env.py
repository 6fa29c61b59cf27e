"""Pydantic Settings model for application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False
    NO_POD: bool = False

    # External tool commands. These may hold more than one word, for
    # example "fvm flutter".
    FLUTTER_COMMAND: str = "flutter"
    POD_COMMAND: str = "pod"
    GIT_COMMAND: str = "git"

    # Project layout, relative to the repository root
    NATIVE_PROJECT_DIRECTORIES: list[str] = ["ios", "macos"]
    MANIFEST_PATH: Path = Path("pubspec.yaml")
    LOCKFILE_PATH: Path = Path("pubspec.lock")
