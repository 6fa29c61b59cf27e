"""Contains exceptions raised while running upgrade steps.

Every error here is fatal to the run. The message of each exception is
written for the operator and usually says how to fix the environment
before trying again.
"""


class UpgradeError(Exception):
    """Base class for errors that stop an upgrade run."""

    pass


class MissingToolError(UpgradeError):
    """Raised when a required external tool is not installed."""

    def __init__(self, tool: str, remediation: str) -> None:
        """Initializes the exception with the missing tool and how to get it."""
        super().__init__(f"No `{tool}` command found.\n\n{remediation}")
        self.tool = tool


class DirtyTreeError(UpgradeError):
    """Raised when a step starts from a working tree with changes."""

    def __init__(self, status_summary: str) -> None:
        """Initializes the exception with the offending `git status` listing."""
        super().__init__(
            "There are uncommitted or untracked changes in the working tree:\n\n"
            f"{status_summary}\n\n"
            "Commit or stash them, then try again."
        )
        self.status_summary = status_summary


class ManifestDriftError(UpgradeError):
    """Raised when resolving dependencies changes files before any upgrade."""

    def __init__(self, command: str, status_summary: str) -> None:
        """Initializes the exception with the resolving command and its changes."""
        super().__init__(
            f"There were changes caused by running `{command}`:\n\n"
            f"{status_summary}\n\n"
            "Typically this means your local Flutter install is newer\n"
            "than the version reflected in pubspec.lock.\n"
            "Upgrade Flutter in the project first (see the `flutter-local` step),\n"
            "and then try this command again."
        )
        self.command = command
        self.status_summary = status_summary


class UnrecognizedVersionOutputError(UpgradeError):
    """Raised when the Flutter version banner does not have the expected shape."""

    def __init__(self, output: str) -> None:
        """Initializes the exception with the raw captured banner."""
        super().__init__(f"Unexpected output from `flutter --version`:\n\n{output}")
        self.output = output


class ManifestFormatError(UpgradeError):
    """Raised when the manifest does not have the lines we know how to rewrite."""

    pass


class InternalStepError(UpgradeError):
    """Raised when the pipeline is asked to run a step it has no executor for."""

    def __init__(self, step: str) -> None:
        """Initializes the exception with the unknown step name."""
        super().__init__(f"Internal error: unknown step {step!r}")
        self.step = step


class ExternalCommandError(UpgradeError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, stderr: str | None = None) -> None:
        """Initializes the exception with the failed command and its exit status."""
        message = f"Command `{' '.join(command)}` failed with exit status {returncode}"
        if stderr:
            message += f":\n\n{stderr.rstrip()}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
