"""
Error types for the show command line tool.

Every failure an action can hit is turned into one of these classes at the
point where it happens, and reported by the CLI entry point as a single line.
"""


class ShowError(Exception):
    """Base class for all show errors."""

    # Fatal errors make the process exit with a failure status.
    fatal = True


class UnknownCommand(ShowError):
    """The requested command name is not registered."""

    fatal = False

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown command: {name}")


class UnsupportedPlatform(ShowError):
    """The command cannot run on the current operating system."""


class RemoteFetchFailed(ShowError):
    """A remote endpoint could not be reached or returned a bad response."""

    def __init__(self, url, reason):
        self.url = url
        self.reason = reason
        super().__init__(f"Request to {url} failed: {reason}")


class RemoteFieldMissing(ShowError):
    """The remote response did not carry the expected value."""

    fatal = False

    def __init__(self, field, message=None):
        self.field = field
        super().__init__(message or f"Remote response has no '{field}' value.")


class SubprocessSpawnFailed(ShowError):
    """A child process could not be started or was terminated abnormally."""

    def __init__(self, cmd_args, reason):
        self.cmd_args = list(cmd_args)
        self.reason = reason
        super().__init__(f"Run command '{' '.join(self.cmd_args)}' failed: {reason}")
