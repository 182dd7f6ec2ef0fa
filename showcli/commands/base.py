"""
Command base classes for show.
Defines the interface that all commands should implement.
"""

from abc import ABC, abstractmethod

from showcli.utils.platform_utils import (
    Platform,
    format_platforms,
    require_linux_or_macos,
    require_macos,
)
from showcli.utils.run_utils import run_command


class Command(ABC):
    """
    Abstract base class for all show commands.

    Subclasses set ``name``, ``description`` and ``supported_platforms`` as
    class attributes. ``supported_platforms`` is what the listing shows; the
    command still checks the live operating system itself in ``execute``.
    """

    name = None
    description = None
    supported_platforms = ()

    @classmethod
    def platforms_label(cls):
        """
        Returns:
            str: Comma-joined names of the declared platforms
        """
        return format_platforms(cls.supported_platforms)

    @abstractmethod
    def execute(self, verbose):
        """
        Run the command.

        Args:
            verbose (bool): Print raw responses and command lines

        Returns:
            int: Exit code (0 for success)
        """
        pass


class ShellCommand(Command):
    """
    A command that runs one OS utility.

    Set ``macos_args`` and, for commands that also work on Linux,
    ``linux_args``. A command without ``linux_args`` only runs on macOS.
    """

    linux_args = None
    macos_args = None

    def resolve_args(self):
        """
        Pick the argument list for the live operating system.

        Raises:
            UnsupportedPlatform: If the current system is not handled
        """
        if self.linux_args is None:
            require_macos()
            return self.macos_args

        if require_linux_or_macos() is Platform.LINUX:
            return self.linux_args
        return self.macos_args

    def execute(self, verbose):
        return run_command(self.resolve_args(), verbose)
