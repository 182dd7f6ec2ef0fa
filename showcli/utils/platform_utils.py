"""
Platform detection for show commands.

The operating system is looked up on every call so that each command checks
the live system it is running on.
"""

import platform
from enum import Enum

from showcli.errors import UnsupportedPlatform

ONLY_MACOS_MESSAGE = "Only supports macOS."
NOT_LINUX_OR_MACOS_MESSAGE = "Not linux or macos."


class Platform(Enum):
    """Operating systems show knows how to work with."""

    LINUX = "Linux"
    MACOS = "macOS"


LINUX_AND_MACOS = (Platform.LINUX, Platform.MACOS)
MACOS_ONLY = (Platform.MACOS,)


def current_platform():
    """
    Detect the current operating system.

    Returns:
        Platform or None: The matching platform tag, or None for any other system
    """
    system = platform.system()
    if system == 'Darwin':
        return Platform.MACOS
    elif system == 'Linux':
        return Platform.LINUX
    return None


def is_macos():
    return current_platform() is Platform.MACOS


def require_macos():
    """Raise UnsupportedPlatform unless running on macOS."""
    if not is_macos():
        raise UnsupportedPlatform(ONLY_MACOS_MESSAGE)
    return Platform.MACOS


def require_linux_or_macos():
    """
    Raise UnsupportedPlatform unless running on Linux or macOS.

    Returns:
        Platform: The detected platform
    """
    current = current_platform()
    if current is None:
        raise UnsupportedPlatform(NOT_LINUX_OR_MACOS_MESSAGE)
    return current


def format_platforms(platforms):
    """Join platform tags for display, e.g. 'Linux, macOS'."""
    return ", ".join(p.value for p in platforms)
