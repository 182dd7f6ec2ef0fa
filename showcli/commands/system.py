"""
Commands that show system and network information using OS utilities.
"""

from showcli.commands.base import ShellCommand
from showcli.registry import register_command
from showcli.utils.platform_utils import LINUX_AND_MACOS, MACOS_ONLY


@register_command
class CalCommand(ShellCommand):
    name = "cal"
    description = "Show calendar"
    supported_platforms = LINUX_AND_MACOS

    linux_args = ["cal", "-3"]
    macos_args = ["cal", "-3"]


@register_command
class RouteCommand(ShellCommand):
    name = "route"
    description = "Show route"
    supported_platforms = LINUX_AND_MACOS

    linux_args = ["netstat", "-nr"]
    macos_args = ["netstat", "-nr"]


@register_command
class NetworkCommand(ShellCommand):
    """List hardware network ports."""

    name = "network"
    description = "Show network"
    supported_platforms = MACOS_ONLY

    macos_args = ["networksetup", "-listallhardwareports"]


@register_command
class ListJavaCommand(ShellCommand):
    """List installed JDKs."""

    name = "list_java"
    description = "Show java list"
    supported_platforms = MACOS_ONLY

    macos_args = ["/usr/libexec/java_home", "-V"]


@register_command
class ListenTcpCommand(ShellCommand):
    """List listening TCP sockets."""

    name = "listen_tcp"
    description = "Show tcp listen"
    supported_platforms = LINUX_AND_MACOS

    linux_args = ["netstat", "-ltnp"]
    macos_args = ["lsof", "-iTCP", "-sTCP:LISTEN", "-n", "-P"]


@register_command
class ListenUdpCommand(ShellCommand):
    """List UDP sockets."""

    name = "listen_udp"
    description = "Show udp listen"
    supported_platforms = LINUX_AND_MACOS

    linux_args = ["netstat", "-lunp"]
    macos_args = ["lsof", "-iUDP", "-n", "-P"]
