"""
Wi-Fi commands backed by the macOS airport utility.
"""

from showcli.commands.base import ShellCommand
from showcli.registry import register_command
from showcli.utils.platform_utils import MACOS_ONLY

AIRPORT = "/System/Library/PrivateFrameworks/Apple80211.framework/Versions/Current/Resources/airport"


@register_command
class WifiInfoCommand(ShellCommand):
    """Show the current Wi-Fi connection."""

    name = "wifi_info"
    description = "Show wifi info"
    supported_platforms = MACOS_ONLY

    macos_args = [AIRPORT, "-I"]


@register_command
class WifiScanCommand(ShellCommand):
    """Scan for nearby Wi-Fi networks."""

    name = "wifi_scan"
    description = "Show wifi scan"
    supported_platforms = MACOS_ONLY

    macos_args = [AIRPORT, "-s"]
