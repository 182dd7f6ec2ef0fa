"""
Commands that ask a remote JSON endpoint for a value.
"""

from showcli.commands.base import Command
from showcli.errors import RemoteFieldMissing
from showcli.registry import register_command
from showcli.utils.http_utils import fetch_json_field
from showcli.utils.output import failure, success
from showcli.utils.platform_utils import LINUX_AND_MACOS, require_linux_or_macos
from showcli.utils.time_utils import format_local_time


@register_command
class IpCommand(Command):
    """Show the public IP address this machine is seen from."""

    name = "ip"
    description = "Show public IP"
    supported_platforms = LINUX_AND_MACOS

    endpoint = "https://hatter.ink/ip/ip.jsonp"

    def execute(self, verbose):
        require_linux_or_macos()
        ip = fetch_json_field(self.endpoint, "ip", verbose, missing_message="Get IP failed.")
        success(f"Your IP address is: {ip}")
        return 0


@register_command
class TimeCommand(Command):
    """Show the remote time next to the local time."""

    name = "time"
    description = "Show time"
    supported_platforms = LINUX_AND_MACOS

    endpoint = "https://hatter.ink/time/time.jsonp"

    def execute(self, verbose):
        require_linux_or_macos()
        try:
            remote_time = fetch_json_field(
                self.endpoint, "datetime", verbose, missing_message="Get remote time failed."
            )
        except RemoteFieldMissing as e:
            # Local time is still worth showing.
            failure(str(e))
        else:
            success(f"Remote time is: {remote_time}")

        success(f"Local  time is: {format_local_time()}")
        return 0
