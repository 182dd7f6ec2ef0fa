"""
Commands that install developer tools on macOS, or tell how to.
"""

from showcli.commands.base import Command, ShellCommand
from showcli.registry import register_command
from showcli.utils.output import success
from showcli.utils.platform_utils import MACOS_ONLY, require_macos

HOMEBREW_INSTALL_URL = "https://raw.githubusercontent.com/Homebrew/install/master/install"


@register_command
class InstallBrewCommand(ShellCommand):
    name = "install_brew"
    description = "Install brew"
    supported_platforms = MACOS_ONLY

    macos_args = ["sh", "-c", f'/usr/bin/ruby -e "$(curl -fsSL {HOMEBREW_INSTALL_URL})"']


@register_command
class InstallJenvCommand(ShellCommand):
    name = "install_jenv"
    description = "Install jenv"
    supported_platforms = MACOS_ONLY

    macos_args = ["sh", "-c", "curl -L -s get.jenv.io | bash"]


@register_command
class InstallPortsCommand(Command):
    """Point to the MacPorts installer page."""

    name = "install_ports"
    description = "Install ports"
    supported_platforms = MACOS_ONLY

    def execute(self, verbose):
        require_macos()
        success("Please access: https://www.macports.org/install.php")
        return 0


@register_command
class InstallSdkmanCommand(ShellCommand):
    name = "install_sdkman"
    description = "Install sdkman"
    supported_platforms = MACOS_ONLY

    macos_args = ["sh", "-c", 'curl -s "https://get.sdkman.io" | bash']


@register_command
class InstallDartCommand(Command):
    """Print the brew commands that install dart."""

    name = "install_dart"
    description = "Install dart"
    supported_platforms = MACOS_ONLY

    def execute(self, verbose):
        require_macos()
        success("Please run command:\n$ brew tap dart-lang/dart\n$ brew install dart")
        return 0
