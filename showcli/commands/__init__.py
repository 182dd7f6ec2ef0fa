"""
Commands for show.
Importing this package registers every command, in listing order.
"""
from showcli.commands.remote import IpCommand, TimeCommand
from showcli.commands.system import (
    CalCommand,
    RouteCommand,
    NetworkCommand,
    ListJavaCommand,
    ListenTcpCommand,
    ListenUdpCommand,
)
from showcli.commands.install import (
    InstallBrewCommand,
    InstallJenvCommand,
    InstallPortsCommand,
    InstallSdkmanCommand,
    InstallDartCommand,
)
from showcli.commands.wifi import WifiInfoCommand, WifiScanCommand
