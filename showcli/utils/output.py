"""
Console output helpers.

Each helper prints a single line with a coloured status prefix.
"""

from colorama import init, Fore, Style

# Initialize colorama for cross-platform color support
init()

PREFIXES = {
    'SUCCESS': Fore.GREEN + "[OK   ]",
    'FAILURE': Fore.RED + "[FAIL ]",
    'INFORMATION': Fore.CYAN + "[INFO ]",
    'ERROR': Fore.RED + Style.BRIGHT + "[ERROR]",
}


def _emit(kind, message):
    print(f"{PREFIXES[kind]}{Style.RESET_ALL} {message}")


def success(message):
    """Print a success line."""
    _emit('SUCCESS', message)


def failure(message):
    """Print a failure line for a problem that does not abort the run."""
    _emit('FAILURE', message)


def information(message):
    """Print an informational line (used by verbose mode)."""
    _emit('INFORMATION', message)


def error(message):
    """Print an error line for a problem that aborts the run."""
    _emit('ERROR', message)
