"""
Running external OS utilities.
"""

import subprocess

from showcli.errors import SubprocessSpawnFailed
from showcli.utils.output import information


def run_command(cmd_args, verbose=False):
    """
    Run a command synchronously, sharing this process's stdin/stdout/stderr.

    Args:
        cmd_args (list): Program followed by its arguments
        verbose (bool): Print the command line before running it

    Returns:
        int: 0 once the child has exited

    Raises:
        SubprocessSpawnFailed: If the program could not be started or was
            killed by a signal
    """
    if verbose:
        information(f"Run command: {' '.join(cmd_args)}")

    try:
        completed = subprocess.run(list(cmd_args))
    except OSError as e:
        raise SubprocessSpawnFailed(cmd_args, e.strerror or str(e)) from e

    # A negative return code means the child was terminated by a signal.
    if completed.returncode < 0:
        raise SubprocessSpawnFailed(cmd_args, f"terminated by signal {-completed.returncode}")

    return 0
