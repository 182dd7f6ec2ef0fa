"""
Registry of available commands and the dispatcher that runs them.

Commands register themselves with the ``register_command`` decorator when
their module is imported (see ``showcli.config``). Registration order is the
order commands are listed in.
"""

from types import MappingProxyType

from showcli.errors import UnknownCommand

# Command name that lists every registered command instead of running one.
LIST_ALL_TOKEN = ":::"

COMMANDS = {}


def register_command(command_class):
    """
    Register a command class in the global registry.

    Args:
        command_class: A subclass of Command to register

    Returns:
        The command class (to allow use as a decorator)

    Raises:
        ValueError: If the name is missing, reserved or already registered
    """
    name = command_class.name
    if not name:
        raise ValueError(f"{command_class.__name__} does not define a command name")
    if name == LIST_ALL_TOKEN:
        raise ValueError(f"'{LIST_ALL_TOKEN}' is reserved for listing commands")
    if name in COMMANDS:
        raise ValueError(f"Command '{name}' is already registered by {COMMANDS[name].__name__}")
    COMMANDS[name] = command_class
    return command_class


def get_all_commands():
    """
    Get all registered commands.

    Returns:
        Mapping: Read-only view mapping command names to command classes
    """
    return MappingProxyType(COMMANDS)


def find_command(name):
    """
    Look up a command class by exact name.

    Raises:
        UnknownCommand: If no command has that name
    """
    command_class = COMMANDS.get(name)
    if command_class is None:
        raise UnknownCommand(name)
    return command_class


def list_all():
    """
    Yield one display line per registered command, in registry order.
    """
    for command_class in COMMANDS.values():
        yield f"{command_class.name} - {command_class.description}  [{command_class.platforms_label()}]"


def dispatch(name, verbose=False):
    """
    Run the command called ``name``, or list all commands for LIST_ALL_TOKEN.

    Args:
        name (str): Command name
        verbose (bool): Passed through to the command

    Returns:
        int: Exit code from the command

    Raises:
        UnknownCommand: If the name is not registered
        ShowError: Whatever the command itself raises
    """
    if name == LIST_ALL_TOKEN:
        for line in list_all():
            print(line)
        return 0

    command = find_command(name)()
    return command.execute(verbose)
