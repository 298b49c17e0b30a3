"""
Command registry: maps command names to command classes.
"""

from typing import Type
from command.base import CommandBase


class CommandFactory:
    """Registry for creating and listing commands."""
    
    _commands: dict[str, Type[CommandBase]] = {}
    
    @classmethod
    def register(cls, command_class: Type[CommandBase]) -> None:
        """Register a command class under its (lowercase) name."""
        cls._commands[command_class().name.lower()] = command_class
    
    @classmethod
    def is_registered(cls, command_name: str) -> bool:
        return command_name.lower() in cls._commands
    
    @classmethod
    def create(cls, command_name: str) -> CommandBase:
        """
        Create a fresh command instance by name.
        
        Raises:
            KeyError: If command not found
        """
        if not cls.is_registered(command_name):
            raise KeyError(f"Unknown command: {command_name}")
        return cls._commands[command_name.lower()]()
    
    @classmethod
    def get_all_commands(cls) -> dict[str, CommandBase]:
        """Get an instance of every registered command."""
        return {name: cmd_class() for name, cmd_class in cls._commands.items()}
    
    @classmethod
    def help_entries(cls) -> list[tuple[str, str]]:
        """(usage, description) pairs sorted by command name."""
        commands = cls.get_all_commands()
        return [(commands[name].usage, commands[name].description) for name in sorted(commands)]


def register_builtin_commands():
    """Register built-in commands with lazy imports to avoid circular imports."""
    from command.commands.help import HelpCommand
    from command.commands.squad import SquadCommand
    
    for command_class in (HelpCommand, SquadCommand):
        CommandFactory.register(command_class)
