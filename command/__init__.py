"""
Command system for the team bot.
Provides base command class, factory, parser, and command implementations.
"""

from command.base import CommandBase, CommandContext, CommandResponse
from command.factory import CommandFactory
from command.router import CommandParser

__all__ = ['CommandBase', 'CommandContext', 'CommandResponse', 'CommandFactory', 'CommandParser']
