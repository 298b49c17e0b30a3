"""
Base class and data structures for command system.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from config import BotConfig


@dataclass
class CommandContext:
    """Context passed to commands during execution."""
    username: str
    raw_message: str
    voice_room: Optional[str] = None
    voice_participants: Optional[list[str]] = None  # None when not in a voice room
    config: BotConfig = field(default_factory=BotConfig)


@dataclass
class CommandResponse:
    """Response returned by command execution."""
    success: bool
    message: str
    response_type: str = "info"  # "info", "error"


class CommandBase(ABC):
    """Abstract base class for all commands."""
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Command name (without prefix)."""
        pass
    
    @property
    @abstractmethod
    def description(self) -> str:
        """Command description for help text."""
        pass
    
    @property
    @abstractmethod
    def usage(self) -> str:
        """Command usage format."""
        pass
    
    @abstractmethod
    def validate(self, args: list[str]) -> tuple[bool, str]:
        """
        Validate command arguments.
        
        Returns:
            Tuple of (is_valid, error_message)
        """
        pass
    
    @abstractmethod
    async def execute(self, context: CommandContext, args: list[str]) -> CommandResponse:
        """
        Execute the command.
        
        Args:
            context: Command execution context
            args: Parsed arguments
            
        Returns:
            CommandResponse with execution result
        """
        pass
