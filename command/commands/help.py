"""
Help command - list every registered command.
"""

from command.base import CommandBase, CommandContext, CommandResponse
from command.factory import CommandFactory


class HelpCommand(CommandBase):
    """List registered commands with their usage."""
    
    @property
    def name(self) -> str:
        return "help"
    
    @property
    def description(self) -> str:
        return "Show the available bot commands"
    
    @property
    def usage(self) -> str:
        return "!help"
    
    def validate(self, args: list[str]) -> tuple[bool, str]:
        if args:
            return False, f"The {self.usage} command takes no arguments"
        return True, ""
    
    async def execute(self, context: CommandContext, args: list[str]) -> CommandResponse:
        lines = ["=== Bot Commands ==="]
        for usage, description in CommandFactory.help_entries():
            lines.append(f"\n{usage}\n  {description}")
        
        return CommandResponse(success=True, message="\n".join(lines))
