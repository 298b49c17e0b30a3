"""
Command router and parser for message handling.
"""

DEFAULT_PREFIX = "!"


class CommandParser:
    """Parse message to extract command and arguments."""
    
    @staticmethod
    def is_command(message: str, prefix: str = DEFAULT_PREFIX) -> bool:
        """Check if message is a command (starts with the prefix)."""
        return message.strip().startswith(prefix)
    
    @staticmethod
    def parse(message: str, prefix: str = DEFAULT_PREFIX) -> tuple[str, list[str]]:
        """
        Parse command message into command name and arguments.
        
        Args:
            message: Message starting with the prefix
            prefix: Command prefix
            
        Returns:
            Tuple of (command_name, args_list)
            
        Example:
            "!sq duo !bob alice" -> ("sq", ["duo", "!bob", "alice"])
            "!help" -> ("help", [])
        """
        command_text = message.strip()[len(prefix):].strip()
        
        if not command_text:
            return "", []
        
        parts = command_text.split(maxsplit=1)
        command_name = parts[0].lower()
        
        args = []
        if len(parts) > 1:
            args = parts[1].split()
        
        return command_name, args
