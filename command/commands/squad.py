"""
Squad command - split the requester's voice room into random teams.
"""

import logging
from typing import Optional

from command.base import CommandBase, CommandContext, CommandResponse
from teams import Help, ParseError, Request, RandomSource, create_teams, parse

logger = logging.getLogger(__name__)

NOT_IN_VOICE_MESSAGE = "You need to join a voice room first."


class SquadCommand(CommandBase):
    """Randomize teams from the members of the requester's voice room."""
    
    def __init__(self, random_source: Optional[RandomSource] = None):
        self.random_source = random_source
    
    @property
    def name(self) -> str:
        return "sq"
    
    @property
    def description(self) -> str:
        return "Split your voice room into random teams"
    
    @property
    def usage(self) -> str:
        return "!sq <duo|trio|squad> [!username to exclude] [extra username]\nExamples:\n  !sq duo\n  !sq squad !bob\n  !sq trio !bob carol"
    
    def validate(self, args: list[str]) -> tuple[bool, str]:
        """Arguments are checked by the team parser so user errors get the fallback reply."""
        return True, ""
    
    async def execute(self, context: CommandContext, args: list[str]) -> CommandResponse:
        """Parse the raw message and build the roster."""
        try:
            logger.info(
                f"Author: {context.username} Msg: {context.raw_message!r} Voice room: {context.voice_room}"
            )
            
            present = context.voice_participants
            outcome = parse(
                context.raw_message.strip(),
                present or [],
                case_sensitive=context.config.exclude_case_sensitive
            )
            
            if isinstance(outcome, Help):
                return CommandResponse(
                    success=True,
                    message=outcome.text,
                    response_type="info"
                )
            
            if present is None:
                return CommandResponse(
                    success=False,
                    message=NOT_IN_VOICE_MESSAGE,
                    response_type="error"
                )
            
            if isinstance(outcome, ParseError):
                logger.error(f"Failed to parse team command from {context.username}: {outcome}")
                return CommandResponse(
                    success=False,
                    message=context.config.fallback_message,
                    response_type="error"
                )
            
            if isinstance(outcome, Request):
                logger.info(str(outcome))
                return CommandResponse(
                    success=True,
                    message=create_teams(outcome, self.random_source),
                    response_type="info"
                )
            
            raise TypeError(f"Unexpected parse outcome: {outcome!r}")
        
        except Exception as e:
            logger.error(f"Error executing squad command: {e}")
            return CommandResponse(
                success=False,
                message=f"Error creating teams: {str(e)}",
                response_type="error"
            )
