"""
Team randomizer core.
Parses team commands and splits participants into shuffled teams.
"""

from teams.types import Help, ParseError, ParseErrorKind, ParseOutcome, Request, TeamSize
from teams.parser import HELP_TEXT, parse
from teams.partitioner import RandomSource, SystemRandomSource, build_roster, chunk, create_teams, format_roster

__all__ = [
    'HELP_TEXT',
    'Help',
    'ParseError',
    'ParseErrorKind',
    'ParseOutcome',
    'RandomSource',
    'Request',
    'SystemRandomSource',
    'TeamSize',
    'build_roster',
    'chunk',
    'create_teams',
    'format_roster',
    'parse',
]
