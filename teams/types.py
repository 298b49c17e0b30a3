"""
Data types shared by the command parser and the team partitioner.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class TeamSize(int, Enum):
    """Team setup requested by the user. The value is the team size."""

    DUO = 2
    TRIO = 3
    SQUAD = 4

    @property
    def keyword(self) -> str:
        return self.name.lower()

    @property
    def title(self) -> str:
        return f"{self.name.capitalize()}s"

    @classmethod
    def from_keyword(cls, token: str) -> Optional["TeamSize"]:
        """Match a keyword case-insensitively, None if unknown."""
        for size in cls:
            if size.keyword == token.lower():
                return size
        return None


@dataclass(frozen=True)
class Request:
    """A validated team request."""
    team_size: TeamSize
    participants: tuple[str, ...]

    def __str__(self) -> str:
        return f"Team Setup: {self.team_size.title} Users: {list(self.participants)}"


@dataclass(frozen=True)
class Help:
    """Usage text returned when the command has no arguments."""
    text: str


class ParseErrorKind(str, Enum):
    INVALID_COMMAND = "invalid_command"
    INVALID_TEAM_SETUP = "invalid_team_setup"


@dataclass(frozen=True)
class ParseError:
    """A command that could not be turned into a request."""
    kind: ParseErrorKind
    detail: Optional[str] = None  # offending token for INVALID_TEAM_SETUP

    def __str__(self) -> str:
        if self.detail is None:
            return self.kind.value
        return f"{self.kind.value}: {self.detail}"


ParseOutcome = Union[Help, Request, ParseError]
