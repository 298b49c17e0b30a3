"""
Team partitioner: shuffles a request's participants and renders the roster.
"""

import random
from typing import Optional, Protocol

from teams.types import Request, TeamSize


class RandomSource(Protocol):
    """Anything able to shuffle a list in place uniformly."""

    def shuffle(self, items: list[str]) -> None:
        ...


class SystemRandomSource:
    """Random source backed by random.Random (not cryptographically secure)."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def shuffle(self, items: list[str]) -> None:
        self._rng.shuffle(items)


def chunk(items: list[str], size: int) -> list[list[str]]:
    """Split items into consecutive slices of size, the last one may be shorter."""
    if size <= 0:
        raise ValueError("Chunk size must be positive")
    return [items[i:i + size] for i in range(0, len(items), size)]


def build_roster(request: Request, random_source: Optional[RandomSource] = None) -> list[list[str]]:
    """Shuffle a copy of the participants and split it into teams."""
    source = SystemRandomSource() if random_source is None else random_source
    shuffled = list(request.participants)
    source.shuffle(shuffled)
    return chunk(shuffled, request.team_size.value)


def format_roster(team_size: TeamSize, teams: list[list[str]]) -> str:
    lines = [f"-- **{team_size.title}** --\n"]
    for index, team in enumerate(teams, start=1):
        lines.append(f"**{index}**. {', '.join(team)}\n")
    return "".join(lines)


def create_teams(request: Request, random_source: Optional[RandomSource] = None) -> str:
    """
    Build the reply text for a team request.

    Args:
        request: Validated request
        random_source: Shuffle source, a fresh SystemRandomSource when omitted

    Returns:
        Header line naming the mode followed by one numbered line per team
    """
    return format_roster(request.team_size, build_roster(request, random_source))
