"""
Parser turning a raw team command into a request.
"""

import logging

from teams.types import Help, ParseError, ParseErrorKind, ParseOutcome, Request, TeamSize

logger = logging.getLogger(__name__)

EXCLUDE_PREFIX = "!"

HELP_TEXT = (
    "I will fetch all users in voice chat and randomize teams.\n"
    " !sq <duo|trio|squad> !<username to exclude>\n"
    "Exclude nicks are lowercase."
)


def parse(
    raw_text: str,
    present_participants: list[str],
    *,
    case_sensitive: bool = True
) -> ParseOutcome:
    """
    Parse a team command.

    Args:
        raw_text: Full message content, keyword token included
        present_participants: Names currently in the requester's voice room
        case_sensitive: Compare exclusions with plain equality when True,
            casefolded otherwise

    Returns:
        Help when only the keyword was given, a Request on success,
        a ParseError otherwise

    Example:
        parse("!sq duo !B", ["A", "B", "C"]) -> Request(DUO, ("A", "C"))
    """
    args = raw_text.split(" ")

    if len(args) == 1:
        return Help(HELP_TEXT)

    if len(args) < 2:
        return ParseError(ParseErrorKind.INVALID_COMMAND)

    team_size = TeamSize.from_keyword(args[1])
    if team_size is None:
        return ParseError(ParseErrorKind.INVALID_TEAM_SETUP, detail=args[1])

    excluded = [arg[len(EXCLUDE_PREFIX):] for arg in args[1:] if arg.startswith(EXCLUDE_PREFIX)]
    logger.info(f"Excluded users: {excluded}")
    logger.info(f"Voice users: {present_participants}")

    participants = [
        name for name in present_participants
        if not _is_excluded(name, excluded, case_sensitive)
    ]

    extra = [arg for arg in args[2:] if not arg.startswith(EXCLUDE_PREFIX)]
    logger.info(f"Extra users: {extra}")

    participants.extend(extra)
    return Request(team_size=team_size, participants=tuple(participants))


def _is_excluded(name: str, excluded: list[str], case_sensitive: bool) -> bool:
    if case_sensitive:
        return name in excluded
    folded = name.casefold()
    return any(folded == other.casefold() for other in excluded)
