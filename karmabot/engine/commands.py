"""
karmabot.engine.commands — Bot Command Parser
==============================================

Parses text already known to be addressed to the bot
(``<@BOT> top 5``).  Unrecognized input is an ``UNKNOWN`` command, never an
exception.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = ["BotCommand", "BotCommandType", "parse_bot_command"]


class BotCommandType(enum.StrEnum):
    TOP = "TOP"
    TOP_N = "TOP_N"
    BOTTOM = "BOTTOM"
    BOTTOM_N = "BOTTOM_N"
    HELP = "HELP"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True, slots=True)
class BotCommand:
    type: BotCommandType
    payload: int | None = None


_RANK_COMMANDS: dict[str, tuple[BotCommandType, BotCommandType]] = {
    "top": (BotCommandType.TOP, BotCommandType.TOP_N),
    "bottom": (BotCommandType.BOTTOM, BotCommandType.BOTTOM_N),
}


def _parse_count(raw: str) -> int | None:
    try:
        count = int(raw)
    except ValueError:
        return None
    return count if count > 0 else None


def parse_bot_command(text: str) -> BotCommand:
    """Parse ``<@BOT> <command> [arg]`` into a :class:`BotCommand`.

    The first whitespace-separated segment (the bot mention) is discarded.
    """
    segments = (text or "").split()[1:]
    if not segments:
        return BotCommand(BotCommandType.UNKNOWN)

    name = segments[0]
    if name in _RANK_COMMANDS:
        bare, sized = _RANK_COMMANDS[name]
        if len(segments) < 2:
            return BotCommand(bare)
        count = _parse_count(segments[1])
        if count is None:
            return BotCommand(BotCommandType.UNKNOWN)
        return BotCommand(sized, count)

    if name == "help":
        return BotCommand(BotCommandType.HELP)

    return BotCommand(BotCommandType.UNKNOWN)
