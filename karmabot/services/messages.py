"""
karmabot.services.messages — User-facing Message Composer
==========================================================

Turns detector, parser and ranking output into chat text.  No I/O.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from karmabot.constants import MAX_TARGET_LENGTH, points
from karmabot.engine.ranking import KarmaTarget

UNKNOWN_COMMAND_MESSAGE = (
    "I'm sorry, that command is unrecognized. "
    "Try the `help` command to learn which commands are supported"
)

EMPTY_RANKING_MESSAGE = "Nobody has any karma yet."

TARGET_TOO_LONG_MESSAGE = (
    f"That's a mouthful! Karma can only go to things up to {MAX_TARGET_LENGTH} characters long."
)

ENCOURAGEMENT: list[str] = [
    "Hey, don't be so hard on yourself!",
    "I'm sure you don't deserve that!",
    "Chin up! Don't punish yourself too hard!",
]

CHASTISEMENT: list[str] = [
    "Who do you think you are, trying to give yourself points!?",
    "Do you think this is some kind of game?",
    "No way, that's cheating! Shame on you!",
    "UNACCEPTABLE!!!",
    "You can't just give _yourself_ points!",
    "You think you _deserve_ those points?",
]


@dataclass(frozen=True, slots=True)
class SelfTargetingResult:
    """Reply to a self-targeting attempt and the karma it actually costs/earns."""

    message: str
    karma_change: int | None = None


def karma_change_message(is_buzzkill: bool, amount: int, total: int, target: str) -> str:
    value = abs(amount)
    if is_buzzkill:
        verb = "adding" if amount > 0 else "subtracting"
        return (
            f"Buzzkill Mode™️ activated! Only {verb} {value} {points(value)}.\n"
            f"{target} has {total} {points(total)}"
        )
    verb = "got" if amount > 0 else "lost"
    return f"{target} {verb} {value} {points(value)}, and now has {total}"


def self_targeting_message(
    amount: int,
    target: str,
    rand: Callable[[], float] = random.random,
    chance: float = 0.15,
) -> SelfTargetingResult:
    """Scold (or console) someone who tried to change their own karma.

    The first ``rand()`` picks the line; the second decides whether the
    attempt earns a 1-point encouragement award or hubris penalty.
    """
    if amount < 0:
        message = ENCOURAGEMENT[int(rand() * len(ENCOURAGEMENT))]
        if rand() < chance:
            return SelfTargetingResult(
                f"{message} {target} gets 1 point, for encouragement!", 1
            )
    else:
        message = CHASTISEMENT[int(rand() * len(CHASTISEMENT))]
        if rand() < chance:
            return SelfTargetingResult(f"{message} {target} loses 1 point, for hubris!", -1)
    return SelfTargetingResult(message)


def ranking_message(targets: Iterable[KarmaTarget]) -> str:
    return "\n".join(f"{t.name}: {t.total} {points(t.total)}" for t in targets)


def help_message(bot_name: str) -> str:
    return (
        f"{bot_name} helps you keep score of things people (and things) do.\n"
        "\n"
        "*Giving karma*\n"
        "• `thing++` adds a point, `thing--` takes one away.\n"
        "• Add more signs for more points: `thing++++` adds 3 (4 at most).\n"
        '• Quote multi-word things: `"chocolate cake"++`.\n'
        "• You can't give karma to yourself.\n"
        "\n"
        "*Commands* (mention me first)\n"
        "• `top` / `top <n>` shows the highest scores.\n"
        "• `bottom` / `bottom <n>` shows the lowest scores.\n"
        "• `help` shows this message."
    )
