"""Derived-value helpers shared by the feed mappers and downstream consumers.

Every function here is pure and raises ``ValueError`` on input it cannot
represent; mappers translate those into ``MalformedFeedError`` with the
offending field path.

Example:
    >>> from basketball_boxscore.derived import (
    ...     format_euroleague_player_name,
    ...     shooting_percentage,
    ... )
    >>> shooting_percentage(1, 3)
    33.3
    >>> format_euroleague_player_name("JAMES, LEBRON")
    'Lebron James'
"""

from __future__ import annotations

import math

EUROLEAGUE_NAME_SEPARATOR = ", "


def shooting_percentage(made: int, attempted: int) -> float:
    """Return the shooting percentage rounded to one decimal.

    A player with no makes gets 0, including the 0-for-0 case. Halves round
    up.

    Args:
        made: Shots made.
        attempted: Shots attempted.

    Returns:
        Percentage in the 0-100 range.

    Raises:
        ValueError: If either count is negative or made exceeds attempted.
    """
    if made < 0 or attempted < 0:
        raise ValueError(f"Shot counts cannot be negative ({made}/{attempted})")
    if made > attempted:
        raise ValueError(f"Made shots exceed attempts ({made}/{attempted})")
    if made == 0:
        return 0.0
    return math.floor(made / attempted * 100 * 10 + 0.5) / 10


def format_minutes(minutes: int | str, seconds: int | str) -> str:
    """Join minutes and seconds as a zero-padded ``MM:SS`` clock string."""
    mins = int(minutes)
    secs = int(seconds)
    if mins < 0 or not 0 <= secs < 60:
        raise ValueError(f"Invalid playing time {minutes}:{seconds}")
    return f"{mins:02d}:{secs:02d}"


def parse_clock(value: str) -> str:
    """Normalize an ``M:SS`` style clock string to ``MM:SS``.

    Raises:
        ValueError: If the value is not a ``minutes:seconds`` pair.
    """
    minutes, sep, seconds = value.strip().partition(":")
    if not sep or not minutes.isdigit() or not seconds.isdigit():
        raise ValueError(f"Expected MM:SS, got {value!r}")
    return format_minutes(minutes, seconds)


def capitalize_words(text: str) -> str:
    """Lower-case ``text`` and capitalize each space-delimited word."""
    return " ".join(word.capitalize() for word in text.lower().split(" "))


def format_euroleague_team_name(text: str) -> str:
    """Format an all-caps Euroleague team name, e.g. ``REAL MADRID``."""
    return capitalize_words(text.strip())


def format_euroleague_player_name(text: str) -> str:
    """Render a ``LAST, FIRST`` Euroleague name as ``First Last``.

    Raises:
        ValueError: If the ``", "`` separator is missing.
    """
    last, sep, first = text.partition(EUROLEAGUE_NAME_SEPARATOR)
    if not sep or not last.strip() or not first.strip():
        raise ValueError(f"Expected 'LAST, FIRST', got {text!r}")
    return f"{capitalize_words(first.strip())} {capitalize_words(last.strip())}"
