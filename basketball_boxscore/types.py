"""Type definitions, enums, protocols and exceptions.

This module defines the feed kinds, game status, the mapper protocol and the
exception hierarchy shared by every feed mapper.

Example:
    >>> from basketball_boxscore.types import FeedKind, MalformedFeedError
    >>> FeedKind("euroleague")
    <FeedKind.EUROLEAGUE: 'euroleague'>
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from basketball_boxscore.models import BoxScore

# =============================================================================
# Type Aliases
# =============================================================================

RawPayload = dict[str, Any]
FieldPath = str
SourceId = str


# =============================================================================
# Enums
# =============================================================================


class FeedKind(str, Enum):
    """Upstream schema a raw payload follows."""

    NBA = "nba"
    EUROLEAGUE = "euroleague"
    GENERIC = "generic"


class GameStatus(Enum):
    """Tri-state game status reported by the NBA feed."""

    PRE = 1
    LIVE = 2
    FINAL = 3

    @property
    def is_live(self) -> bool:
        return self is GameStatus.LIVE

    @property
    def is_finished(self) -> bool:
        return self is GameStatus.FINAL


# =============================================================================
# Protocols (Interfaces)
# =============================================================================


class FeedMapper(Protocol):
    """Callable converting one provider payload into the canonical model."""

    def __call__(self, raw: RawPayload) -> BoxScore:
        """Map a decoded JSON payload to a BoxScore."""
        ...


# =============================================================================
# Exceptions
# =============================================================================


class BoxScoreError(Exception):
    """Base exception for box score normalization errors."""


class MalformedFeedError(BoxScoreError):
    """Raw payload is missing a required field or carries an invalid value.

    Attributes:
        path: Dotted path of the offending field within the payload.
        reason: Human readable description of the problem.
    """

    def __init__(self, path: FieldPath, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path or '<root>'}: {reason}")


class UnknownFeedKindError(BoxScoreError):
    """Feed kind selector could not be resolved."""
