"""Feed kind resolution.

Callers should pass an explicit ``FeedKind``. ``detect_feed_kind`` exists for
callers that only know where the payload came from; it matches on known
provider hosts and falls back to ``FeedKind.GENERIC``, logging the fallback.
"""
from __future__ import annotations

from basketball_boxscore.logging import WARN, get_logger
from basketball_boxscore.types import FeedKind, SourceId, UnknownFeedKindError

logger = get_logger(__name__)

# Checked in order; first match wins
SOURCE_MARKERS: tuple[tuple[str, FeedKind], ...] = (
    ("nba.net", FeedKind.NBA),
    ("euroleague.net", FeedKind.EUROLEAGUE),
)


def match_source(source: SourceId) -> FeedKind | None:
    """Return the provider whose marker appears in ``source``, if any."""
    for marker, kind in SOURCE_MARKERS:
        if marker in source:
            return kind
    return None


def detect_feed_kind(source: SourceId) -> FeedKind:
    """Classify a source identifier (usually a URL) into a feed kind.

    Never fails: anything unrecognised is treated as a generic payload.

    Example:
        >>> detect_feed_kind("https://data.nba.net/json/cms/noseason/game/1/boxscore.json")
        <FeedKind.NBA: 'nba'>
    """
    kind = match_source(source)
    if kind is None:
        logger.warning(
            f"{WARN} No known provider in source {source!r}, assuming generic feed"
        )
        return FeedKind.GENERIC
    return kind


def parse_feed_kind(value: str | FeedKind) -> FeedKind:
    """Resolve an explicit feed kind selector such as ``"nba"``.

    Raises:
        UnknownFeedKindError: If the value names no known feed kind.
    """
    if isinstance(value, FeedKind):
        return value
    try:
        return FeedKind(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(kind.value for kind in FeedKind)
        raise UnknownFeedKindError(
            f"Unknown feed kind {value!r}, expected one of: {choices}"
        ) from exc
