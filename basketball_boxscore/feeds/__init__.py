"""Provider feed mappers.

Each supported feed kind has one mapper turning its raw JSON into the
canonical ``BoxScore``:

- NBA: ``map_nba_box_score``
- Euroleague: ``map_euroleague_box_score``
- Generic (already canonical): ``adopt_canonical``

Example:
    >>> from basketball_boxscore.feeds import normalize_box_score
    >>> box = normalize_box_score(payload, "euroleague")
    >>> box.is_live
    True
"""
from __future__ import annotations

from basketball_boxscore.config import get_settings
from basketball_boxscore.feeds.detect import (
    detect_feed_kind,
    match_source,
    parse_feed_kind,
)
from basketball_boxscore.feeds.euroleague import (
    map_euroleague_box_score,
    map_euroleague_player,
)
from basketball_boxscore.feeds.generic import adopt_canonical
from basketball_boxscore.feeds.nba import map_nba_box_score, map_nba_player
from basketball_boxscore.logging import get_logger
from basketball_boxscore.models import BoxScore
from basketball_boxscore.types import (
    FeedKind,
    FeedMapper,
    RawPayload,
    SourceId,
    UnknownFeedKindError,
)

logger = get_logger(__name__)

MAPPERS: dict[FeedKind, FeedMapper] = {
    FeedKind.NBA: map_nba_box_score,
    FeedKind.EUROLEAGUE: map_euroleague_box_score,
    FeedKind.GENERIC: adopt_canonical,
}


def get_mapper(feed_kind: FeedKind | str) -> FeedMapper:
    """Return the mapper registered for a feed kind."""
    return MAPPERS[parse_feed_kind(feed_kind)]


def normalize_box_score(
    raw: RawPayload,
    feed_kind: FeedKind | str = FeedKind.GENERIC,
) -> BoxScore:
    """Normalize a raw payload of a known feed kind.

    Args:
        raw: Decoded JSON payload.
        feed_kind: Schema the payload follows. Defaults to generic, i.e. the
            payload is already canonical.

    Returns:
        Canonical BoxScore.

    Raises:
        UnknownFeedKindError: If ``feed_kind`` is not a known feed.
        MalformedFeedError: If the payload does not match the feed schema.
    """
    kind = parse_feed_kind(feed_kind)
    logger.debug("Normalizing {} feed", kind.value)
    return MAPPERS[kind](raw)


def normalize_from_source(
    raw: RawPayload,
    source: SourceId,
    strict: bool | None = None,
) -> BoxScore:
    """Normalize a payload, inferring the feed kind from its source.

    Args:
        raw: Decoded JSON payload.
        source: Where the payload came from, typically its URL.
        strict: Reject unrecognised sources instead of assuming a generic
            payload. Defaults to the ``strict_detection`` setting.

    Raises:
        UnknownFeedKindError: In strict mode, if no provider matches.
        MalformedFeedError: If the payload does not match the feed schema.
    """
    if strict is None:
        strict = get_settings().strict_detection
    if strict and match_source(source) is None:
        raise UnknownFeedKindError(f"No known provider in source {source!r}")
    return normalize_box_score(raw, detect_feed_kind(source))


__all__ = [
    "MAPPERS",
    "adopt_canonical",
    "detect_feed_kind",
    "get_mapper",
    "map_euroleague_box_score",
    "map_euroleague_player",
    "map_nba_box_score",
    "map_nba_player",
    "match_source",
    "normalize_box_score",
    "normalize_from_source",
    "parse_feed_kind",
]
