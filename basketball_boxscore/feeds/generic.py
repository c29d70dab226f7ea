"""Pass-through for payloads already in canonical shape.

Inline data supplied by an embedding page is adopted field for field, with
no renaming or derivation. Only the canonical ``BoxScore`` fields are taken;
anything else on the payload (``src``, ``league`` and the like) is dropped so
it cannot leak into the model.
"""
from __future__ import annotations

from basketball_boxscore.feeds.base import validate_at
from basketball_boxscore.logging import get_logger
from basketball_boxscore.models import BoxScore
from basketball_boxscore.types import MalformedFeedError, RawPayload

logger = get_logger(__name__)

CANONICAL_KEYS = frozenset(
    {
        "homeTeam",
        "home_team",
        "visitorTeam",
        "visitor_team",
        "isLive",
        "is_live",
        "isFinished",
        "is_finished",
    }
)


def adopt_canonical(raw: RawPayload) -> BoxScore:
    """Adopt a canonical-shaped payload as a BoxScore.

    Args:
        raw: Mapping with ``homeTeam``, ``visitorTeam``, ``isLive`` and
            ``isFinished`` (snake_case names are accepted too).

    Returns:
        Validated BoxScore.

    Raises:
        MalformedFeedError: If the payload is not in canonical shape.
    """
    if not isinstance(raw, dict):
        raise MalformedFeedError("", f"Expected a JSON object, got {type(raw).__name__}")

    ignored = sorted(str(key) for key in raw if key not in CANONICAL_KEYS)
    if ignored:
        logger.debug("Ignoring non-canonical keys on generic payload: {}", ignored)

    return validate_at(BoxScore, raw)
