"""Basketball box score normalization.

Turns NBA and Euroleague box score feeds, or inline payloads already in
canonical form, into one provider-independent ``BoxScore`` model.

Example:
    >>> from basketball_boxscore import FeedKind, normalize_box_score
    >>> box = normalize_box_score(payload, FeedKind.NBA)
    >>> print(box.home_team.name, box.home_team.score)
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Basketball Boxscore Team"

# Public API exports
from basketball_boxscore.config import Settings, get_settings
from basketball_boxscore.derived import shooting_percentage
from basketball_boxscore.feeds import (
    adopt_canonical,
    detect_feed_kind,
    map_euroleague_box_score,
    map_nba_box_score,
    normalize_box_score,
    normalize_from_source,
    parse_feed_kind,
)
from basketball_boxscore.models import BoxScore, PlayerStats, TeamResult
from basketball_boxscore.types import (
    BoxScoreError,
    FeedKind,
    MalformedFeedError,
    UnknownFeedKindError,
)

__all__ = [
    "BoxScore",
    "BoxScoreError",
    "FeedKind",
    "MalformedFeedError",
    "PlayerStats",
    "Settings",
    "TeamResult",
    "UnknownFeedKindError",
    "__author__",
    "__version__",
    "adopt_canonical",
    "detect_feed_kind",
    "get_settings",
    "map_euroleague_box_score",
    "map_nba_box_score",
    "normalize_box_score",
    "normalize_from_source",
    "parse_feed_kind",
    "shooting_percentage",
]
