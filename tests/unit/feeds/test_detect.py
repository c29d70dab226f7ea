"""Tests for feed kind detection and parsing."""
from __future__ import annotations

import pytest
from loguru import logger

from basketball_boxscore.feeds.detect import (
    detect_feed_kind,
    match_source,
    parse_feed_kind,
)
from basketball_boxscore.types import FeedKind, UnknownFeedKindError


class TestDetectFeedKind:
    """Tests for detect_feed_kind."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (
                "https://data.nba.net/json/cms/noseason/game/20240101/0022300001/boxscore.json",
                FeedKind.NBA,
            ),
            (
                "https://live.euroleague.net/api/Boxscore?gamecode=1&seasoncode=E2023",
                FeedKind.EUROLEAGUE,
            ),
            ("https://example.com/boxscore.json", FeedKind.GENERIC),
            ("", FeedKind.GENERIC),
        ],
    )
    def test_detects(self, source: str, expected: FeedKind) -> None:
        assert detect_feed_kind(source) is expected

    def test_fallback_is_logged(self) -> None:
        """Falling back to generic should leave a warning."""
        messages: list[str] = []
        sink_id = logger.add(
            lambda msg: messages.append(msg.record["message"]), level="WARNING"
        )

        try:
            detect_feed_kind("inline")
        finally:
            logger.remove(sink_id)

        assert any("assuming generic" in message for message in messages)

    def test_match_source_returns_none_when_unknown(self) -> None:
        assert match_source("https://example.com") is None


class TestParseFeedKind:
    """Tests for parse_feed_kind."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("nba", FeedKind.NBA),
            ("NBA", FeedKind.NBA),
            (" Euroleague ", FeedKind.EUROLEAGUE),
            ("generic", FeedKind.GENERIC),
            (FeedKind.EUROLEAGUE, FeedKind.EUROLEAGUE),
        ],
    )
    def test_parses(self, value: str | FeedKind, expected: FeedKind) -> None:
        assert parse_feed_kind(value) is expected

    def test_unknown_raises(self) -> None:
        with pytest.raises(UnknownFeedKindError, match="expected one of"):
            parse_feed_kind("acb")
