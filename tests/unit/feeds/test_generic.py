"""Tests for canonical pass-through adoption."""
from __future__ import annotations

from typing import Any

import pytest

from basketball_boxscore.feeds.generic import adopt_canonical
from basketball_boxscore.types import MalformedFeedError


class TestAdoptCanonical:
    """Tests for adopt_canonical."""

    def test_adopts_fields_as_given(self, canonical_payload: dict[str, Any]) -> None:
        box = adopt_canonical(canonical_payload)

        assert box.is_finished is True
        assert box.home_team.name == "Unicaja Malaga"
        assert box.home_team.players[0].pir == 10
        assert box.visitor_team.players[0].plus_minus == -6
        assert box.visitor_team.totals is not None
        assert box.visitor_team.totals.plus_minus is None

    def test_extra_keys_are_ignored(self, canonical_payload: dict[str, Any]) -> None:
        """Keys outside the canonical model do not leak into it."""
        box = adopt_canonical(canonical_payload)
        dumped = box.model_dump(by_alias=True)

        assert "src" not in dumped
        assert "league" not in dumped
        assert set(dumped) == {"homeTeam", "visitorTeam", "isLive", "isFinished"}

    def test_round_trips_dumped_model(self, canonical_payload: dict[str, Any]) -> None:
        box = adopt_canonical(canonical_payload)

        assert adopt_canonical(box.model_dump(by_alias=True)) == box

    def test_invalid_line_raises_with_path(
        self, canonical_payload: dict[str, Any]
    ) -> None:
        canonical_payload["homeTeam"]["players"][0]["points"] = "eight"

        with pytest.raises(MalformedFeedError) as exc_info:
            adopt_canonical(canonical_payload)

        assert exc_info.value.path == "homeTeam.players.0.points"

    def test_missing_team_raises(self, canonical_payload: dict[str, Any]) -> None:
        del canonical_payload["visitorTeam"]

        with pytest.raises(MalformedFeedError) as exc_info:
            adopt_canonical(canonical_payload)

        assert exc_info.value.path == "visitorTeam"

    def test_non_object_raises(self) -> None:
        with pytest.raises(MalformedFeedError, match="JSON object"):
            adopt_canonical([])  # type: ignore[arg-type]

    def test_started_game_without_totals_raises(
        self, canonical_payload: dict[str, Any]
    ) -> None:
        del canonical_payload["visitorTeam"]["totals"]

        with pytest.raises(MalformedFeedError, match="visitorTeam.totals is required"):
            adopt_canonical(canonical_payload)

    def test_pregame_without_totals_is_accepted(
        self, canonical_payload: dict[str, Any]
    ) -> None:
        canonical_payload["isFinished"] = False
        for side in ("homeTeam", "visitorTeam"):
            canonical_payload[side]["totals"] = None
            canonical_payload[side]["players"] = []

        box = adopt_canonical(canonical_payload)

        assert box.is_pregame
        assert box.home_team.totals is None
