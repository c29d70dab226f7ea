"""Shared pytest fixtures for box score tests.

This module contains fixtures used across multiple test modules:
- Paths to the JSON payload fixtures
- Decoded NBA, Euroleague and canonical payloads
- Configuration fixtures (test settings, isolated log directory)

Example:
    def test_something(nba_final_payload):
        box = map_nba_box_score(nba_final_payload)
        assert box.is_finished
"""
from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Generator

import pytest
from loguru import logger

from basketball_boxscore.config import Settings, get_settings, reset_settings


# =============================================================================
# Paths
# =============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


def _load(name: str) -> dict[str, Any]:
    path = Path(__file__).parent / "fixtures" / name
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Keep log files out of the working tree and reset the settings singleton."""
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    reset_settings()
    yield
    reset_settings()
    # Drop sinks bound to streams the CLI runner has since closed
    logger.remove()


@pytest.fixture
def test_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Provide settings with debug logging."""
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    reset_settings()
    settings = get_settings()
    settings.ensure_directories()
    return settings


# =============================================================================
# Sample Payloads
# =============================================================================


@pytest.fixture
def nba_final_payload() -> dict[str, Any]:
    """Finished NBA game (game_status 3)."""
    return _load("nba_boxscore_final.json")


@pytest.fixture
def nba_pregame_payload() -> dict[str, Any]:
    """NBA game that has not started (game_status 1)."""
    return _load("nba_boxscore_pregame.json")


@pytest.fixture
def nba_live_payload(nba_final_payload: dict[str, Any]) -> dict[str, Any]:
    """The final game rewound to status 2 with two home players on court."""
    payload = copy.deepcopy(nba_final_payload)
    game = payload["sports_content"]["game"]
    game["period_time"]["game_status"] = "2"
    for player in game["home"]["players"]["player"][:2]:
        player["on_court"] = "1"
    return payload


@pytest.fixture
def euroleague_payload() -> dict[str, Any]:
    """Live Euroleague game."""
    return _load("euroleague_boxscore_live.json")


@pytest.fixture
def canonical_payload() -> dict[str, Any]:
    """Inline payload already in canonical shape, with extra keys."""
    return _load("canonical_boxscore.json")


@pytest.fixture
def nba_player_record(nba_final_payload: dict[str, Any]) -> dict[str, Any]:
    """First home player of the finished NBA game (Jayson Tatum)."""
    return copy.deepcopy(
        nba_final_payload["sports_content"]["game"]["home"]["players"]["player"][0]
    )


@pytest.fixture
def euroleague_player_record(euroleague_payload: dict[str, Any]) -> dict[str, Any]:
    """First home player of the Euroleague game (Sergio Llull)."""
    return copy.deepcopy(euroleague_payload["Stats"][0]["PlayersStats"][0])


# =============================================================================
# Marker Helpers
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
