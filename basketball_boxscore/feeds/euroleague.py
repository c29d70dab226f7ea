"""Euroleague feed mapper.

Maps the Euroleague live box score document into the canonical ``BoxScore``.
The feed only distinguishes live from not-live, so a game that has not
started yet reports as finished; that two-state model is kept as delivered.

Payload layout::

    Live                          bool
    Stats[0]                      home team
    Stats[1]                      visitor team
    Stats[i].Team                 upper-case team name
    Stats[i].PlayersStats[]       player lines, Player is "LAST, FIRST"
    Stats[i].tmr                  team rebounds (not credited to a player)
    Stats[i].totr                 team totals

Example:
    >>> from basketball_boxscore.feeds.euroleague import map_euroleague_box_score
    >>> box = map_euroleague_box_score(payload)
    >>> box.home_team.name
    'Real Madrid'
"""
from __future__ import annotations

from typing import Any

from pydantic import Field

from basketball_boxscore.derived import (
    format_euroleague_player_name,
    format_euroleague_team_name,
    parse_clock,
)
from basketball_boxscore.feeds.base import (
    OptionalStatInt,
    OptionalStr,
    RawSchema,
    StatInt,
    join_path,
    validate_at,
)
from basketball_boxscore.logging import get_logger
from basketball_boxscore.models import TOTALS_NAME, BoxScore, PlayerStats, TeamResult
from basketball_boxscore.types import FieldPath, MalformedFeedError, RawPayload

logger = get_logger(__name__)

# Minutes value for rostered players who did not play
DID_NOT_PLAY = "DNP"


# =============================================================================
# Input schema
# =============================================================================


class EuroleagueStatLine(RawSchema):
    """One entry of ``PlayersStats``, or a ``totr`` team envelope."""

    player: OptionalStr = Field(default=None, alias="Player")
    dorsal: OptionalStr = Field(default=None, alias="Dorsal")
    is_starter: OptionalStatInt = Field(default=None, alias="IsStarter")
    is_playing: OptionalStatInt = Field(default=None, alias="IsPlaying")
    minutes: OptionalStr = Field(default=None, alias="Minutes")

    points: StatInt = Field(alias="Points")
    fgm2: StatInt = Field(alias="FieldGoalsMade2")
    fga2: StatInt = Field(alias="FieldGoalsAttempted2")
    fgm3: StatInt = Field(alias="FieldGoalsMade3")
    fga3: StatInt = Field(alias="FieldGoalsAttempted3")
    ftm: StatInt = Field(alias="FreeThrowsMade")
    fta: StatInt = Field(alias="FreeThrowsAttempted")
    off_rebounds: StatInt = Field(alias="OffensiveRebounds")
    def_rebounds: StatInt = Field(alias="DefensiveRebounds")
    assists: StatInt = Field(alias="Assistances")
    steals: StatInt = Field(alias="Steals")
    turnovers: StatInt = Field(alias="Turnovers")
    blocks_favour: StatInt = Field(alias="BlocksFavour")
    blocks_against: OptionalStatInt = Field(default=None, alias="BlocksAgainst")
    fouls_commited: StatInt = Field(alias="FoulsCommited")
    fouls_received: OptionalStatInt = Field(default=None, alias="FoulsReceived")
    valuation: OptionalStatInt = Field(default=None, alias="Valuation")


class EuroleagueTeamRebounds(RawSchema):
    total_rebounds: OptionalStatInt = Field(default=None, alias="TotalRebounds")


class EuroleagueTeamStats(RawSchema):
    team: str = Field(alias="Team")
    players_stats: list[dict[str, Any]] = Field(alias="PlayersStats")
    tmr: EuroleagueTeamRebounds | None = None
    totr: dict[str, Any]


class EuroleaguePayload(RawSchema):
    live: bool = Field(alias="Live")
    stats: list[dict[str, Any]] = Field(alias="Stats", min_length=2, max_length=2)


# =============================================================================
# Mapping
# =============================================================================


def _playing_time(line: EuroleagueStatLine, path: FieldPath) -> str | None:
    if line.minutes is None or line.minutes.upper() == DID_NOT_PLAY:
        return None
    try:
        return parse_clock(line.minutes)
    except ValueError as exc:
        raise MalformedFeedError(join_path(path, "Minutes"), str(exc)) from exc


def _player_name(line: EuroleagueStatLine, path: FieldPath) -> str:
    if line.player is None:
        return TOTALS_NAME
    try:
        return format_euroleague_player_name(line.player)
    except ValueError as exc:
        raise MalformedFeedError(join_path(path, "Player"), str(exc)) from exc


def map_euroleague_player(
    raw: RawPayload,
    path: FieldPath = "",
    team_rebounds: int = 0,
) -> PlayerStats:
    """Map one Euroleague stat line to PlayerStats.

    Args:
        raw: Decoded ``PlayersStats`` entry or ``totr`` envelope.
        path: Location of the record, used in error messages.
        team_rebounds: Rebounds credited to the team rather than a player;
            added to ``rebounds`` only.

    Returns:
        Canonical PlayerStats. Lines without ``Player`` are totals.

    Raises:
        MalformedFeedError: If a stat is missing or invalid, or the name is
            not in ``LAST, FIRST`` form.
    """
    line = validate_at(EuroleagueStatLine, raw, path)
    name = _player_name(line, path)

    return validate_at(
        PlayerStats,
        {
            "name": name,
            "jersey_number": None if name == TOTALS_NAME else line.dorsal,
            "is_starter": line.is_starter == 1,
            "is_playing": line.is_playing == 1,
            "minutes": _playing_time(line, path),
            "points": line.points,
            "fgm": line.fgm2 + line.fgm3,
            "fga": line.fga2 + line.fga3,
            "thpm": line.fgm3,
            "thpa": line.fga3,
            "twpm": line.fgm2,
            "twpa": line.fga2,
            "ftm": line.ftm,
            "fta": line.fta,
            "rebounds": line.off_rebounds + line.def_rebounds + team_rebounds,
            "off_rebounds": line.off_rebounds,
            "def_rebounds": line.def_rebounds,
            "assists": line.assists,
            "steals": line.steals,
            "turnovers": line.turnovers,
            "blocks": line.blocks_favour,
            "blocks_against": line.blocks_against,
            "fouls": line.fouls_commited,
            "fouls_received": line.fouls_received,
            "plus_minus": None,
            "pir": line.valuation,
        },
        path,
    )


def map_euroleague_team(raw: RawPayload, path: FieldPath) -> TeamResult:
    """Map one ``Stats`` entry to a TeamResult."""
    team = validate_at(EuroleagueTeamStats, raw, path)
    team_rebounds = 0
    if team.tmr is not None:
        team_rebounds = team.tmr.total_rebounds or 0

    players = tuple(
        map_euroleague_player(record, join_path(path, "PlayersStats", i))
        for i, record in enumerate(team.players_stats)
    )
    totals = map_euroleague_player(
        team.totr, join_path(path, "totr"), team_rebounds=team_rebounds
    )

    return validate_at(
        TeamResult,
        {
            "name": format_euroleague_team_name(team.team),
            "score": totals.points,
            "players": players,
            "totals": totals,
        },
        path,
    )


def map_euroleague_box_score(raw: RawPayload) -> BoxScore:
    """Map a Euroleague box score document to the canonical BoxScore.

    Args:
        raw: Decoded Euroleague JSON document.

    Returns:
        Canonical BoxScore with ``is_finished == not is_live``.

    Raises:
        MalformedFeedError: If the document does not match the schema.
    """
    payload = validate_at(EuroleaguePayload, raw)
    home = map_euroleague_team(payload.stats[0], "Stats.0")
    visitor = map_euroleague_team(payload.stats[1], "Stats.1")

    logger.debug(
        "Mapped Euroleague box score {} {} - {} {} (live={})",
        home.name,
        home.score,
        visitor.score,
        visitor.name,
        payload.live,
    )

    return validate_at(
        BoxScore,
        {
            "home_team": home,
            "visitor_team": visitor,
            "is_live": payload.live,
            "is_finished": not payload.live,
        },
    )
