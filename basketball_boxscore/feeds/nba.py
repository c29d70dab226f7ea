"""NBA feed mapper.

Maps the legacy ``sports_content`` game document into the canonical
``BoxScore``. Counting stats arrive as strings; each one is validated rather
than coerced, so a bad value surfaces as a ``MalformedFeedError`` naming the
field instead of a silent NaN.

Payload layout::

    sports_content.game.period_time.game_status   1 pre | 2 live | 3 final
    sports_content.game.{home,visitor}.city / nickname / score
    sports_content.game.{home,visitor}.players.player[]
    sports_content.game.{home,visitor}.stats       team totals

Example:
    >>> from basketball_boxscore.feeds.nba import map_nba_box_score
    >>> box = map_nba_box_score(payload)
    >>> box.home_team.players[0].minutes
    '36:12'
"""
from __future__ import annotations

from typing import Any

from basketball_boxscore.derived import format_minutes
from basketball_boxscore.feeds.base import (
    OptionalStatInt,
    OptionalStr,
    RawSchema,
    StatInt,
    join_path,
    require,
    validate_at,
)
from basketball_boxscore.logging import get_logger
from basketball_boxscore.models import TOTALS_NAME, BoxScore, PlayerStats, TeamResult
from basketball_boxscore.types import FieldPath, GameStatus, MalformedFeedError, RawPayload

logger = get_logger(__name__)

GAME_PATH = "sports_content.game"


# =============================================================================
# Input schema
# =============================================================================


class NbaStatLine(RawSchema):
    """One player record, or a team ``stats`` envelope (no name fields)."""

    first_name: OptionalStr = None
    last_name: OptionalStr = None
    jersey_number: OptionalStr = None
    starting_position: str | None = None
    on_court: OptionalStatInt = None
    minutes: OptionalStatInt = None
    seconds: OptionalStatInt = None

    points: StatInt
    field_goals_made: StatInt
    field_goals_attempted: StatInt
    three_pointers_made: StatInt
    three_pointers_attempted: StatInt
    free_throws_made: StatInt
    free_throws_attempted: StatInt
    rebounds_offensive: StatInt
    rebounds_defensive: StatInt
    team_rebounds: OptionalStatInt = None
    assists: StatInt
    steals: StatInt
    turnovers: StatInt
    blocks: StatInt
    fouls: StatInt
    plus_minus: OptionalStatInt = None


class NbaRoster(RawSchema):
    player: list[dict[str, Any]]


class NbaTeamHeader(RawSchema):
    """Team fields readable in every game state."""

    city: str
    nickname: str
    score: OptionalStatInt = None
    # Left raw; only read once the game has started
    players: Any = None
    stats: Any = None


class NbaPeriodTime(RawSchema):
    game_status: StatInt


class NbaGame(RawSchema):
    period_time: NbaPeriodTime
    home: NbaTeamHeader
    visitor: NbaTeamHeader


class NbaSportsContent(RawSchema):
    game: NbaGame


class NbaGamePayload(RawSchema):
    sports_content: NbaSportsContent


# =============================================================================
# Mapping
# =============================================================================


def _player_name(line: NbaStatLine) -> str:
    if not line.first_name:
        return TOTALS_NAME
    return f"{line.first_name} {line.last_name or ''}".strip()


def _playing_time(line: NbaStatLine, path: FieldPath) -> str | None:
    if line.minutes is None:
        return None
    try:
        return format_minutes(line.minutes, line.seconds or 0)
    except ValueError as exc:
        raise MalformedFeedError(join_path(path, "minutes"), str(exc)) from exc


def map_nba_player(raw: RawPayload, path: FieldPath = "") -> PlayerStats:
    """Map one NBA player record (or team stats envelope) to PlayerStats.

    Args:
        raw: Decoded player record.
        path: Location of the record, used in error messages.

    Returns:
        Canonical PlayerStats. Records without ``first_name`` are totals.

    Raises:
        MalformedFeedError: If a stat is missing or not an integer, or the
            shooting splits are inconsistent.
    """
    line = validate_at(NbaStatLine, raw, path)
    name = _player_name(line)
    is_totals = name == TOTALS_NAME

    return validate_at(
        PlayerStats,
        {
            "name": name,
            "jersey_number": None if is_totals else line.jersey_number,
            "is_starter": bool(line.starting_position),
            "is_playing": line.on_court == 1,
            "minutes": _playing_time(line, path),
            "points": line.points,
            "fgm": line.field_goals_made,
            "fga": line.field_goals_attempted,
            "thpm": line.three_pointers_made,
            "thpa": line.three_pointers_attempted,
            "twpm": line.field_goals_made - line.three_pointers_made,
            "twpa": line.field_goals_attempted - line.three_pointers_attempted,
            "ftm": line.free_throws_made,
            "fta": line.free_throws_attempted,
            "rebounds": (
                line.rebounds_offensive
                + line.rebounds_defensive
                + (line.team_rebounds or 0)
            ),
            "off_rebounds": line.rebounds_offensive,
            "def_rebounds": line.rebounds_defensive,
            "assists": line.assists,
            "steals": line.steals,
            "turnovers": line.turnovers,
            "blocks": line.blocks,
            "blocks_against": None,
            "fouls": line.fouls,
            "fouls_received": None,
            "plus_minus": line.plus_minus,
            "pir": None,
        },
        path,
    )


def _team_name(team: NbaTeamHeader) -> str:
    return f"{team.city.strip()} {team.nickname.strip()}"


def map_nba_team(team: NbaTeamHeader, path: FieldPath) -> TeamResult:
    """Map a started (live or final) team envelope, players included."""
    score = require(team.score, join_path(path, "score"))
    roster_path = join_path(path, "players")
    roster = validate_at(NbaRoster, require(team.players, roster_path), roster_path)
    stats_path = join_path(path, "stats")

    players = tuple(
        map_nba_player(record, join_path(roster_path, "player", i))
        for i, record in enumerate(roster.player)
    )
    totals = map_nba_player(require(team.stats, stats_path), stats_path)

    return validate_at(
        TeamResult,
        {
            "name": _team_name(team),
            "score": score,
            "players": players,
            "totals": totals,
        },
        path,
    )


def _pregame_team(team: NbaTeamHeader, path: FieldPath) -> TeamResult:
    return validate_at(
        TeamResult,
        {"name": _team_name(team), "score": team.score or 0},
        path,
    )


def map_nba_box_score(raw: RawPayload) -> BoxScore:
    """Map a full NBA game document to the canonical BoxScore.

    A pre-game document (status 1) yields both status flags False and teams
    without player lines; the player arrays are never read in that case.

    Args:
        raw: Decoded ``sports_content`` JSON document.

    Returns:
        Canonical BoxScore.

    Raises:
        MalformedFeedError: If the document does not match the NBA schema.
    """
    payload = validate_at(NbaGamePayload, raw)
    game = payload.sports_content.game

    status_path = join_path(GAME_PATH, "period_time", "game_status")
    try:
        status = GameStatus(game.period_time.game_status)
    except ValueError as exc:
        raise MalformedFeedError(
            status_path,
            f"Unknown game status {game.period_time.game_status}, expected 1, 2 or 3",
        ) from exc

    if status is GameStatus.PRE:
        logger.debug("NBA game has not started, skipping player lines")
        home = _pregame_team(game.home, join_path(GAME_PATH, "home"))
        visitor = _pregame_team(game.visitor, join_path(GAME_PATH, "visitor"))
    else:
        home = map_nba_team(game.home, join_path(GAME_PATH, "home"))
        visitor = map_nba_team(game.visitor, join_path(GAME_PATH, "visitor"))

    logger.debug(
        "Mapped NBA box score {} {} - {} {} ({} + {} players, status={})",
        home.name,
        home.score,
        visitor.score,
        visitor.name,
        len(home.players),
        len(visitor.players),
        status.name,
    )

    return validate_at(
        BoxScore,
        {
            "home_team": home,
            "visitor_team": visitor,
            "is_live": status.is_live,
            "is_finished": status.is_finished,
        },
    )
