"""Canonical box score model.

Provider-independent, immutable representation every feed mapper converges
to. Field names are snake_case in Python and camelCase on the wire, so a
dumped model round-trips through the generic feed unchanged.

Example:
    >>> box = BoxScore.model_validate(payload)
    >>> box.home_team.totals.points
    104
    >>> box.model_dump(by_alias=True)["homeTeam"]["name"]
    'Boston Celtics'
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from basketball_boxscore.derived import shooting_percentage

TOTALS_NAME = "totals"

# Made/attempted pairs that must satisfy made <= attempted
SHOT_PAIRS = (("fgm", "fga"), ("thpm", "thpa"), ("twpm", "twpa"), ("ftm", "fta"))


class CanonicalModel(BaseModel):
    """Frozen base with camelCase aliases."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class PlayerStats(CanonicalModel):
    """Per-player (or team totals) statistics line.

    Nullable counters are ones not every provider reports; they stay ``None``
    rather than defaulting to zero.
    """

    name: str
    jersey_number: str | None = None
    is_starter: bool = False
    is_playing: bool = False
    minutes: str | None = Field(default=None, pattern=r"^\d{2,}:[0-5]\d$")

    points: int = Field(ge=0)
    fgm: int = Field(ge=0)
    fga: int = Field(ge=0)
    thpm: int = Field(ge=0)
    thpa: int = Field(ge=0)
    twpm: int = Field(ge=0)
    twpa: int = Field(ge=0)
    ftm: int = Field(ge=0)
    fta: int = Field(ge=0)
    rebounds: int = Field(ge=0)
    off_rebounds: int = Field(ge=0)
    def_rebounds: int = Field(ge=0)
    assists: int = Field(ge=0)
    steals: int = Field(ge=0)
    turnovers: int = Field(ge=0)
    blocks: int = Field(ge=0)
    blocks_against: int | None = Field(default=None, ge=0)
    fouls: int = Field(ge=0)
    fouls_received: int | None = Field(default=None, ge=0)
    plus_minus: int | None = None
    pir: int | None = None

    @model_validator(mode="after")
    def check_shooting_splits(self) -> PlayerStats:
        """Enforce made <= attempted and the two/three point split."""
        for made, attempted in SHOT_PAIRS:
            if getattr(self, made) > getattr(self, attempted):
                raise ValueError(
                    f"{made} ({getattr(self, made)}) exceeds "
                    f"{attempted} ({getattr(self, attempted)})"
                )
        if self.twpm != self.fgm - self.thpm:
            raise ValueError(
                f"twpm ({self.twpm}) must equal fgm - thpm ({self.fgm - self.thpm})"
            )
        if self.twpa != self.fga - self.thpa:
            raise ValueError(
                f"twpa ({self.twpa}) must equal fga - thpa ({self.fga - self.thpa})"
            )
        return self

    @property
    def is_totals(self) -> bool:
        """Whether this line is a team aggregate rather than a player."""
        return self.name == TOTALS_NAME and self.jersey_number is None

    @property
    def did_play(self) -> bool:
        return self.minutes is not None

    @property
    def fg_pct(self) -> float:
        return shooting_percentage(self.fgm, self.fga)

    @property
    def three_pct(self) -> float:
        return shooting_percentage(self.thpm, self.thpa)

    @property
    def two_pct(self) -> float:
        return shooting_percentage(self.twpm, self.twpa)

    @property
    def ft_pct(self) -> float:
        return shooting_percentage(self.ftm, self.fta)


class TeamResult(CanonicalModel):
    """One side of a box score.

    ``totals`` is ``None`` only for a pre-game payload, where player lines are
    not available yet.
    """

    name: str
    score: int = Field(ge=0)
    players: tuple[PlayerStats, ...] = ()
    totals: PlayerStats | None = None


class BoxScore(CanonicalModel):
    """Complete box score for one game.

    ``is_live`` and ``is_finished`` both False means the game has not started.
    """

    home_team: TeamResult
    visitor_team: TeamResult
    is_live: bool = False
    is_finished: bool = False

    @model_validator(mode="after")
    def check_status(self) -> BoxScore:
        if self.is_live and self.is_finished:
            raise ValueError("A game cannot be both live and finished")
        if self.is_pregame:
            return self
        sides = (("homeTeam", self.home_team), ("visitorTeam", self.visitor_team))
        for side, team in sides:
            if team.totals is None:
                raise ValueError(
                    f"{side}.totals is required once the game has started"
                )
        return self

    @property
    def is_pregame(self) -> bool:
        return not (self.is_live or self.is_finished)

    @property
    def teams(self) -> tuple[TeamResult, TeamResult]:
        """Home and visitor, in that order."""
        return self.home_team, self.visitor_team
