"""Consistency checks for canonical box scores.

The canonical models already reject impossible lines (more makes than
attempts, a game both live and finished). The checks here look across lines
for things a feed can get wrong without being malformed, such as totals that
do not add up.

Example:
    >>> from basketball_boxscore.validation import BoxScoreValidator
    >>> validator = BoxScoreValidator()
    >>> result = validator.validate(box)
    >>> if not result.valid:
    ...     print(f"Errors: {result.errors}")
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from basketball_boxscore.logging import get_logger
from basketball_boxscore.models import TOTALS_NAME

if TYPE_CHECKING:
    from basketball_boxscore.models import BoxScore, TeamResult

# Players a team can have on the floor at once
ON_COURT_LIMIT = 5


@dataclass
class ValidationResult:
    """Result of box score validation.

    Attributes:
        valid: Whether validation passed.
        errors: List of error messages (validation failures).
        warnings: List of warning messages (potential issues).
    """

    valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(message)
        self.valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning (does not affect validity)."""
        self.warnings.append(message)

    def merge(self, other: ValidationResult) -> None:
        """Merge another validation result into this one."""
        if not other.valid:
            self.valid = False
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


class BoxScoreValidator:
    """Validates cross-line consistency of a canonical box score."""

    def __init__(self) -> None:
        self.logger = get_logger(self.__class__.__name__)

    def validate(self, box_score: BoxScore) -> ValidationResult:
        """Run every check on both teams.

        Args:
            box_score: Canonical box score to check.

        Returns:
            ValidationResult with any errors or warnings.
        """
        result = ValidationResult()
        sides = (("home", box_score.home_team), ("visitor", box_score.visitor_team))
        for label, team in sides:
            if box_score.is_pregame:
                result.merge(self.validate_pregame_team(team, label))
                continue
            result.merge(self.validate_team(team, label, live=box_score.is_live))

        self.logger.debug(
            "Validated box score: {} errors, {} warnings",
            len(result.errors),
            len(result.warnings),
        )
        return result

    def validate_pregame_team(self, team: TeamResult, label: str) -> ValidationResult:
        """A game that has not started should carry no player lines."""
        result = ValidationResult()
        if team.players:
            result.add_warning(
                f"{label} team {team.name!r} has {len(team.players)} player "
                "lines before the game started"
            )
        return result

    def validate_team(
        self,
        team: TeamResult,
        label: str,
        live: bool = False,
    ) -> ValidationResult:
        """Validate one team of a live or finished game.

        Checks:
        - Totals line exists and is a proper totals record
        - Player points add up to the totals line
        - Team score matches the totals line
        - No more than five players on court while live

        Args:
            team: Team to check.
            label: "home" or "visitor", used in messages.
            live: Whether the game is in progress.

        Returns:
            ValidationResult with any errors or warnings.
        """
        result = ValidationResult()
        totals = team.totals

        if totals is None:
            result.add_error(f"{label} team {team.name!r} has no totals line")
            return result

        if totals.name != TOTALS_NAME:
            result.add_error(
                f"{label} totals line is named {totals.name!r}, expected {TOTALS_NAME!r}"
            )
        if totals.jersey_number is not None:
            result.add_error(
                f"{label} totals line carries jersey number {totals.jersey_number!r}"
            )

        player_points = sum(player.points for player in team.players)
        if team.players and player_points != totals.points:
            result.add_warning(
                f"{label} player points sum to {player_points}, "
                f"totals report {totals.points}"
            )

        if team.score != totals.points:
            result.add_warning(
                f"{label} score {team.score} differs from totals points {totals.points}"
            )

        on_court = sum(1 for player in team.players if player.is_playing)
        if live and on_court > ON_COURT_LIMIT:
            result.add_warning(
                f"{label} team {team.name!r} has {on_court} players on court"
            )

        return result
