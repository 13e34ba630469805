"""Core tournament entities: teams, groups, matches and tournaments."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

_ID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}\b-[0-9a-fA-F]{4}\b-[0-9a-fA-F]{4}\b-[0-9a-fA-F]{4}\b-[0-9a-fA-F]{12}"
)


def is_valid_id(value: str) -> bool:
    """Return True if *value* is a UUID in canonical 8-4-4-4-12 hex form."""
    return isinstance(value, str) and _ID_PATTERN.fullmatch(value) is not None


@dataclass
class Team:
    """A team taking part in tournaments."""

    id: str = ""
    name: str = ""


@dataclass
class Group:
    """A group of teams inside a tournament."""

    name: str = ""
    id: str = ""
    tournament_id: str = ""
    teams: list[Team] = field(default_factory=list)


class Winner(Enum):
    """Side that won a match."""

    HOME = "HOME"
    VISITOR = "VISITOR"


@dataclass
class Score:
    """Goals scored by each side of a match."""

    home_team_score: int = 0
    visitor_team_score: int = 0

    def winner(self) -> Winner:
        """Return the winning side; a tie counts for the visitor."""
        if self.visitor_team_score < self.home_team_score:
            return Winner.HOME
        return Winner.VISITOR


@dataclass
class Match:
    """A single match of a bracket, named like "W0", "L3" or "F1"."""

    id: str = ""
    name: str = ""
    tournament_id: str = ""
    home_team_id: str = ""
    visitor_team_id: str = ""
    score: Score = field(default_factory=Score)


class TournamentType(Enum):
    """Kind of bracket a tournament is played with."""

    DOUBLE_ELIMINATION = "DOUBLE_ELIMINATION"


@dataclass
class TournamentFormat:
    """Shape of a tournament: group count, group size and bracket type."""

    number_of_groups: int = 1
    max_teams_per_group: int = 16
    type: TournamentType = TournamentType.DOUBLE_ELIMINATION


@dataclass
class Tournament:
    """A tournament with its format, groups and matches."""

    name: str = ""
    format: TournamentFormat = field(default_factory=TournamentFormat)
    id: str = ""
    groups: list[Group] = field(default_factory=list)
    matches: list[Match] = field(default_factory=list)