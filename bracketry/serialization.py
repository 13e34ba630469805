"""Conversion of domain entities to and from JSON-ready documents."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from bracketry.domain import (
    Group,
    Match,
    Score,
    Team,
    Tournament,
    TournamentFormat,
    TournamentType,
)
from bracketry.errors import InvalidFormatError

_MISSING = object()


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise InvalidFormatError(f"{what} must be a JSON object")
    return data


def _string(data: Mapping[str, Any], key: str, *, required: bool = False, default: str = "") -> str:
    value = data.get(key, _MISSING)
    if value is _MISSING:
        if required:
            raise InvalidFormatError(f"missing required field '{key}'")
        return default
    if not isinstance(value, str):
        raise InvalidFormatError(f"field '{key}' must be a string")
    return value


def _integer(data: Mapping[str, Any], key: str, default: int) -> int:
    value = data.get(key, _MISSING)
    if value is _MISSING:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidFormatError(f"field '{key}' must be a number")
    return int(value)


def team_to_dict(team: Team) -> dict[str, Any]:
    """Full team document, id always included."""
    return {"id": team.id, "name": team.name}


def team_document(team: Team) -> dict[str, Any]:
    """Team document for storage; the id is left out when empty."""
    document: dict[str, Any] = {"name": team.name}
    if team.id:
        document["id"] = team.id
    return document


def team_from_dict(data: Mapping[str, Any]) -> Team:
    """Build a team; "name" is required, "id" optional."""
    data = _require_mapping(data, "team")
    return Team(id=_string(data, "id"), name=_string(data, "name", required=True))


def teams_from_list(data: Iterable[Any]) -> list[Team]:
    """Build teams from a list; every field is optional, non-objects give empty teams."""
    if not isinstance(data, list):
        raise InvalidFormatError("teams must be a JSON array")
    teams = []
    for item in data:
        if isinstance(item, Mapping):
            teams.append(Team(id=_string(item, "id"), name=_string(item, "name")))
        else:
            teams.append(Team())
    return teams


def tournament_type_from_string(value: str) -> TournamentType:
    """Map a type name to a tournament type; unknown names fall back to double elimination."""
    if value == TournamentType.DOUBLE_ELIMINATION.value:
        return TournamentType.DOUBLE_ELIMINATION
    return TournamentType.DOUBLE_ELIMINATION


def format_to_dict(tournament_format: TournamentFormat) -> dict[str, Any]:
    return {
        "maxTeamsPerGroup": tournament_format.max_teams_per_group,
        "numberOfGroups": tournament_format.number_of_groups,
        "type": tournament_format.type.value,
    }


def format_from_dict(data: Mapping[str, Any]) -> TournamentFormat:
    """Build a format; absent fields keep their defaults."""
    data = _require_mapping(data, "format")
    default = TournamentFormat()
    fmt = TournamentFormat(
        number_of_groups=_integer(data, "numberOfGroups", default.number_of_groups),
        max_teams_per_group=_integer(data, "maxTeamsPerGroup", default.max_teams_per_group),
    )
    if "type" in data:
        fmt.type = tournament_type_from_string(_string(data, "type"))
    return fmt


def tournament_to_dict(tournament: Tournament) -> dict[str, Any]:
    document: dict[str, Any] = {"name": tournament.name}
    if tournament.id:
        document["id"] = tournament.id
    document["format"] = format_to_dict(tournament.format)
    return document


def tournament_from_dict(data: Mapping[str, Any]) -> Tournament:
    """Build a tournament; "name" is required, "id" and "format" optional."""
    data = _require_mapping(data, "tournament")
    tournament = Tournament(name=_string(data, "name", required=True), id=_string(data, "id"))
    if "format" in data:
        tournament.format = format_from_dict(data["format"])
    return tournament


def group_to_dict(group: Group) -> dict[str, Any]:
    document: dict[str, Any] = {"name": group.name, "tournamentId": group.tournament_id}
    if group.id:
        document["id"] = group.id
    document["teams"] = [team_to_dict(team) for team in group.teams]
    return document


def groups_to_list(groups: Iterable[Group]) -> list[dict[str, Any]]:
    return [group_to_dict(group) for group in groups]


def group_from_dict(data: Mapping[str, Any]) -> Group:
    """Build a group; "name" is required, teams are read only from an array."""
    data = _require_mapping(data, "group")
    group = Group(
        name=_string(data, "name", required=True),
        id=_string(data, "id"),
        tournament_id=_string(data, "tournamentId"),
    )
    teams = data.get("teams")
    if isinstance(teams, list):
        group.teams = teams_from_list(teams)
    return group


def score_to_dict(score: Score) -> dict[str, int]:
    return {
        "homeTeamScore": score.home_team_score,
        "visitorTeamScore": score.visitor_team_score,
    }


def score_from_dict(data: Mapping[str, Any]) -> Score:
    data = _require_mapping(data, "score")
    return Score(
        home_team_score=_integer(data, "homeTeamScore", 0),
        visitor_team_score=_integer(data, "visitorTeamScore", 0),
    )


_MATCH_FIELDS = (
    ("id", "id"),
    ("name", "name"),
    ("tournamentId", "tournament_id"),
    ("homeTeamId", "home_team_id"),
    ("visitorTeamId", "visitor_team_id"),
)


def match_to_dict(match: Match) -> dict[str, Any]:
    """Match document; empty string fields are left out, the score is always present."""
    document: dict[str, Any] = {
        key: getattr(match, attr) for key, attr in _MATCH_FIELDS if getattr(match, attr)
    }
    document["score"] = score_to_dict(match.score)
    return document


def match_from_dict(data: Mapping[str, Any]) -> Match:
    data = _require_mapping(data, "match")
    match = Match(**{attr: _string(data, key) for key, attr in _MATCH_FIELDS})
    if "score" in data:
        match.score = score_from_dict(data["score"])
    return match


def matches_to_list(matches: Iterable[Match]) -> list[dict[str, Any]]:
    return [match_to_dict(match) for match in matches]