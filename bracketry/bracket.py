"""Generation of the full match list for a double-elimination bracket."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from bracketry.domain import Match, Team

TEAMS_REQUIRED = 32
_FIRST_ROUND = TEAMS_REQUIRED // 2
_WINNERS_MATCHES = 31
_LOSERS_MATCHES = 30
_FINALS_MATCHES = 2


class BracketGenerator:
    """Builds the 63 matches of a 32-team double-elimination bracket.

    Winners bracket matches are named W0-W30, losers bracket L0-L29 and
    finals F0-F1. Only the first winners round has teams assigned.
    """

    def generate_matches(self, tournament_id: str, teams: Sequence[Team]) -> list[Match]:
        teams = list(teams)
        if len(teams) != TEAMS_REQUIRED:
            raise ValueError("Double elimination strategy requires exactly 32 teams")
        return [
            *self._winners_bracket(tournament_id, teams),
            *self._empty_matches("L", _LOSERS_MATCHES, tournament_id),
            *self._empty_matches("F", _FINALS_MATCHES, tournament_id),
        ]

    def _winners_bracket(self, tournament_id: str, teams: list[Team]) -> Iterator[Match]:
        pairs = zip(teams[0::2], teams[1::2])
        for index, (home, visitor) in enumerate(pairs):
            yield Match(
                name=f"W{index}",
                tournament_id=tournament_id,
                home_team_id=home.id,
                visitor_team_id=visitor.id,
            )
        for index in range(_FIRST_ROUND, _WINNERS_MATCHES):
            yield Match(name=f"W{index}", tournament_id=tournament_id)

    @staticmethod
    def _empty_matches(prefix: str, count: int, tournament_id: str) -> Iterator[Match]:
        for index in range(count):
            yield Match(name=f"{prefix}{index}", tournament_id=tournament_id)