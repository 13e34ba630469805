"""Storage of bracket matches in the connection pool's database."""

from __future__ import annotations

import json
from collections.abc import Sequence

from bracketry.domain import Match, Score
from bracketry.pool import STATEMENTS, ConnectionPool
from bracketry.repositories import AbstractMatchRepository
from bracketry.serialization import match_from_dict, match_to_dict, score_to_dict


def _from_row(row: dict) -> Match:
    match = match_from_dict(json.loads(row["document"]))
    match.id = str(row["id"])
    return match


class MatchRepository(AbstractMatchRepository):
    """Matches stored as JSON documents, each tied to a tournament."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def _find_one(self, statement: str, *params: str) -> Match | None:
        rows = self._pool.execute(statement, params)
        return _from_row(rows[0]) if rows else None

    def find_by_tournament_id(self, tournament_id: str) -> list[Match]:
        rows = self._pool.execute("select_matches_by_tournament", (tournament_id,))
        return [_from_row(row) for row in rows]

    def find_by_tournament_id_and_match_id(self, tournament_id: str, match_id: str) -> Match | None:
        return self._find_one("select_match_by_tournamentid_matchid", tournament_id, match_id)

    def find_by_tournament_id_and_name(self, tournament_id: str, name: str) -> Match | None:
        return self._find_one("select_match_by_tournamentid_name", tournament_id, name)

    def update_match_score(self, match_id: str, score: Score) -> None:
        self._pool.execute("update_match_score", (match_id, json.dumps(score_to_dict(score))))

    def update(self, match_id: str, match: Match) -> None:
        self._pool.execute("update_match", (match_id, json.dumps(match_to_dict(match))))

    def create_bulk(self, matches: Sequence[Match]) -> list[str]:
        """Insert all matches in one transaction and return their ids in order."""
        sql = STATEMENTS["insert_match"]
        created: list[str] = []
        with self._pool.connection() as conn:
            cursor = conn.cursor()
            try:
                for match in matches:
                    cursor.execute(sql, (match.tournament_id, json.dumps(match_to_dict(match))))
                    created.append(str(cursor.fetchone()[0]))
                conn.commit()
            except Exception:
                conn.rollback()
                raise
            finally:
                cursor.close()
        return created

    def matches_exist_for_tournament(self, tournament_id: str) -> bool:
        return bool(self._pool.execute("select_matches_by_tournament", (tournament_id,)))