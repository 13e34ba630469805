"""Storage of teams in the connection pool's database."""

from __future__ import annotations

import json

from bracketry.domain import Team
from bracketry.errors import NotFoundError
from bracketry.pool import ConnectionPool
from bracketry.repositories import AbstractRepository
from bracketry.serialization import team_from_dict, team_to_dict


class TeamRepository(AbstractRepository[Team, str]):
    """Teams stored as JSON documents keyed by a generated id."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def read_all(self) -> list[Team]:
        rows = self._pool.execute("select_all_teams")
        return [Team(id=str(row["id"]), name=row["name"] or "") for row in rows]

    def read_by_id(self, entity_id: str) -> Team | None:
        rows = self._pool.execute("select_team_by_id", (entity_id,))
        if not rows:
            return None
        row = rows[0]
        team = team_from_dict(json.loads(row["document"]))
        team.id = str(row["id"])
        return team

    def create(self, entity: Team) -> str:
        """Store a new team and return the id it was given."""
        rows = self._pool.execute("insert_team", (json.dumps(team_to_dict(entity)),))
        return str(rows[0]["id"])

    def update(self, entity: Team) -> str:
        """Merge the team into its stored document and return the updated document."""
        rows = self._pool.execute(
            "update_team", (json.dumps(team_to_dict(entity)), entity.id)
        )
        if not rows:
            raise NotFoundError(f"team '{entity.id}' not found")
        return str(rows[0]["document"])

    def delete(self, entity_id: str) -> None:
        self._pool.execute("delete_team", (entity_id,))