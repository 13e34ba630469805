"""Storage of groups in the connection pool's database."""

from __future__ import annotations

import json

from bracketry.domain import Group, Team
from bracketry.pool import ConnectionPool
from bracketry.repositories import AbstractGroupRepository
from bracketry.serialization import group_from_dict, group_to_dict, team_document

_SELECT_BY_ID = 'SELECT id, document FROM "groups" WHERE id = ?'


def _from_row(row: dict) -> Group:
    group = group_from_dict(json.loads(row["document"]))
    group.id = str(row["id"])
    return group


class GroupRepository(AbstractGroupRepository):
    """Groups stored as JSON documents, each tied to a tournament."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def _find_one(self, statement: str, *params: str) -> Group | None:
        rows = self._pool.execute(statement, params)
        return _from_row(rows[0]) if rows else None

    def read_by_id(self, entity_id: str) -> Group | None:
        with self._pool.connection() as conn:
            cursor = conn.cursor()
            try:
                cursor.execute(_SELECT_BY_ID, (entity_id,))
                row = cursor.fetchone()
            finally:
                cursor.close()
        if row is None:
            return None
        return _from_row({"id": row[0], "document": row[1]})

    def create(self, entity: Group) -> str:
        """Store a new group under its tournament and return the id it was given."""
        rows = self._pool.execute(
            "insert_group", (entity.tournament_id, json.dumps(group_to_dict(entity)))
        )
        return str(rows[0]["id"])

    def update(self, entity: Group) -> str:
        """Replace the stored document of the group and return its id."""
        self._pool.execute("update_group", (entity.id, json.dumps(group_to_dict(entity))))
        return entity.id

    def delete(self, entity_id: str) -> None:
        self._pool.execute("delete_group", (entity_id,))

    def read_all(self) -> list[Group]:
        """Return every group with only its id and name filled in."""
        return [
            Group(name=row["name"] or "", id=str(row["id"]))
            for row in self._pool.execute("select_all_groups")
        ]

    def find_by_tournament_id(self, tournament_id: str) -> list[Group]:
        rows = self._pool.execute("select_groups_by_tournament", (tournament_id,))
        return [_from_row(row) for row in rows]

    def find_by_tournament_id_and_group_id(self, tournament_id: str, group_id: str) -> Group | None:
        return self._find_one("select_group_by_tournamentid_groupid", tournament_id, group_id)

    def find_by_tournament_id_and_team_id(self, tournament_id: str, team_id: str) -> Group | None:
        return self._find_one("select_group_in_tournament", tournament_id, team_id)

    def find_by_group_id_and_team_id(self, group_id: str, team_id: str) -> Group | None:
        return self._find_one("select_group_by_group_id_team_id", group_id, team_id)

    def update_group_add_team(self, group_id: str, team: Team) -> None:
        self._pool.execute("update_group_add_team", (group_id, json.dumps(team_document(team))))