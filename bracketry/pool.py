"""A fixed-size pool of database connections with named statements."""

from __future__ import annotations

import queue
import sqlite3
from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any

_UUID_SQL = (
    "lower(hex(randomblob(4))) || '-' || lower(hex(randomblob(2))) || '-4' || "
    "substr(lower(hex(randomblob(2))), 2) || '-' || "
    "substr('89ab', 1 + (abs(random()) % 4), 1) || substr(lower(hex(randomblob(2))), 2) || '-' || "
    "lower(hex(randomblob(6)))"
)

SCHEMA: tuple[str, ...] = (
    f'CREATE TABLE IF NOT EXISTS "tournaments" ('
    f"id TEXT PRIMARY KEY DEFAULT ({_UUID_SQL}), document TEXT NOT NULL, "
    f"last_update_date TEXT DEFAULT CURRENT_TIMESTAMP)",
    f'CREATE TABLE IF NOT EXISTS "teams" ('
    f"id TEXT PRIMARY KEY DEFAULT ({_UUID_SQL}), document TEXT NOT NULL, "
    f"last_update_date TEXT DEFAULT CURRENT_TIMESTAMP)",
    f'CREATE TABLE IF NOT EXISTS "groups" ('
    f"id TEXT PRIMARY KEY DEFAULT ({_UUID_SQL}), tournament_id TEXT NOT NULL, "
    f"document TEXT NOT NULL, last_update_date TEXT DEFAULT CURRENT_TIMESTAMP)",
    f'CREATE TABLE IF NOT EXISTS "matches" ('
    f"id TEXT PRIMARY KEY DEFAULT ({_UUID_SQL}), tournament_id TEXT NOT NULL, "
    f"document TEXT NOT NULL, last_update_date TEXT DEFAULT CURRENT_TIMESTAMP)",
)

_TEAM_IN_GROUP = (
    "EXISTS (SELECT 1 FROM json_each(g.document, '$.teams') AS team "
    "WHERE json_extract(team.value, '$.id') = ?2)"
)

STATEMENTS: Mapping[str, str] = MappingProxyType(
    {
        "insert_tournament": 'INSERT INTO "tournaments" (document) VALUES (json(?1)) RETURNING id',
        "select_tournament_by_id": 'SELECT * FROM "tournaments" WHERE id = ?1',
        "select_all_tournaments": 'SELECT id, document FROM "tournaments"',
        "update_tournament": (
            'UPDATE "tournaments" SET document = json_patch(document, json(?1)) '
            "WHERE id = ?2 RETURNING document"
        ),
        "delete_tournament": 'DELETE FROM "tournaments" WHERE id = ?1',
        "insert_team": 'INSERT INTO "teams" (document) VALUES (json(?1)) RETURNING id',
        "select_team_by_id": 'SELECT * FROM "teams" WHERE id = ?1',
        "select_all_teams": (
            "SELECT id, json_extract(document, '$.name') AS name FROM \"teams\""
        ),
        "update_team": (
            'UPDATE "teams" SET document = json_patch(document, json(?1)) '
            "WHERE id = ?2 RETURNING document"
        ),
        "delete_team": 'DELETE FROM "teams" WHERE id = ?1',
        "insert_group": (
            'INSERT INTO "groups" (tournament_id, document) VALUES (?1, json(?2)) RETURNING id'
        ),
        "select_groups_by_tournament": 'SELECT * FROM "groups" WHERE tournament_id = ?1',
        "select_all_groups": (
            "SELECT id, json_extract(document, '$.name') AS name FROM \"groups\""
        ),
        "select_group_in_tournament": (
            f'SELECT g.* FROM "groups" AS g WHERE g.tournament_id = ?1 AND {_TEAM_IN_GROUP}'
        ),
        "select_group_by_tournamentid_groupid": (
            'SELECT * FROM "groups" WHERE tournament_id = ?1 AND id = ?2'
        ),
        "select_group_by_group_id_team_id": (
            f'SELECT g.* FROM "groups" AS g WHERE g.id = ?1 AND {_TEAM_IN_GROUP}'
        ),
        "update_group": (
            'UPDATE "groups" SET document = json(?2), last_update_date = CURRENT_TIMESTAMP '
            "WHERE id = ?1 RETURNING document"
        ),
        "update_group_add_team": (
            "UPDATE \"groups\" SET document = json_insert(document, '$.teams[#]', json(?2)), "
            "last_update_date = CURRENT_TIMESTAMP WHERE id = ?1"
        ),
        "delete_group": 'DELETE FROM "groups" WHERE id = ?1 RETURNING id',
        "insert_match": (
            'INSERT INTO "matches" (tournament_id, document) VALUES (?1, json(?2)) RETURNING id'
        ),
        "select_matches_by_tournament": 'SELECT * FROM "matches" WHERE tournament_id = ?1',
        "select_match_by_tournamentid_matchid": (
            'SELECT * FROM "matches" WHERE tournament_id = ?1 AND id = ?2'
        ),
        "select_match_by_tournamentid_name": (
            "SELECT * FROM \"matches\" WHERE tournament_id = ?1 "
            "AND json_extract(document, '$.name') = ?2"
        ),
        "update_match_score": (
            "UPDATE \"matches\" SET document = json_set(document, '$.score', json(?2)), "
            "last_update_date = CURRENT_TIMESTAMP WHERE id = ?1"
        ),
        "update_match": (
            'UPDATE "matches" SET document = json(?2), last_update_date = CURRENT_TIMESTAMP '
            "WHERE id = ?1 RETURNING document"
        ),
        "delete_match": 'DELETE FROM "matches" WHERE id = ?1',
    }
)


def _sqlite_connect(connection_string: str) -> sqlite3.Connection:
    return sqlite3.connect(
        connection_string,
        check_same_thread=False,
        uri=connection_string.startswith("file:"),
    )


class ConnectionPool:
    """Hands out a fixed number of connections, blocking while all are in use.

    Connections come from *connect*, called with the connection string once
    per pooled connection; by default that opens an SQLite database. Queries
    are run by name from *statements*.
    """

    def __init__(
        self,
        connection_string: str,
        pool_size: int = 1,
        *,
        connect: Callable[[str], Any] | None = None,
        statements: Mapping[str, str] | None = None,
        schema: Sequence[str] = SCHEMA,
    ) -> None:
        if pool_size < 1:
            raise ValueError("pool size must be at least 1")
        self.pool_size = pool_size
        self._statements = dict(STATEMENTS if statements is None else statements)
        self._available: queue.Queue[Any] = queue.Queue()
        opener = connect or _sqlite_connect
        for _ in range(pool_size):
            conn = opener(connection_string)
            self._apply_schema(conn, schema)
            self._available.put(conn)

    @staticmethod
    def _apply_schema(conn: Any, schema: Sequence[str]) -> None:
        if not schema:
            return
        cursor = conn.cursor()
        try:
            for ddl in schema:
                cursor.execute(ddl)
        finally:
            cursor.close()
        conn.commit()

    @contextmanager
    def connection(self) -> Iterator[Any]:
        """Borrow a connection for the duration of the block."""
        conn = self._available.get()
        try:
            yield conn
        finally:
            self._available.put(conn)

    def execute(self, statement: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        """Run a named statement in its own transaction and return rows as dicts."""
        try:
            sql = self._statements[statement]
        except KeyError:
            raise KeyError(f"unknown statement '{statement}'") from None
        with self.connection() as conn:
            cursor = conn.cursor()
            try:
                cursor.execute(sql, tuple(params))
                rows: list[dict[str, Any]] = []
                if cursor.description:
                    columns = [column[0] for column in cursor.description]
                    rows = [dict(zip(columns, row)) for row in cursor.fetchall()]
                conn.commit()
            except Exception:
                conn.rollback()
                raise
            finally:
                cursor.close()
        return rows