"""Abstract storage interfaces for tournament entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, TypeVar

from bracketry.domain import Group, Match, Score, Team

EntityT = TypeVar("EntityT")
IdT = TypeVar("IdT")


class AbstractRepository(ABC, Generic[EntityT, IdT]):
    """Basic create/read/update/delete storage of one kind of entity."""

    @abstractmethod
    def read_by_id(self, entity_id: IdT) -> EntityT | None:
        """Return the entity with this id, or None."""

    @abstractmethod
    def create(self, entity: EntityT) -> IdT:
        """Store a new entity and return its id."""

    @abstractmethod
    def update(self, entity: EntityT) -> IdT:
        """Store changes to an existing entity."""

    @abstractmethod
    def delete(self, entity_id: IdT) -> None:
        """Remove the entity with this id."""

    @abstractmethod
    def read_all(self) -> list[EntityT]:
        """Return every stored entity."""


class AbstractGroupRepository(AbstractRepository[Group, str]):
    """Storage of groups with lookups by tournament and team."""

    @abstractmethod
    def find_by_tournament_id(self, tournament_id: str) -> list[Group]:
        """Return the groups of a tournament."""

    @abstractmethod
    def find_by_tournament_id_and_group_id(self, tournament_id: str, group_id: str) -> Group | None:
        """Return one group of a tournament, or None."""

    @abstractmethod
    def find_by_tournament_id_and_team_id(self, tournament_id: str, team_id: str) -> Group | None:
        """Return the group of a tournament that holds the team, or None."""

    @abstractmethod
    def find_by_group_id_and_team_id(self, group_id: str, team_id: str) -> Group | None:
        """Return the group if it holds the team, or None."""

    @abstractmethod
    def update_group_add_team(self, group_id: str, team: Team) -> None:
        """Append a team to a group."""


class AbstractMatchRepository(ABC):
    """Storage of bracket matches."""

    @abstractmethod
    def find_by_tournament_id(self, tournament_id: str) -> list[Match]:
        """Return the matches of a tournament."""

    @abstractmethod
    def find_by_tournament_id_and_match_id(self, tournament_id: str, match_id: str) -> Match | None:
        """Return one match of a tournament by id, or None."""

    @abstractmethod
    def find_by_tournament_id_and_name(self, tournament_id: str, name: str) -> Match | None:
        """Return one match of a tournament by name, or None."""

    @abstractmethod
    def update_match_score(self, match_id: str, score: Score) -> None:
        """Set the score of a match."""

    @abstractmethod
    def update(self, match_id: str, match: Match) -> None:
        """Replace the stored match."""

    @abstractmethod
    def create_bulk(self, matches: Sequence[Match]) -> list[str]:
        """Store many matches at once and return their ids in order."""

    @abstractmethod
    def matches_exist_for_tournament(self, tournament_id: str) -> bool:
        """Return True if the tournament has any stored match."""