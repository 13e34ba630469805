import pytest

from bracketry.domain import Group, Team, is_valid_id
from bracketry.group_repository import GroupRepository
from bracketry.pool import ConnectionPool

TOURNAMENT = "t-1"


@pytest.fixture
def repository():
    return GroupRepository(ConnectionPool(":memory:"))


def _group(name="Group A", teams=None, tournament_id=TOURNAMENT):
    return Group(name=name, tournament_id=tournament_id, teams=list(teams or []))


def test_create_returns_uuid(repository):
    assert is_valid_id(repository.create(_group()))


def test_find_by_tournament_id(repository):
    first = repository.create(_group("A", [Team(id="a1", name="One")]))
    second = repository.create(_group("B"))
    repository.create(_group("C", tournament_id="other"))
    groups = repository.find_by_tournament_id(TOURNAMENT)
    assert {g.id: g.name for g in groups} == {first: "A", second: "B"}
    by_id = {g.id: g for g in groups}
    assert by_id[first].teams == [Team(id="a1", name="One")]
    assert by_id[first].tournament_id == TOURNAMENT


def test_find_by_tournament_id_and_group_id(repository):
    group_id = repository.create(_group("A"))
    found = repository.find_by_tournament_id_and_group_id(TOURNAMENT, group_id)
    assert found.id == group_id
    assert found.name == "A"
    assert repository.find_by_tournament_id_and_group_id("other", group_id) is None


def test_find_by_tournament_id_and_team_id(repository):
    group_id = repository.create(_group("A", [Team(id="a1", name="One")]))
    assert repository.find_by_tournament_id_and_team_id(TOURNAMENT, "a1").id == group_id
    assert repository.find_by_tournament_id_and_team_id(TOURNAMENT, "zz") is None
    assert repository.find_by_tournament_id_and_team_id("other", "a1") is None


def test_find_by_group_id_and_team_id(repository):
    group_id = repository.create(_group("A", [Team(id="a1", name="One")]))
    assert repository.find_by_group_id_and_team_id(group_id, "a1").id == group_id
    assert repository.find_by_group_id_and_team_id(group_id, "zz") is None


def test_update_group_add_team_appends(repository):
    group_id = repository.create(_group("A", [Team(id="a1", name="One")]))
    repository.update_group_add_team(group_id, Team(id="a2", name="Two"))
    group = repository.find_by_group_id_and_team_id(group_id, "a2")
    assert group.teams == [Team(id="a1", name="One"), Team(id="a2", name="Two")]


def test_update_replaces_document(repository):
    group_id = repository.create(_group("A"))
    result = repository.update(Group(name="Renamed", id=group_id, tournament_id=TOURNAMENT))
    assert result == group_id
    assert repository.find_by_tournament_id_and_group_id(TOURNAMENT, group_id).name == "Renamed"


def test_read_by_id(repository):
    group_id = repository.create(_group("A", [Team(id="a1", name="One")]))
    group = repository.read_by_id(group_id)
    assert group.id == group_id
    assert group.teams == [Team(id="a1", name="One")]
    assert repository.read_by_id("missing") is None


def test_read_all_gives_ids_and_names(repository):
    ids = {repository.create(_group(name)): name for name in ("A", "B")}
    assert {g.id: g.name for g in repository.read_all()} == ids


def test_delete(repository):
    group_id = repository.create(_group("A"))
    repository.delete(group_id)
    assert repository.find_by_tournament_id(TOURNAMENT) == []