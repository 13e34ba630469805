import json

import pytest

from bracketry.domain import Team, is_valid_id
from bracketry.errors import NotFoundError
from bracketry.pool import ConnectionPool
from bracketry.team_repository import TeamRepository


@pytest.fixture
def repository():
    return TeamRepository(ConnectionPool(":memory:"))


def test_create_returns_uuid(repository):
    team_id = repository.create(Team(name="Alpha"))
    assert is_valid_id(team_id)


def test_create_then_read_by_id(repository):
    team_id = repository.create(Team(name="Alpha"))
    assert repository.read_by_id(team_id) == Team(id=team_id, name="Alpha")


def test_read_by_id_missing_returns_none(repository):
    assert repository.read_by_id("missing") is None


def test_read_all_lists_every_team(repository):
    ids = {repository.create(Team(name=name)): name for name in ("Alpha", "Beta", "Gamma")}
    teams = repository.read_all()
    assert {team.id: team.name for team in teams} == ids


def test_read_all_empty(repository):
    assert repository.read_all() == []


def test_update_changes_name_and_returns_document(repository):
    team_id = repository.create(Team(name="Alpha"))
    document = repository.update(Team(id=team_id, name="Beta"))
    assert json.loads(document)["name"] == "Beta"
    assert repository.read_by_id(team_id).name == "Beta"


def test_update_missing_raises(repository):
    with pytest.raises(NotFoundError):
        repository.update(Team(id="missing", name="Nobody"))


def test_delete_removes_team(repository):
    keep = repository.create(Team(name="Keep"))
    gone = repository.create(Team(name="Gone"))
    repository.delete(gone)
    assert repository.read_by_id(gone) is None
    assert [team.id for team in repository.read_all()] == [keep]