import pytest

from bracketry.bracket import BracketGenerator
from bracketry.domain import Match, Score, Team, is_valid_id
from bracketry.match_repository import MatchRepository
from bracketry.pool import ConnectionPool

TOURNAMENT = "t-1"


@pytest.fixture
def repository():
    return MatchRepository(ConnectionPool(":memory:"))


def _bracket():
    teams = [Team(id=f"team-{i}", name=f"Team {i}") for i in range(32)]
    return BracketGenerator().generate_matches(TOURNAMENT, teams)


def test_create_bulk_returns_one_id_per_match(repository):
    matches = _bracket()
    ids = repository.create_bulk(matches)
    assert len(ids) == len(matches)
    assert len(set(ids)) == len(ids)
    assert all(is_valid_id(match_id) for match_id in ids)


def test_create_bulk_stores_every_match(repository):
    matches = _bracket()
    ids = repository.create_bulk(matches)
    stored = {m.id: m for m in repository.find_by_tournament_id(TOURNAMENT)}
    assert set(stored) == set(ids)
    for match_id, original in zip(ids, matches):
        assert stored[match_id].name == original.name
        assert stored[match_id].home_team_id == original.home_team_id
        assert stored[match_id].visitor_team_id == original.visitor_team_id


def test_create_bulk_empty(repository):
    assert repository.create_bulk([]) == []
    assert repository.matches_exist_for_tournament(TOURNAMENT) is False


def test_matches_exist_for_tournament(repository):
    repository.create_bulk([Match(name="W0", tournament_id=TOURNAMENT)])
    assert repository.matches_exist_for_tournament(TOURNAMENT) is True
    assert repository.matches_exist_for_tournament("other") is False


def test_find_by_name(repository):
    (match_id,) = repository.create_bulk(
        [Match(name="W0", tournament_id=TOURNAMENT, home_team_id="h", visitor_team_id="v")]
    )
    found = repository.find_by_tournament_id_and_name(TOURNAMENT, "W0")
    assert found == Match(
        id=match_id, name="W0", tournament_id=TOURNAMENT, home_team_id="h", visitor_team_id="v"
    )
    assert repository.find_by_tournament_id_and_name(TOURNAMENT, "W1") is None
    assert repository.find_by_tournament_id_and_name("other", "W0") is None


def test_find_by_match_id(repository):
    (match_id,) = repository.create_bulk([Match(name="L3", tournament_id=TOURNAMENT)])
    assert repository.find_by_tournament_id_and_match_id(TOURNAMENT, match_id).name == "L3"
    assert repository.find_by_tournament_id_and_match_id("other", match_id) is None


def test_update_match_score(repository):
    (match_id,) = repository.create_bulk([Match(name="W0", tournament_id=TOURNAMENT)])
    repository.update_match_score(match_id, Score(home_team_score=2, visitor_team_score=5))
    stored = repository.find_by_tournament_id_and_match_id(TOURNAMENT, match_id)
    assert stored.score == Score(home_team_score=2, visitor_team_score=5)
    assert stored.name == "W0"


def test_update_replaces_match(repository):
    (match_id,) = repository.create_bulk([Match(name="W16", tournament_id=TOURNAMENT)])
    changed = Match(
        id=match_id, name="W16", tournament_id=TOURNAMENT, home_team_id="winner-a"
    )
    repository.update(match_id, changed)
    assert repository.find_by_tournament_id_and_name(TOURNAMENT, "W16") == changed