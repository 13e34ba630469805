# bracketry

Building blocks for 32-team double-elimination tournaments.

bracketry provides:

- a domain model: `Team`, `Group`, `Match` with its `Score`, and
  `Tournament` with its `TournamentFormat` (`bracketry.domain`);
- conversion of that model to and from JSON-ready dictionaries
  (`bracketry.serialization`);
- generation of the full 63-match bracket: winners bracket `W0`–`W30`,
  losers bracket `L0`–`L29` and finals `F0`–`F1` (`bracketry.bracket`);
- abstract repository interfaces (`bracketry.repositories`) and
  implementations for teams, groups and matches
  (`bracketry.team_repository`, `bracketry.group_repository`,
  `bracketry.match_repository`) over a pool of connections
  (`bracketry.pool`);
- configuration loading (`bracketry.config`);
- the exceptions used throughout (`bracketry.errors`).

There are no third-party dependencies.

## Generating a bracket

```python
from bracketry.bracket import BracketGenerator
from bracketry.domain import Team

teams = [Team(id=f"team-{n}", name=f"Team {n}") for n in range(32)]
matches = BracketGenerator().generate_matches("tournament-1", teams)

len(matches)               # 63
matches[0].name            # "W0"
matches[0].home_team_id    # "team-0"
matches[0].visitor_team_id # "team-1"
matches[-1].name           # "F1"
```

Only the sixteen first-round winners matches (`W0`–`W15`) have teams
assigned; every other match starts empty. Exactly 32 teams are required; any
other number raises `ValueError`.

`Score.winner()` returns `Winner.HOME` when the home side scored more, and
`Winner.VISITOR` otherwise, ties included.

## JSON documents

`bracketry.serialization` turns entities into plain dictionaries and back,
using camel-case keys (`tournamentId`, `homeTeamId`, `maxTeamsPerGroup`, ...):

```python
from bracketry.domain import Match, Score
from bracketry.serialization import match_from_dict, match_to_dict

doc = match_to_dict(Match(name="W0", score=Score(2, 1)))
# {"name": "W0", "score": {"homeTeamScore": 2, "visitorTeamScore": 1}}
match_from_dict(doc).score.winner()   # Winner.HOME
```

Empty string fields of a match are left out of its document. A missing
required field (a team's, group's or tournament's `"name"`) or a value of the
wrong type raises `InvalidFormatError`. An unknown tournament type falls
back to `TournamentType.DOUBLE_ELIMINATION`.

## Storage

`ConnectionPool` opens a fixed number of connections and hands them out one
at a time, blocking while all are in use. By default it opens SQLite
databases (the connection string is the database path, or a `file:` URI) and
creates the `tournaments`, `teams`, `groups` and `matches` tables, each row
holding a JSON document under a generated UUID. Queries are run by name with
`execute(statement, params)`, which returns rows as dictionaries; a
different connection factory, statement set and schema may be passed in.

```python
from bracketry.pool import ConnectionPool
from bracketry.team_repository import TeamRepository
from bracketry.group_repository import GroupRepository
from bracketry.match_repository import MatchRepository
from bracketry.domain import Group, Team

pool = ConnectionPool(":memory:")
teams = TeamRepository(pool)
team_id = teams.create(Team(name="Falcons"))
teams.read_by_id(team_id).name        # "Falcons"

groups = GroupRepository(pool)
group_id = groups.create(Group(name="A", tournament_id="tournament-1"))
groups.update_group_add_team(group_id, Team(id=team_id, name="Falcons"))
groups.find_by_group_id_and_team_id(group_id, team_id).name   # "A"

matches = MatchRepository(pool)
ids = matches.create_bulk(generated_matches)   # one transaction, ids in order
matches.find_by_tournament_id_and_name("tournament-1", "W0")
```

Lookups return `None` when nothing matches. `TeamRepository.update` merges
the team into its stored document and returns that document as JSON text,
raising `NotFoundError` if the team does not exist. `GroupRepository.read_all`
returns groups with only their id and name filled in.

## Configuration

`load_configuration(path)` reads a JSON file (by default
`configuration.json`) and returns its top-level object.
`DatabaseConfiguration.from_dict` reads `connectionString` and an optional
`poolSize` (default 1); `RunConfiguration.from_dict` reads `port` and
`concurrency`. Missing fields, wrong types and invalid JSON raise
`InvalidFormatError`.

## Errors

Failures are raised as subclasses of `bracketry.errors.TournamentError`, each
carrying an `ErrorKind`: `NotFoundError` (also a `LookupError`),
`DuplicateError` and `InvalidFormatError` (also a `ValueError`).

## Identifiers

`bracketry.domain.is_valid_id` checks that a string is a UUID in the
canonical 8-4-4-4-12 hexadecimal form.

## What bracketry does not do

- It has no storage for tournaments themselves; only teams, groups and
  matches have repositories.
- It does not move winners and losers on to their next matches after a
  score is recorded; scores are stored, but advancing through the bracket is
  left to the caller.
- It has no message queue, listeners or event handling, and no HTTP server
  or command-line program. It is a library to be used from your own code.