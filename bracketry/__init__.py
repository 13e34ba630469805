"""Double-elimination tournament brackets: domain model, JSON documents, bracket generation and pooled storage."""

__version__ = "0.1.0"

__all__ = [
    "bracket",
    "config",
    "domain",
    "errors",
    "group_repository",
    "match_repository",
    "pool",
    "repositories",
    "serialization",
    "team_repository",
]