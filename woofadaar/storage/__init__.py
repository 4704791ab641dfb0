"""Storage layer - plain CRUD repositories without business logic."""

from . import achievement_repo, chain_repo, points_repo, user_repo

__all__ = ["achievement_repo", "chain_repo", "points_repo", "user_repo"]
