"""
Gamification errors.

Raised by the domain layer and never caught there; callers decide how to
surface them (HTTP 400/500, log-and-skip, ...).
"""

from typing import Any


class GamificationError(Exception):
    """Base class for all gamification engine errors."""


class InvalidActionError(GamificationError):
    """Action id is not present in the action catalog."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Unknown action: {action!r}")


class InvalidCatalogError(GamificationError):
    """Achievement/chain/points catalog failed validation at load time."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        self.errors = errors or []
        super().__init__(message)


class InvalidInputError(GamificationError):
    """Caller passed a value the engine cannot interpret."""
