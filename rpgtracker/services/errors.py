"""
rpgtracker.services.errors — Domain exceptions
===============================================

Raised by the service layer; the API routes translate them to HTTP
responses (404 for a missing user, 400 for an unmet precondition).
"""

from __future__ import annotations


class ProgressionError(Exception):
    """Base class for every per-request progression failure."""


class UserNotFoundError(ProgressionError, LookupError):
    """The referenced user does not exist."""

    def __init__(self, user_id: int) -> None:
        super().__init__("User not found")
        self.user_id = user_id


class PreconditionFailedError(ProgressionError):
    """The user exists but is not eligible for the requested action."""
