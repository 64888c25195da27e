"""Data records flowing through the registration pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True, slots=True)
class UserData:
    """Validated registration input, before the user is created."""

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class User:
    """A registered user."""

    email: str
    hashed_password: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if self.created_at.tzinfo is None:
            raise ValueError("created_at must be timezone-aware")
