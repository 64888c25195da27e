"""Error record carried by failed results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Error:
    """A machine-readable code with an optional human-readable message.

    ``message=None`` means no message was given and is distinct from ``""``.
    """

    code: str
    message: Optional[str] = None

    def __str__(self) -> str:
        if self.message is None:
            return self.code
        return f"{self.code}: {self.message}"
