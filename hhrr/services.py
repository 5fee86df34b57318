"""Application services for authentication and registration."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, TextIO


def _report(stream: Optional[TextIO], message: str) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(message + "\n")
    out.flush()


@dataclass
class AuthenticateUserService:
    """Authenticates users, reporting each attempt on a text stream."""

    stream: Optional[TextIO] = None

    def authenticate_user(self) -> None:
        """Authenticate a user, reporting it on the service's stream."""
        _report(self.stream, "Authenticate!")


@dataclass
class RegisterUserService:
    """Registers users, reporting each registration on a text stream."""

    stream: Optional[TextIO] = None

    def register_user(self) -> None:
        """Register a user, reporting it on the service's stream."""
        _report(self.stream, "Register!")