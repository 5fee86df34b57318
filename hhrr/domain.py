"""Domain models, events, errors and repository interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID, uuid4

from hhrr.events import Event


class CoreUserEmailExists(Exception):
    """Raised when a core user is registered with an e-mail address already in use."""


@dataclass(frozen=True)
class CoreUserCreatedEvent(Event):
    """A core user has been created."""


@dataclass(frozen=True)
class CoreUser:
    """A user of the system; new users start unpublished."""

    title: str
    body: str
    id: str = "id"
    is_published: bool = False


class UserRepository(ABC):
    """Storage of core users."""

    @abstractmethod
    def find_user_by_id(self, user_id: str) -> Optional[CoreUser]:
        """Look up a core user by its identifier."""


@dataclass
class DemoModel:
    """A demo entry; a new one gets a random identifier and starts unpublished."""

    title: str
    body: str
    id: UUID = field(default_factory=uuid4)
    is_published: bool = False


class DemoRepository(ABC):
    """Storage of demo entries."""

    @abstractmethod
    def find_something_by_id(self, user_id: UUID) -> Optional[DemoModel]:
        """Return the entry with the given identifier, or None if there is none.

        Storage failures are raised as exceptions.
        """