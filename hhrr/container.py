"""Wiring of the database pool, repositories, services and buses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar
from urllib.parse import urlsplit

from hhrr.bus import CommandBus, QueryBus
from hhrr.commands import CreateUserCommandHandler, DeleteUserCommandHandler
from hhrr.domain import DemoRepository
from hhrr.queries import FindUserByEmailQueryHandler, FindUserByIdQueryHandler
from hhrr.repositories import PostgreSqlDemoRepository
from hhrr.services import AuthenticateUserService, RegisterUserService


@dataclass(frozen=True)
class DatabasePool:
    """Connection settings for the PostgreSQL database."""

    SCHEMES: ClassVar[frozenset[str]] = frozenset({"postgres", "postgresql"})

    url: str

    @classmethod
    def from_url(cls, url: str) -> DatabasePool:
        """Build a pool for a PostgreSQL URL; raise ValueError if it is not one."""
        scheme = urlsplit(url).scheme
        if scheme not in cls.SCHEMES:
            raise ValueError(f"not a PostgreSQL database URL: {url!r}")
        return cls(url)


class RepositoryContainer:
    """Holds the repositories shared by the handlers."""

    def __init__(self, database_pool: DatabasePool) -> None:
        self.database_pool = database_pool
        self.demo_repository: DemoRepository = PostgreSqlDemoRepository(database_pool)


@dataclass
class ServiceContainer:
    """Holds the application services."""

    authenticate_user_service: AuthenticateUserService = field(default_factory=AuthenticateUserService)
    register_user_service: RegisterUserService = field(default_factory=RegisterUserService)


def create_command_bus(repository_container: RepositoryContainer) -> CommandBus:
    """A command bus with every command handler of the application registered."""
    return CommandBus([CreateUserCommandHandler(), DeleteUserCommandHandler()])


def create_query_bus(repository_container: RepositoryContainer) -> QueryBus:
    """A query bus with every query handler of the application registered."""
    return QueryBus(
        [
            FindUserByIdQueryHandler(repository_container.demo_repository),
            FindUserByEmailQueryHandler(),
        ]
    )