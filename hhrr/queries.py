"""Queries of the application, their responses and handlers."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from hhrr.cqrs import Query, QueryHandler, QueryResponse
from hhrr.domain import DemoRepository


class UserNotFoundError(LookupError):
    """Raised when no user matches a query."""


@dataclass(frozen=True)
class FindUserByEmailQuery(Query):
    """Find a user by e-mail address."""

    user_email: str


@dataclass(frozen=True)
class FindUserByEmailQueryResponse(QueryResponse):
    """The user found by e-mail address."""

    user_name: str


class FindUserByEmailQueryHandler(QueryHandler[FindUserByEmailQuery, FindUserByEmailQueryResponse]):
    """Answers look-ups by e-mail address."""

    def handle(self, query: FindUserByEmailQuery) -> FindUserByEmailQueryResponse:
        print(f"Searching user by email: {query.user_email}")
        return FindUserByEmailQueryResponse(user_name="asd")


@dataclass(frozen=True)
class FindUserByIdQuery(Query):
    """Find a user by identifier."""

    user_id: UUID


@dataclass(frozen=True)
class FindUserByIdQueryResponse(QueryResponse):
    """The user found by identifier."""

    user_name: str


class FindUserByIdQueryHandler(QueryHandler[FindUserByIdQuery, FindUserByIdQueryResponse]):
    """Answers look-ups by identifier from the demo repository."""

    def __init__(self, demo_repository: DemoRepository) -> None:
        self._demo_repository = demo_repository

    def handle(self, query: FindUserByIdQuery) -> FindUserByIdQueryResponse:
        model = self._demo_repository.find_something_by_id(query.user_id)
        if model is None:
            raise UserNotFoundError(f"no user with id {query.user_id}")
        return FindUserByIdQueryResponse(user_name=model.title)