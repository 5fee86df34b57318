"""Database rows for demo entries and the repository that serves them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional
from uuid import UUID

from hhrr.domain import DemoModel, DemoRepository

_TABLE_NAME = "demo_models"
_COLUMNS = ("id", "title", "body", "is_published")


@dataclass
class CreateDemoUser:
    """A demo entry row as written on creation."""

    table_name: ClassVar[str] = _TABLE_NAME
    columns: ClassVar[tuple[str, ...]] = _COLUMNS

    id: UUID
    title: str
    body: str
    is_published: bool

    def to_domain_model(self) -> DemoModel:
        """A domain model holding a copy of this row's values."""
        return DemoModel(
            id=self.id,
            title=self.title,
            body=self.body,
            is_published=self.is_published,
        )


@dataclass
class ViewDemoUser:
    """A demo entry row as read back."""

    table_name: ClassVar[str] = _TABLE_NAME
    columns: ClassVar[tuple[str, ...]] = _COLUMNS

    id: UUID
    title: str
    body: str
    is_published: bool

    def to_domain_model(self) -> DemoModel:
        """A domain model holding a copy of this row's values."""
        return DemoModel(
            id=self.id,
            title=self.title,
            body=self.body,
            is_published=self.is_published,
        )


class PostgreSqlDemoRepository(DemoRepository):
    """Demo repository backed by a PostgreSQL connection pool."""

    def __init__(self, database_pool: Any) -> None:
        self.database_pool = database_pool

    def find_something_by_id(self, user_id: UUID) -> Optional[DemoModel]:
        """Return an empty, unpublished entry carrying the requested identifier."""
        return DemoModel(id=user_id, title="", body="", is_published=False)