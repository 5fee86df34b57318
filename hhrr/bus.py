"""Buses that route commands and queries to their handlers."""

from __future__ import annotations

from typing import Any, Iterable

from hhrr.cqrs import Command, CommandHandler, Query, QueryHandler, QueryResponse


class HandlerNotFoundError(LookupError):
    """Raised when no handler is registered for a dispatched message."""


class CommandBus:
    """Routes each command to the handler registered for its type."""

    def __init__(self, handlers: Iterable[CommandHandler[Any]] = ()) -> None:
        self._handlers: dict[str, CommandHandler[Any]] = {}
        for handler in handlers:
            self.register(handler)

    def register(self, handler: CommandHandler[Any]) -> None:
        """Register a handler; it replaces any earlier one for the same command type."""
        self._handlers[handler.command_name()] = handler

    def dispatch_command(self, command: Command) -> None:
        """Hand the command to its handler."""
        key = command.name()
        try:
            handler = self._handlers[key]
        except KeyError:
            raise HandlerNotFoundError(f"no command handler registered for {key}") from None
        handler.handle_command(command)


class QueryBus:
    """Routes each query to the handler registered for its type."""

    def __init__(self, handlers: Iterable[QueryHandler[Any, Any]] = ()) -> None:
        self._handlers: dict[str, QueryHandler[Any, Any]] = {}
        for handler in handlers:
            self.register(handler)

    def register(self, handler: QueryHandler[Any, Any]) -> None:
        """Register a handler; it replaces any earlier one for the same query type."""
        self._handlers[handler.query_name()] = handler

    def dispatch_query(self, query: Query) -> QueryResponse:
        """Hand the query to its handler and return the response."""
        key = query.name()
        try:
            handler = self._handlers[key]
        except KeyError:
            raise HandlerNotFoundError(f"no query handler registered for {key}") from None
        return handler.handle_query(query)