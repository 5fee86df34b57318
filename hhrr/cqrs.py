"""Commands, queries and the handlers that serve them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Optional, TypeVar, get_args, get_origin


def _type_name(cls: type) -> str:
    """Fully qualified name of a class, used as a routing key."""
    return f"{cls.__module__}.{cls.__qualname__}"


def _subscripted_type(cls: type, origin: type) -> Optional[type]:
    """The first type argument given to ``origin[...]`` among the bases of ``cls``."""
    for base in cls.__dict__.get("__orig_bases__", ()):
        if get_origin(base) is origin:
            arguments = get_args(base)
            if arguments and isinstance(arguments[0], type):
                return arguments[0]
    return None


class UnsupportedMessageError(TypeError):
    """Raised when a handler is given a message of a type it does not serve."""


class Command:
    """A request to change the state of the system."""

    def name(self) -> str:
        """The routing key of this command: its fully qualified type name."""
        return _type_name(type(self))


class Query:
    """A request to read the state of the system."""

    def name(self) -> str:
        """The routing key of this query: its fully qualified type name."""
        return _type_name(type(self))


class QueryResponse:
    """The answer a query handler gives."""

    def response_name(self) -> str:
        """The short name of the response type."""
        return type(self).__name__


C = TypeVar("C", bound=Command)
Q = TypeVar("Q", bound=Query)
R = TypeVar("R", bound=QueryResponse)


class CommandHandler(ABC, Generic[C]):
    """Handles one type of command.

    The served command type is taken from ``CommandHandler[SomeCommand]`` in the
    class bases, or from a ``command_type`` class attribute.
    """

    command_type: ClassVar[Optional[type]] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "command_type" not in cls.__dict__:
            served = _subscripted_type(cls, CommandHandler)
            if served is not None:
                cls.command_type = served

    def _served_type(self) -> type:
        if self.command_type is None:
            raise TypeError(f"{type(self).__qualname__} does not declare the command type it handles")
        return self.command_type

    @abstractmethod
    def handle(self, command: C) -> Any:
        """Carry out the command."""

    def handle_command(self, command: Command) -> Any:
        """Check that the command is of the served type, then handle it."""
        served = self._served_type()
        if not isinstance(command, served):
            raise UnsupportedMessageError(
                f"{type(self).__qualname__} cannot handle {type(command).__qualname__}"
            )
        return self.handle(command)

    def name(self) -> str:
        """The fully qualified name of this handler."""
        return _type_name(type(self))

    def command_name(self) -> str:
        """The routing key of the command type this handler serves."""
        return _type_name(self._served_type())


class QueryHandler(ABC, Generic[Q, R]):
    """Handles one type of query and answers it with a response.

    The served query type is taken from ``QueryHandler[SomeQuery, SomeResponse]``
    in the class bases, or from a ``query_type`` class attribute.
    """

    query_type: ClassVar[Optional[type]] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "query_type" not in cls.__dict__:
            served = _subscripted_type(cls, QueryHandler)
            if served is not None:
                cls.query_type = served

    def _served_type(self) -> type:
        if self.query_type is None:
            raise TypeError(f"{type(self).__qualname__} does not declare the query type it handles")
        return self.query_type

    @abstractmethod
    def handle(self, query: Q) -> R:
        """Answer the query."""

    def handle_query(self, query: Query) -> QueryResponse:
        """Check that the query is of the served type, then answer it."""
        served = self._served_type()
        if not isinstance(query, served):
            raise UnsupportedMessageError(
                f"{type(self).__qualname__} cannot handle {type(query).__qualname__}"
            )
        return self.handle(query)

    def name(self) -> str:
        """The fully qualified name of this handler."""
        return _type_name(type(self))

    def query_name(self) -> str:
        """The routing key of the query type this handler serves."""
        return _type_name(self._served_type())