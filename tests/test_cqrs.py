from dataclasses import dataclass, field

import pytest

from hhrr.cqrs import (
    Command,
    CommandHandler,
    Query,
    QueryHandler,
    QueryResponse,
    UnsupportedMessageError,
)


@dataclass
class Ping(Command):
    text: str


@dataclass
class Other(Command):
    pass


@dataclass
class Lookup(Query):
    key: str


@dataclass
class PongResponse(QueryResponse):
    value: str


@dataclass
class PingHandler(CommandHandler[Ping]):
    seen: list = field(default_factory=list)

    def handle(self, command):
        self.seen.append(command.text)
        return len(self.seen)


class AttributeHandler(CommandHandler):
    command_type = Other

    def handle(self, command):
        return "handled"


class UntypedHandler(CommandHandler):
    def handle(self, command):
        return None


class LookupHandler(QueryHandler[Lookup, PongResponse]):
    def handle(self, query):
        return PongResponse(value=query.key.upper())


class FailingLookupHandler(QueryHandler[Lookup, PongResponse]):
    def handle(self, query):
        raise ValueError(query.key)


def test_command_name_identifies_type():
    assert Command.name(Ping("a")) == Command.name(Ping("b"))
    assert Command.name(Ping("a")) != Command.name(Other())
    assert Command.name(Ping("a")).endswith(".Ping")


def test_handler_command_name_matches_command():
    assert CommandHandler.command_name(PingHandler()) == Command.name(Ping("x"))


def test_handler_type_from_class_attribute():
    handler = AttributeHandler()
    assert CommandHandler.command_name(handler) == Command.name(Other())
    assert CommandHandler.handle_command(handler, Other()) == "handled"


def test_handle_command_reaches_handle():
    handler = PingHandler()
    assert CommandHandler.handle_command(handler, Ping("first")) == 1
    assert CommandHandler.handle_command(handler, Ping("second")) == 2
    assert handler.seen == ["first", "second"]


def test_handle_command_rejects_wrong_type():
    handler = PingHandler()
    with pytest.raises(UnsupportedMessageError):
        CommandHandler.handle_command(handler, Other())
    assert handler.seen == []


def test_handler_name_is_its_own_type():
    handler = PingHandler()
    assert CommandHandler.name(handler).endswith(".PingHandler")
    assert CommandHandler.name(handler) != CommandHandler.command_name(handler)


def test_untyped_handler_has_no_command_name():
    with pytest.raises(TypeError):
        CommandHandler.command_name(UntypedHandler())


def test_query_handler_answers():
    handler = LookupHandler()
    response = QueryHandler.handle_query(handler, Lookup("abc"))
    assert response == PongResponse(value="ABC")
    assert QueryHandler.query_name(handler) == Query.name(Lookup("z"))


def test_query_handler_rejects_wrong_type():
    with pytest.raises(UnsupportedMessageError):
        QueryHandler.handle_query(LookupHandler(), Ping("x"))


def test_query_handler_errors_propagate():
    with pytest.raises(ValueError, match="missing"):
        QueryHandler.handle_query(FailingLookupHandler(), Lookup("missing"))


def test_response_name_is_short_type_name():
    assert QueryResponse.response_name(PongResponse("v")) == "PongResponse"