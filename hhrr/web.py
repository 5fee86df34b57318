"""HTTP interface of the application."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Optional, Sequence
from uuid import UUID

from dotenv import find_dotenv, load_dotenv
from flask import Blueprint, Flask, abort, current_app, jsonify, request

from hhrr.bus import CommandBus, QueryBus
from hhrr.commands import CreateUserCommand, DeleteUserCommand
from hhrr.container import (
    DatabasePool,
    RepositoryContainer,
    ServiceContainer,
    create_command_bus,
    create_query_bus,
)
from hhrr.queries import (
    FindUserByEmailQuery,
    FindUserByEmailQueryResponse,
    FindUserByIdQuery,
    FindUserByIdQueryResponse,
)

_EXTENSION_KEY = "hhrr"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8081


@dataclass(frozen=True)
class _AppState:
    service_container: ServiceContainer
    command_bus: CommandBus
    query_bus: QueryBus


def _state() -> _AppState:
    return current_app.extensions[_EXTENSION_KEY]


def create_demo_blueprint() -> Blueprint:
    """Routes of the demo user commands and queries."""
    blueprint = Blueprint("demo", __name__)

    @blueprint.get("/query-user-by-id/<user_id>")
    def query_user_by_id(user_id: str):
        try:
            parsed = UUID(user_id)
        except ValueError:
            abort(400, description=f"invalid user id: {user_id}")
        response = _state().query_bus.dispatch_query(FindUserByIdQuery(user_id=parsed))
        if not isinstance(response, FindUserByIdQueryResponse):
            raise TypeError(f"unexpected response {type(response).__qualname__}")
        return jsonify(response.user_name)

    @blueprint.get("/query-user-by-email/<user_email>")
    def query_user_by_email(user_email: str):
        response = _state().query_bus.dispatch_query(FindUserByEmailQuery(user_email=user_email))
        if not isinstance(response, FindUserByEmailQueryResponse):
            raise TypeError(f"unexpected response {type(response).__qualname__}")
        return jsonify(response.user_name)

    @blueprint.post("/create-user")
    def create_user():
        _state().command_bus.dispatch_command(CreateUserCommand(user_name="Pep"))
        return jsonify("")

    @blueprint.delete("/delete-user")
    def delete_user():
        _state().command_bus.dispatch_command(DeleteUserCommand(user_id="Pop"))
        return jsonify("")

    return blueprint


def create_authentication_blueprint() -> Blueprint:
    """Routes for logging in and registering."""
    blueprint = Blueprint("authentication", __name__)

    @blueprint.post("/login")
    def login():
        print(request.get_data(as_text=True), end="")
        result = _state().service_container.authenticate_user_service.authenticate_user()
        return current_app.response_class(
            current_app.json.dumps(result), mimetype="application/json"
        )

    @blueprint.post("/register")
    def register():
        return jsonify(request.get_data(as_text=True))

    return blueprint


def create_app(
    service_container: ServiceContainer, command_bus: CommandBus, query_bus: QueryBus
) -> Flask:
    """The web application, serving the demo routes under /demo."""
    app = Flask(__name__)
    app.extensions[_EXTENSION_KEY] = _AppState(service_container, command_bus, query_bus)
    app.register_blueprint(create_demo_blueprint(), url_prefix="/demo")
    return app


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Start the web server."""
    parser = argparse.ArgumentParser(description="Run the HR management web service.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    load_dotenv(find_dotenv(usecwd=True))
    logging.basicConfig(level=logging.INFO)

    database_url = os.environ.get("DATABASE_URL")
    if database_url is None:
        raise SystemExit("DATABASE_URL is not set")
    try:
        pool = DatabasePool.from_url(database_url)
    except ValueError as error:
        raise SystemExit(str(error)) from error

    repository_container = RepositoryContainer(pool)
    app = create_app(
        ServiceContainer(),
        create_command_bus(repository_container),
        create_query_bus(repository_container),
    )
    app.run(host=args.host, port=args.port)