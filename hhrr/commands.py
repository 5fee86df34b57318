"""Commands of the application and their handlers."""

from __future__ import annotations

from dataclasses import dataclass

from hhrr.cqrs import Command, CommandHandler


@dataclass(frozen=True)
class CreateCoreUserCommand:
    """A request to create a core user."""


@dataclass
class CreateCoreUserCommandHandler:
    """Creates core users for an e-mail address."""

    email: str


@dataclass(frozen=True)
class CreateUserCommand(Command):
    """A request to create a user."""

    user_name: str


class CreateUserCommandHandler(CommandHandler[CreateUserCommand]):
    """Creates users."""

    def handle(self, command: CreateUserCommand) -> None:
        print(f"Creating user: {command.user_name}")


@dataclass(frozen=True)
class DeleteUserCommand(Command):
    """A request to delete a user."""

    user_id: str


class DeleteUserCommandHandler(CommandHandler[DeleteUserCommand]):
    """Deletes users."""

    def handle(self, command: DeleteUserCommand) -> None:
        print(f"Deleting user with ID: {command.user_id}")