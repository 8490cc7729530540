"""Contracts, their snapshots, and users arranged as a composite."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contractdesk.mediator import Mediator


@dataclass(frozen=True)
class ContractMemento:
    """An immutable snapshot of a contract's state."""

    id: int
    user_id: int
    description: str
    begin_date: str
    end_date: str


@dataclass
class Contract:
    id: int
    user_id: int
    description: str
    begin_date: str
    end_date: str

    def save(self) -> ContractMemento:
        """Capture the current state."""
        return ContractMemento(
            self.id, self.user_id, self.description, self.begin_date, self.end_date
        )

    def restore(self, memento: ContractMemento) -> None:
        """Return to a previously captured state."""
        self.id = memento.id
        self.user_id = memento.user_id
        self.description = memento.description
        self.begin_date = memento.begin_date
        self.end_date = memento.end_date


class UserComponent(ABC):
    """A user or a group of users that can talk through a mediator."""

    mediator: Mediator | None = None

    def set_mediator(self, mediator: Mediator | None) -> None:
        self.mediator = mediator

    def send(self, message: str) -> None:
        """Pass a message to the mediator, if one is set."""
        if self.mediator is not None:
            self.mediator.send(message, self)

    @abstractmethod
    def receive(self, message: str) -> None:
        """Accept a message from the mediator."""

    @abstractmethod
    def display(self) -> None:
        """Print a description of this component."""

    def add(self, component: UserComponent) -> None:
        """Leaves have no children; groups override this."""

    def remove(self, component: UserComponent) -> None:
        """Leaves have no children; groups override this."""


@dataclass
class User(UserComponent):
    id: int
    login: str
    password: str
    inbox: list[str] = field(default_factory=list, compare=False, repr=False)

    def receive(self, message: str) -> None:
        self.inbox.append(message)

    def display(self) -> None:
        print(f"{self.id} - {self.login}")


class UserGroup(UserComponent):
    """A named collection of users and nested groups."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.members: list[UserComponent] = []

    def add(self, component: UserComponent) -> None:
        self.members.append(component)

    def remove(self, component: UserComponent) -> None:
        self.members = [member for member in self.members if member is not component]

    def receive(self, message: str) -> None:
        for member in self.members:
            member.receive(message)

    def display(self) -> None:
        print(f"User Group: {self.name}")
        for member in self.members:
            member.display()