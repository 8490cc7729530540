"""Message passing between user components."""

from __future__ import annotations

from abc import ABC, abstractmethod

from contractdesk.entities import User, UserComponent, UserGroup


class Mediator(ABC):
    @abstractmethod
    def send(self, message: str, sender: UserComponent) -> None:
        """Deliver a message from the sender to the other components."""


class UserMediator(Mediator):
    """Broadcasts each message to every registered component but its sender."""

    def __init__(self) -> None:
        self.components: list[UserComponent] = []
        self.permission_changes: list[tuple[User, UserGroup]] = []

    def register_component(self, component: UserComponent) -> None:
        self.components.append(component)

    def send(self, message: str, sender: UserComponent) -> None:
        for component in self.components:
            if component is not sender:
                component.receive(message)

    def change_permission_policy(self, user: User, user_group: UserGroup) -> None:
        """Record that the user adjusted the group's permission policy and report it."""
        self.permission_changes.append((user, user_group))
        print("permissão para grupo de usuários ajustada")