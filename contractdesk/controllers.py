"""Controllers for users and contracts, undo history, commands and the shared manager."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import ClassVar

from contractdesk.entities import Contract, ContractMemento, User
from contractdesk.repositories import ContractRepository, UserRepository
from contractdesk.validation import validate_login, validate_password


class ContractCaretaker:
    """A stack of contract snapshots used to undo updates."""

    def __init__(self) -> None:
        self._history: list[ContractMemento] = []

    def __len__(self) -> int:
        return len(self._history)

    def save(self, contract: Contract) -> None:
        self._history.append(contract.save())

    def undo(self, contract: Contract) -> bool:
        """Restore the latest snapshot into the contract; False if there is none."""
        if not self._history:
            return False
        contract.restore(self._history.pop())
        return True


class ContractController:
    def __init__(self, repository: ContractRepository | None = None) -> None:
        self.repository = repository if repository is not None else ContractRepository()
        self._caretaker = ContractCaretaker()

    def add_contract(
        self, user_id: int, description: str, begin_date: str, end_date: str
    ) -> Contract:
        """Create a contract whose id is the number of contracts before it."""
        contract = Contract(
            len(self.get_contracts()), user_id, description, begin_date, end_date
        )
        self.repository.add_contract(contract)
        return contract

    def get_contracts(self) -> list[Contract]:
        return self.repository.get_contracts()

    def find_contract_by_id(self, contract_id: int) -> Contract | None:
        return next(
            (c for c in self.get_contracts() if c.id == contract_id), None
        )

    def update_contract(
        self, contract_id: int, description: str, begin_date: str, end_date: str
    ) -> bool:
        """Change a contract, remembering its old state; False if it does not exist."""
        contract = self.find_contract_by_id(contract_id)
        if contract is None:
            return False
        self._caretaker.save(contract)
        contract.description = description
        contract.begin_date = begin_date
        contract.end_date = end_date
        self.repository.save_to_file()
        return True

    def undo_update(self, contract_id: int) -> bool:
        """Restore the last saved state into the contract; True if anything was restored."""
        contract = self.find_contract_by_id(contract_id)
        if contract is None:
            return False
        restored = self._caretaker.undo(contract)
        self.repository.save_to_file()
        return restored


class UserController:
    def __init__(self, repository: UserRepository | None = None) -> None:
        self.repository = repository if repository is not None else UserRepository()

    def add_user(self, login: str, password: str) -> User | None:
        """Validate and store a user; on a broken rule print its message and store nothing."""
        try:
            validate_login(login)
            validate_password(password)
        except ValueError as error:
            print(error)
            return None
        user = User(len(self.get_users()), login, password)
        self.repository.add_user(user)
        return user

    def get_users(self) -> list[User]:
        return self.repository.get_users()


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        """Carry out the command."""


class AddContractCommand(Command):
    """Adds a contract and persists the repository."""

    def __init__(
        self,
        controller: ContractController,
        user_id: int,
        description: str,
        begin_date: str,
        end_date: str,
    ) -> None:
        self.controller = controller
        self.user_id = user_id
        self.description = description
        self.begin_date = begin_date
        self.end_date = end_date

    def execute(self) -> None:
        self.controller.add_contract(
            self.user_id, self.description, self.begin_date, self.end_date
        )
        self.controller.repository.save_to_file()


class ControllersManager:
    """Holds the application's user and contract controllers."""

    _instance: ClassVar[ControllersManager | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self.user_controller = UserController(UserRepository())
        self.contract_controller = ContractController(ContractRepository())

    @staticmethod
    def get_instance() -> ControllersManager:
        """Return the shared manager, creating it on first use."""
        with ControllersManager._lock:
            if ControllersManager._instance is None:
                ControllersManager._instance = ControllersManager()
            return ControllersManager._instance

    def list_users(self) -> None:
        for user in self.user_controller.get_users():
            print(f"{user.id} - {user.login}")

    def list_contracts(self) -> None:
        for contract in self.contract_controller.get_contracts():
            print(f"{contract.id} - {contract.description}")