"""Storage for users and contracts: in memory, in text files and in a binary file."""

from __future__ import annotations

import csv
import os
import struct
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Iterator, Union

from contractdesk.entities import Contract, User

PathLike = Union[str, "os.PathLike[str]"]

CONTRACTS_FILE = "contracts.txt"
USERS_FILE = "users.txt"
USER_DATA_FILE = "user_data.bin"

# user id, login length, password length; the UTF-8 texts follow.
_USER_RECORD = struct.Struct("<iII")


class ContractRepository:
    """Contracts kept in memory, optionally written to and read from a text file."""

    def __init__(self, path: PathLike | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._contracts: list[Contract] = []

    def add_contract(self, contract: Contract) -> None:
        self._contracts.append(contract)

    def get_contracts(self) -> list[Contract]:
        """Return the stored contracts; the list is a copy, the contracts are not."""
        return list(self._contracts)

    def save_to_file(self, filename: PathLike | None = None) -> None:
        """Write every contract as a CSV row.

        Without a filename the repository's own path is used; a repository
        with neither has nothing to write to and keeps its contracts in memory.
        """
        target = filename if filename is not None else self.path
        if target is None:
            return
        with open(target, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            writer.writerows(
                (c.id, c.user_id, c.description, c.begin_date, c.end_date)
                for c in self._contracts
            )

    def load_from_file(self, filename: PathLike | None = None) -> None:
        """Replace the stored contracts with those in the file, if it exists."""
        source = filename if filename is not None else self.path
        if source is None:
            return
        try:
            handle = open(source, newline="", encoding="utf-8")
        except FileNotFoundError:
            return
        with handle:
            contracts = []
            for row in csv.reader(handle):
                if not row:
                    continue
                contract_id, user_id, description, begin_date, end_date = row
                contracts.append(
                    Contract(int(contract_id), int(user_id), description, begin_date, end_date)
                )
        self._contracts = contracts


class FileContractRepository(ContractRepository):
    """Contracts that are saved on every addition and loaded on first read."""

    def __init__(self, path: PathLike = CONTRACTS_FILE) -> None:
        super().__init__(path)

    def add_contract(self, contract: Contract) -> None:
        super().add_contract(contract)
        self.save_to_file()

    def get_contracts(self) -> list[Contract]:
        if not self._contracts:
            self.load_from_file()
        return super().get_contracts()


class UserRepository:
    """Users kept in memory."""

    def __init__(self) -> None:
        self._users: list[User] = []

    def add_user(self, user: User) -> None:
        self._users.append(user)

    def get_users(self) -> list[User]:
        return list(self._users)


class FileUserRepository(UserRepository):
    """Users appended to a text file, one CSV row each, and read back from it."""

    def __init__(self, path: PathLike = USERS_FILE) -> None:
        super().__init__()
        self.path = Path(path)

    def add_user(self, user: User) -> None:
        try:
            with open(self.path, "a", newline="", encoding="utf-8") as handle:
                csv.writer(handle).writerow((user.id, user.login, user.password))
        except OSError:
            print("Erro ao abrir o arquivo para escrita.", file=sys.stderr)

    def get_users(self) -> list[User]:
        try:
            handle = open(self.path, newline="", encoding="utf-8")
        except OSError:
            print("Erro ao abrir o arquivo para leitura.", file=sys.stderr)
            return []
        with handle:
            return [
                User(int(user_id), login, secret)
                for user_id, login, secret in (row for row in csv.reader(handle) if row)
            ]


class RepositoryFactory(ABC):
    """Creates a matching pair of user and contract repositories."""

    @abstractmethod
    def create_user_repository(self) -> UserRepository:
        """Return a new user repository."""

    @abstractmethod
    def create_contract_repository(self) -> ContractRepository:
        """Return a new contract repository."""


class FileRepositoryFactory(RepositoryFactory):
    """Creates file-backed repositories inside one directory."""

    def __init__(self, directory: PathLike = ".") -> None:
        self.directory = Path(directory)

    def create_user_repository(self) -> FileUserRepository:
        return FileUserRepository(self.directory / USERS_FILE)

    def create_contract_repository(self) -> FileContractRepository:
        return FileContractRepository(self.directory / CONTRACTS_FILE)


def _read_user_records(handle: BinaryIO) -> Iterator[User]:
    while True:
        header = handle.read(_USER_RECORD.size)
        if len(header) < _USER_RECORD.size:
            return
        user_id, login_size, secret_size = _USER_RECORD.unpack(header)
        login = handle.read(login_size)
        secret_data = handle.read(secret_size)
        if len(login) < login_size or len(secret_data) < secret_size:
            return
        yield User(user_id, login.decode(), secret_data.decode())


class UserDAO:
    """Users stored as binary records appended to a file."""

    def save(self, user: User, filename: PathLike = USER_DATA_FILE) -> None:
        login = user.login.encode()
        secret_data = user.password.encode()
        try:
            handle = open(filename, "ab")
        except OSError as exc:
            raise OSError("Não foi possível abrir o arquivo para gravação.") from exc
        with handle:
            handle.write(
                _USER_RECORD.pack(user.id, len(login), len(secret_data))
                + login
                + secret_data
            )

    def load(self, user_id: int, filename: PathLike = USER_DATA_FILE) -> User:
        """Return the first stored user with this id.

        Raises OSError if the file cannot be read and LookupError if no
        record has the id.
        """
        try:
            handle = open(filename, "rb")
        except OSError as exc:
            raise OSError("Não foi possível abrir o arquivo para leitura.") from exc
        with handle:
            for user in _read_user_records(handle):
                if user.id == user_id:
                    return user
        raise LookupError("Usuário não encontrado.")