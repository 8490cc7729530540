"""Interactive text menus for managing users and contracts."""

from __future__ import annotations

import argparse
import sys
from contextlib import redirect_stdout
from typing import Iterator, TextIO

from contractdesk.controllers import ControllersManager

MAIN_MENU = "Opções:\n\t[1] Usuário\n\t[2] Contrato\n\n"
USER_MENU = "Opções:\n\t[1] Adicionar usuário\n\t[2] Listar usuário\n\t[0] Sair\n\n"
CONTRACT_MENU = (
    "Opções:\n\t[1] Adicionar contrato\n\t[2] Listar contratos\n\t[0] Sair\n\n"
)


class Console:
    """Reads whitespace-separated answers from a stream and drives the controllers."""

    def __init__(
        self,
        manager: ControllersManager | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.manager = manager if manager is not None else ControllersManager.get_instance()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._tokens = self._iter_tokens()

    def _iter_tokens(self) -> Iterator[str]:
        for line in self.stdin:
            yield from line.split()

    def _read(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError from None

    def _read_int(self, default: int) -> int:
        token = self._read()
        try:
            return int(token)
        except ValueError:
            return default

    def _write(self, text: str) -> None:
        print(text, end="", file=self.stdout)

    def run(self) -> None:
        """Show the main menu until the user picks anything but 1 or 2, or input ends."""
        with redirect_stdout(self.stdout):
            try:
                while True:
                    self._write(MAIN_MENU)
                    option = self._read_int(-1)
                    if option == 1:
                        self._user_menu()
                    elif option == 2:
                        self._contract_menu()
                    else:
                        return
            except EOFError:
                return

    def user_menu(self) -> None:
        """Add and list users until the user picks 0 or input ends."""
        with redirect_stdout(self.stdout):
            try:
                self._user_menu()
            except EOFError:
                return

    def contract_menu(self) -> None:
        """Add and list contracts until the user picks 0 or input ends."""
        with redirect_stdout(self.stdout):
            try:
                self._contract_menu()
            except EOFError:
                return

    def _user_menu(self) -> None:
        users = self.manager.user_controller
        while True:
            self._write(USER_MENU)
            option = self._read_int(-1)
            if option == 0:
                return
            if option == 1:
                self._write("Digite o login: ")
                login = self._read()
                self._write("Digite a senha: ")
                secret = self._read()
                users.add_user(login, secret)
            elif option == 2:
                self.manager.list_users()
            self._write("\n")

    def _contract_menu(self) -> None:
        while True:
            self._write(CONTRACT_MENU)
            option = self._read_int(-1)
            if option == 0:
                return
            if option == 1:
                self._add_contract()
            elif option == 2:
                self.manager.list_contracts()
            self._write("\n")

    def _add_contract(self) -> None:
        if not self.manager.user_controller.get_users():
            self._write("Ainda não há usuários cadastrados!\n")
            return
        self._write("Opções de usuários:\n\n")
        self.manager.list_users()
        self._write("Digite o User ID: ")
        user_id = self._read_int(0)
        self._write("Digite a descrição: ")
        description = self._read()
        self._write("Digite a data de início: ")
        begin_date = self._read()
        self._write("Digite a data de término: ")
        end_date = self._read()
        self.manager.contract_controller.add_contract(
            user_id, description, begin_date, end_date
        )


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menus on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="contractdesk", description="Manage users and contracts interactively."
    )
    parser.parse_args(argv)
    Console().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())