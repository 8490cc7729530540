"""Login rules and a chain of password validators."""

from __future__ import annotations

import string
from abc import ABC, abstractmethod

SPECIAL_CHARACTERS = "@$!%*?&#"
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128
MAX_LOGIN_LENGTH = 12


def _contains_any(text: str, alphabet: str) -> bool:
    return any(char in alphabet for char in text)


class PasswordValidator(ABC):
    """One link in a chain of password checks."""

    def __init__(self) -> None:
        self.next_handler: PasswordValidator | None = None

    def set_next(self, handler: PasswordValidator) -> PasswordValidator:
        """Attach the validator that runs after this one and return it."""
        self.next_handler = handler
        return handler

    def validate(self, password: str) -> None:
        """Run this check, then the rest of the chain.

        Raises ValueError at the first rule the password breaks.
        """
        self.check(password)
        if self.next_handler is not None:
            self.next_handler.validate(password)

    @abstractmethod
    def check(self, password: str) -> None:
        """Raise ValueError if the password breaks this rule."""


class LengthValidator(PasswordValidator):
    def check(self, password: str) -> None:
        if not MIN_PASSWORD_LENGTH <= len(password) <= MAX_PASSWORD_LENGTH:
            raise ValueError("A senha deve ter entre 8 e 128 caracteres.")


class UppercaseValidator(PasswordValidator):
    def check(self, password: str) -> None:
        if not _contains_any(password, string.ascii_uppercase):
            raise ValueError("A senha deve conter pelo menos uma letra maiúscula.")


class LowercaseValidator(PasswordValidator):
    def check(self, password: str) -> None:
        if not _contains_any(password, string.ascii_lowercase):
            raise ValueError("A senha deve conter pelo menos uma letra minúscula.")


class DigitValidator(PasswordValidator):
    def check(self, password: str) -> None:
        if not _contains_any(password, string.digits):
            raise ValueError("A senha deve conter pelo menos um número.")


class SpecialCharValidator(PasswordValidator):
    def check(self, password: str) -> None:
        if not _contains_any(password, SPECIAL_CHARACTERS):
            raise ValueError(
                "A senha deve conter pelo menos um caractere especial (@$!%*?&#)."
            )


def validate_login(login: str) -> None:
    """Raise ValueError unless the login is 1-12 characters without digits."""
    if not login:
        raise ValueError("O email não deve ser vazio")
    if len(login) > MAX_LOGIN_LENGTH:
        raise ValueError("O email deve ter no máximo 12 caracteres")
    if _contains_any(login, string.digits):
        raise ValueError("O email não deve conter números")


def validate_password(password: str) -> None:
    """Check length, upper case, lower case, digit and special character, in that order."""
    chain = LengthValidator()
    chain.set_next(UppercaseValidator()).set_next(LowercaseValidator()).set_next(
        DigitValidator()
    ).set_next(SpecialCharValidator())
    chain.validate(password)