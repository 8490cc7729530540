import pytest

from contractdesk.validation import (
    DigitValidator,
    LengthValidator,
    LowercaseValidator,
    PasswordValidator,
    SpecialCharValidator,
    UppercaseValidator,
    validate_login,
    validate_password,
)

LENGTH_MSG = "A senha deve ter entre 8 e 128 caracteres."
UPPER_MSG = "A senha deve conter pelo menos uma letra maiúscula."
LOWER_MSG = "A senha deve conter pelo menos uma letra minúscula."
DIGIT_MSG = "A senha deve conter pelo menos um número."
SPECIAL_MSG = "A senha deve conter pelo menos um caractere especial (@$!%*?&#)."


class _Recorder(PasswordValidator):
    def __init__(self):
        super().__init__()
        self.seen = []

    def check(self, password):
        self.seen.append(password)


def test_length_accepts_bounds_and_passes_on():
    for text in ("x" * 8, "x" * 128):
        tail = _Recorder()
        head = LengthValidator()
        head.set_next(tail)
        head.validate(text)
        assert tail.seen == [text]


@pytest.mark.parametrize("text", ["", "x" * 7, "x" * 129])
def test_length_rejects(text):
    with pytest.raises(ValueError, match=LENGTH_MSG.replace(".", r"\.")):
        LengthValidator().validate(text)


@pytest.mark.parametrize(
    "validator, bad, good, message",
    [
        (UppercaseValidator(), "abc", "aBc", UPPER_MSG),
        (LowercaseValidator(), "ABC", "AbC", LOWER_MSG),
        (DigitValidator(), "abc", "ab3", DIGIT_MSG),
        (SpecialCharValidator(), "abc", "a#c", SPECIAL_MSG),
    ],
)
def test_single_rules(validator, bad, good, message):
    with pytest.raises(ValueError) as info:
        validator.check(bad)
    assert str(info.value) == message
    tail = _Recorder()
    validator.set_next(tail)
    validator.validate(good)
    assert tail.seen == [good]


def test_failure_stops_chain():
    tail = _Recorder()
    head = DigitValidator()
    head.set_next(tail)
    with pytest.raises(ValueError):
        head.validate("nodigits")
    assert tail.seen == []


def test_set_next_returns_handler():
    head = LengthValidator()
    tail = _Recorder()
    assert head.set_next(tail) is tail
    assert head.next_handler is tail


@pytest.mark.parametrize(
    "text, message",
    [
        ("Ab1@", LENGTH_MSG),
        ("abcdefg1@", UPPER_MSG),
        ("ABCDEFG1@", LOWER_MSG),
        ("Abcdefgh@", DIGIT_MSG),
        ("Abcdefgh1", SPECIAL_MSG),
        ("abcdefgh", UPPER_MSG),
    ],
)
def test_validate_password_reports_first_broken_rule(text, message):
    with pytest.raises(ValueError) as info:
        validate_password(text)
    assert str(info.value) == message


@pytest.mark.parametrize("char", list("@$!%*?&#"))
def test_every_special_character_counts(char):
    tail = _Recorder()
    head = SpecialCharValidator()
    head.set_next(tail)
    head.validate("abc" + char)
    assert tail.seen == ["abc" + char]


@pytest.mark.parametrize(
    "login, message",
    [
        ("", "O email não deve ser vazio"),
        ("abcdefghijklm", "O email deve ter no máximo 12 caracteres"),
        ("alice1", "O email não deve conter números"),
    ],
)
def test_validate_login_rejects(login, message):
    with pytest.raises(ValueError) as info:
        validate_login(login)
    assert str(info.value) == message


def test_length_checked_before_digits():
    with pytest.raises(ValueError) as info:
        validate_login("a1234567890123")
    assert str(info.value) == "O email deve ter no máximo 12 caracteres"