# contractdesk

A small console application for keeping a list of users and the contracts
assigned to them. It has no dependencies outside the standard library.

## Installing

```
pip install .
```

## Running

```
contractdesk
```

The program reads whitespace-separated answers from standard input. It first
shows a main menu:

```
Opções:
	[1] Usuário
	[2] Contrato
```

Any other choice ends the program. An answer that is not a number counts as
any other choice. The program also ends when input runs out.

### Users

- **[1] Adicionar usuário** asks for a login and a password and registers the
  user. The user's id is the number of users registered before it.
- **[2] Listar usuário** prints every user as `id - login`.
- **[0] Sair** returns to the main menu.

A login must not be empty. It may be at most 12 characters long and must not
contain digits.

A password must meet these rules, checked in this order:

- it is between 8 and 128 characters long;
- it has an uppercase letter;
- it has a lowercase letter;
- it has a digit;
- it has one of the special characters `@$!%*?&#`.

If a login or password breaks a rule, the program prints the message for the
first rule broken. It does not add the user.

### Contracts

- **[1] Adicionar contrato** lists the registered users. It then asks for a
  user id, a description, a begin date and an end date. The contract's id is
  the number of contracts added before it. If no user has been registered
  yet, the program says so and asks for nothing. The user id is not checked
  against the registered users. A user id that is not a number is taken as 0.
- **[2] Listar contratos** prints every contract as `id - description`.
- **[0] Sair** returns to the main menu.

Each answer is one word, so a description or a date cannot contain spaces.

## Using the library

### Validation

`contractdesk.validation` has the login and password rules.
`validate_login(login)` and `validate_password(password)` raise `ValueError`
with the message of the first rule that is broken:

```python
from contractdesk.validation import validate_password

password = "password"
try:
    validate_password(password)
except ValueError as error:
    print(error)  # A senha deve conter pelo menos uma letra maiúscula.
```

The password rules are a chain of `PasswordValidator` objects:
`LengthValidator`, `UppercaseValidator`, `LowercaseValidator`,
`DigitValidator` and `SpecialCharValidator`. `set_next()` links one validator
to the next and returns the one it linked. `validate()` runs the chain.

### Controllers

```python
from contractdesk.controllers import ContractController
from contractdesk.repositories import ContractRepository

contracts = ContractController(ContractRepository())
contracts.add_contract(0, "Maintenance", "2024-01-01", "2024-12-31")
contracts.update_contract(0, "Maintenance and support", "2024-01-01", "2025-06-30")
contracts.undo_update(0)  # restores the previous description and dates
```

`update_contract` and `undo_update` return `False` when no contract has the
given id. Each update saves a snapshot of the contract first, and
`undo_update` restores the newest snapshot. `UserController.add_user`
validates the login and password, then stores and returns the new `User`. If a
rule is broken, it prints the message and returns `None`.

`AddContractCommand` wraps an addition to a `ContractController` as a command
object. `ControllersManager.get_instance()` returns one shared manager. The
manager holds a user controller and a contract controller, both working in
memory.

### Storage

`contractdesk.repositories` offers these stores:

- `UserRepository` and `ContractRepository` keep their data in memory.
- `ContractRepository.save_to_file()` and `load_from_file()` write and read
  contracts as CSV rows.
- `FileContractRepository` saves on every addition. It loads from its file on
  the first read when it is empty.
- `FileUserRepository` appends each user as a CSV row and reads them all back.
- `FileRepositoryFactory(directory)` creates both file-backed repositories.
  They use `users.txt` and `contracts.txt` inside the given directory.
- `UserDAO` appends users as binary records, by default to `user_data.bin`.
  It loads a user by id. It raises `LookupError` when no record has that id.

### Other pieces

- `contractdesk.entities`: `User` and `UserGroup` form a composite.
- `contractdesk.mediator`: `UserMediator` passes a message from one registered
  component to all the others.
- `contractdesk.reports`: `HtmlReport` and `PdfReport` run gather, format and
  save in order through `generate()`.
- `contractdesk.notifications`: `NotificationAdapter.notify()` prints
  `Notification sent: <message>`.

## What it does not do

- The `contractdesk` command keeps users and contracts in memory only.
  Everything entered is lost when the program ends.
- The menus cannot update contracts or undo updates. Those are available
  only through `ContractController`.
- The reports only print a message for each step. They do not write HTML or
  PDF files.
- Notifications are printed, not sent anywhere.

## Tests

```
pip install .[test]
pytest
```