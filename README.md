# bankomat

A small model of a cash machine. A customer identifies themselves with a
login, confirms with a PIN of up to four digits, and can then check the
balance, withdraw cash and deposit cash. Accounts are kept in an SQLite
database. Messages shown to the customer are in Russian.

## Installation

```
pip install .
```

Python 3.10 or later is required. The package uses only the standard
library.

## The database

The machine works with an SQLite file, `users.db` by default, holding a
`users` table:

| column    | meaning                         |
|-----------|---------------------------------|
| `id`      | positive integer identifier     |
| `login`   | the customer's login            |
| `pin`     | the customer's numeric PIN      |
| `balance` | the account balance, in roubles |

The file must already exist; the package neither creates it nor sets up
the table.

## Running

```
bankomat
bankomat --db path/to/users.db
```

Without `--db` the command opens `users.db` in the current directory. If
the file does not exist, the command prints the error to standard error
and exits with status 1.

The command then works line by line on standard input:

1. It asks for the login. An empty or unknown login is reported and the
   login is asked for again.
2. It asks for the PIN. Only the digits of the line are used, and only
   the first four of them. A wrong PIN is reported and the PIN is asked
   for again.
3. It shows a menu:

   ```
   1 - Баланс
   2 - Снять 100
   3 - Снять 500
   4 - Снять 1000
   5 - Снять другую сумму
   6 - Внести
   0 - Выход
   ```

   Choices 5 and 6 ask for an amount. Any other input redisplays the
   menu. Choice 0 says goodbye and returns to the login prompt.

Every refusal is printed as `title: message`. When standard input runs
out, the command exits with status 0.

## Rules the machine enforces

Withdrawals (`Database.withdraw`, `TellerSession.withdraw`,
`TellerSession.withdraw_entered`), checked in this order:

* at most 100 000 roubles at a time;
* the customer must be logged in (a positive user id);
* the amount must be a multiple of 100;
* the amount must be positive;
* the customer must exist, and the account must hold enough money.

Deposits (`Database.deposit`, `TellerSession.deposit_entered`), checked in
this order:

* at most 100 000 roubles at a time;
* the amount must be a multiple of 50;
* the amount must be positive.

Quick withdrawals of 100, 500 and 1000 roubles (`teller.QUICK_AMOUNTS`)
are offered alongside an amount typed by the customer.

## Using it as a library

```python
from bankomat.database import BankError, connect_to_database

with connect_to_database("users.db") as db:
    try:
        user_id = db.check_login("alice")
        if db.check_pin(user_id, 1234):
            db.deposit(user_id, 500)
            db.withdraw(user_id, 200)
            print(db.check_balance(user_id))
    except BankError as error:
        print(error.title, error.message)
```

`bankomat.database`:

* `connect_to_database(path)` opens an existing file and returns a
  `Database`; a missing file raises `BankError`.
* `Database` is a context manager; `close()` closes the connection.
* `check_login(login)` returns the user's id; `check_pin(user_id, pin)`
  returns `True` on a match; `check_balance(user_id)` returns the balance;
  `deposit(user_id, amount)` and `withdraw(user_id, amount)` update it.

Every refusal — an empty or unknown login, a wrong PIN, an amount that
breaks one of the rules above, an unknown user, a database failure — is
raised as `BankError`, whose `title` and `message` carry the text shown to
the customer.

`bankomat.auth.AuthScreen(database, on_authenticated=None)` models the
sign-in screen. `type_text` and `submit_login` (or `key_enter`, which only
acts while the login prompt is active) take the login; `press_digit`,
`backspace` and `cancel` drive the PIN keypad, which accepts at most four
digits; `clear_input` empties the input; `submit_pin` checks the PIN,
moves to `AuthStage.AUTHENTICATED`, calls `on_authenticated` with the
user id if one was given, and returns the id. `reset` returns the screen
to the login prompt. Its state is visible in `text`, `stage` (an
`AuthStage`), `prompt`, `masked`, `enter_enabled`, `keypad_visible` and
`user_id`.

`bankomat.teller.TellerSession(database, user_id, auth=None)` serves a
signed-in customer: `balance_text`, `withdraw`, `withdraw_entered` and
`deposit_entered` return the message to show, and `finish` ends the
session and resets the given `AuthScreen`. `parse_amount(text)` reads a
typed amount, giving 0 for anything that is not a 32-bit integer, so such
input is refused as not positive.

## What it does not do

There is no graphical interface: the machine is driven from the console
or from Python code. It does not create or manage the account database,
and it keeps no record of transactions beyond the balance.

## Tests

```
pip install ".[test]"
pytest
```