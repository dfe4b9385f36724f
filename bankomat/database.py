"""Access to the account database of the teller machine."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Any

DEFAULT_DB_PATH = "users.db"
MAX_AMOUNT = 100_000

_DB_TITLE = "Ошибка БД"
_ERROR_TITLE = "Ошибка"
_NOT_FOUND_TITLE = "Пользователь не найден"
_NOT_FOUND_BY_ID = "Пользователь с таким ID не найден."


class BankError(Exception):
    """An operation was refused; ``title`` and ``message`` describe why."""

    def __init__(self, message: str, title: str = _ERROR_TITLE) -> None:
        super().__init__(message)
        self.message = message
        self.title = title


def _to_int(value: Any) -> int:
    """Convert a stored value to int, yielding 0 when it is not a number."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


class Database:
    """Queries and updates on the ``users`` table (id, login, pin, balance)."""

    def __init__(self, path: str | Path) -> None:
        try:
            self._conn = sqlite3.connect(str(path))
        except sqlite3.Error as exc:
            raise BankError(f"Ошибка подключения: {exc}", _DB_TITLE) from exc

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _fetch_one(self, sql: str, params: dict, error_prefix: str) -> tuple | None:
        try:
            return self._conn.execute(sql, params).fetchone()
        except sqlite3.Error as exc:
            raise BankError(error_prefix + str(exc), _DB_TITLE) from exc

    def _update(self, sql: str, params: dict, error_prefix: str) -> None:
        try:
            with self._conn:
                self._conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise BankError(error_prefix + str(exc), _DB_TITLE) from exc

    def check_login(self, login: str) -> int:
        """Return the id of the user with this login."""
        if not login:
            raise BankError("Поле ввода пустое.")
        row = self._fetch_one(
            "SELECT id FROM users WHERE login = :login",
            {"login": login},
            "Ошибка выполнения запроса: ",
        )
        if row is None:
            raise BankError("Пользователь с таким логином не найден")
        return _to_int(row[0])

    def check_pin(self, user_id: int | None, pin: int) -> bool:
        """Return True if ``pin`` matches the user's PIN; raise otherwise."""
        row = self._fetch_one(
            "SELECT pin FROM users WHERE id = :id",
            {"id": user_id},
            "Ошибка выполнения запроса: ",
        )
        if row is not None and _to_int(row[0]) == pin:
            return True
        raise BankError("Неверный pin-код")

    def check_balance(self, user_id: int | None) -> int:
        """Return the user's current balance."""
        row = self._fetch_one(
            "SELECT balance FROM users WHERE id = :id",
            {"id": user_id},
            "Ошибка выполнения запроса: ",
        )
        if row is None:
            raise BankError(_NOT_FOUND_BY_ID, _NOT_FOUND_TITLE)
        return _to_int(row[0])

    def deposit(self, user_id: int | None, amount: int) -> None:
        """Add ``amount`` to the user's balance."""
        if amount > MAX_AMOUNT:
            raise BankError("Максимальная сумма пополнения: 100.000 руб.")
        if amount % 50 != 0 and amount % 100 != 0:
            raise BankError(
                "Сумма должна быть кратна купюрам '50', '100', '500', '1000'"
            )
        if amount <= 0:
            raise BankError("Сумма должна быть положительной")
        self._update(
            "UPDATE users SET balance = balance + :sum WHERE id = :id",
            {"sum": amount, "id": user_id},
            "Ошибка пополнения баланса: ",
        )

    def withdraw(self, user_id: int | None, amount: int) -> None:
        """Take ``amount`` off the user's balance."""
        if amount > MAX_AMOUNT:
            raise BankError("Максимальная сумма снятия наличных: 100.000 руб.")
        if user_id is None or user_id <= 0:
            raise BankError("Вы не авторизованы!")
        if amount % 100 != 0:
            raise BankError("Сумма должна быть кратна купюрам '100', '500', '1000'")
        if amount <= 0:
            raise BankError("Сумма должна быть положительной")

        row = self._fetch_one(
            "SELECT balance FROM users WHERE id = :id",
            {"id": user_id},
            "Ошибка выполнения запроса: ",
        )
        if row is None:
            raise BankError(_NOT_FOUND_BY_ID, _NOT_FOUND_TITLE)
        if _to_int(row[0]) - amount < 0:
            raise BankError("На счёте недостаточно средств")

        self._update(
            "UPDATE users SET balance = balance - :sum WHERE id = :id",
            {"sum": amount, "id": user_id},
            "Ошибка снятия денег: ",
        )

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()


def connect_to_database(path: str | Path = DEFAULT_DB_PATH) -> Database:
    """Open an existing database file; a missing file is an error."""
    if not Path(path).exists():
        raise BankError("Ошибка подключения: файл БД не найден", _DB_TITLE)
    return Database(path)