"""Console front end of the teller machine."""

from __future__ import annotations

import argparse
import sys

from bankomat.auth import AuthScreen, AuthStage
from bankomat.database import DEFAULT_DB_PATH, BankError, connect_to_database
from bankomat.teller import QUICK_AMOUNTS, TellerSession

_AMOUNT_PROMPT = "Введите сумму"
_GOODBYE = "Спасибо, до свидания!"
_MENU = (
    "1 - Баланс\n"
    "2 - Снять 100\n"
    "3 - Снять 500\n"
    "4 - Снять 1000\n"
    "5 - Снять другую сумму\n"
    "6 - Внести\n"
    "0 - Выход"
)


def _read(prompt: str) -> str | None:
    print(prompt)
    try:
        return input()
    except EOFError:
        return None


def _report(exc: BankError) -> None:
    print(f"{exc.title}: {exc.message}")


def _enter_pin(screen: AuthScreen, line: str) -> None:
    screen.cancel()
    for ch in line.strip():
        try:
            screen.press_digit(ch)
        except ValueError:
            continue


def _run_session(session: TellerSession) -> bool:
    """Serve one signed-in user; return False when input runs out."""
    quick = {str(index): amount for index, amount in enumerate(QUICK_AMOUNTS, start=2)}
    while True:
        choice = _read(_MENU)
        if choice is None:
            return False
        choice = choice.strip()
        try:
            if choice == "1":
                print(session.balance_text())
            elif choice in quick:
                print(session.withdraw(quick[choice]))
            elif choice == "5":
                text = _read(_AMOUNT_PROMPT)
                if text is None:
                    return False
                print(session.withdraw_entered(text))
            elif choice == "6":
                text = _read(_AMOUNT_PROMPT)
                if text is None:
                    return False
                print(session.deposit_entered(text))
            elif choice == "0":
                print(_GOODBYE)
                session.finish()
                return True
        except BankError as exc:
            _report(exc)


def main(argv: list[str] | None = None) -> int:
    """Run the teller machine on the console."""
    parser = argparse.ArgumentParser(prog="bankomat")
    parser.add_argument("--db", default=DEFAULT_DB_PATH, help="path to the database")
    args = parser.parse_args(argv)

    try:
        database = connect_to_database(args.db)
    except BankError as exc:
        print(f"{exc.title}: {exc.message}", file=sys.stderr)
        return 1

    with database:
        screen = AuthScreen(database)
        while True:
            line = _read(screen.prompt)
            if line is None:
                return 0
            try:
                if screen.stage is AuthStage.LOGIN:
                    screen.clear_input()
                    screen.type_text(line.strip())
                    screen.key_enter()
                    continue
                _enter_pin(screen, line)
                user_id = screen.submit_pin()
            except BankError as exc:
                _report(exc)
                continue
            session = TellerSession(database, user_id, screen)
            if not _run_session(session):
                return 0