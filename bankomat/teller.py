"""Operations available to a signed-in user of the teller machine."""

from __future__ import annotations

import re

from bankomat.auth import AuthScreen
from bankomat.database import Database

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

QUICK_AMOUNTS = (100, 500, 1000)


def parse_amount(text: str) -> int:
    """Read an entered amount; anything that is not a 32-bit integer gives 0."""
    candidate = text.strip()
    if not _INT_RE.fullmatch(candidate):
        return 0
    value = int(candidate)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return 0
    return value


class TellerSession:
    """Balance enquiry, cash withdrawal and deposit for one signed-in user."""

    def __init__(
        self,
        database: Database,
        user_id: int | None,
        auth: AuthScreen | None = None,
    ) -> None:
        self.database = database
        self.user_id = user_id
        self.auth = auth
        self.active = True

    def balance_text(self) -> str:
        """Describe the user's current balance."""
        balance = self.database.check_balance(self.user_id)
        return f"Ваш баланс: {balance} рублей"

    def withdraw(self, amount: int) -> str:
        """Take cash off the account and describe what was taken."""
        self.database.withdraw(self.user_id, amount)
        return f"Со счёта снято {amount} рублей"

    def withdraw_entered(self, text: str) -> str:
        """Withdraw an amount typed by the user."""
        return self.withdraw(parse_amount(text))

    def deposit_entered(self, text: str) -> str:
        """Deposit an amount typed by the user and describe it."""
        self.database.deposit(self.user_id, parse_amount(text))
        return f"Счёт пополнен на {text} рублей"

    def finish(self) -> None:
        """End the session and send the sign-in screen back to the login prompt."""
        self.active = False
        if self.auth is not None:
            self.auth.reset()