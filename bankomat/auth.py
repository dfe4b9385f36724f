"""State of the login and PIN entry screen."""

from __future__ import annotations

import enum
from typing import Callable

from bankomat.database import Database, _to_int

PIN_LENGTH = 4
LOGIN_PROMPT = "Введите логин"
PIN_PROMPT = "Введите ПИН-код"


class AuthStage(enum.Enum):
    """Where the user is in the sign-in sequence."""

    LOGIN = "login"
    PIN = "pin"
    AUTHENTICATED = "authenticated"


class AuthScreen:
    """Login then PIN entry, driven by text input, a keypad and Enter."""

    def __init__(
        self,
        database: Database,
        on_authenticated: Callable[[int], None] | None = None,
    ) -> None:
        self.database = database
        self.on_authenticated = on_authenticated
        self.text = ""
        self.stage = AuthStage.LOGIN
        self.prompt = LOGIN_PROMPT
        self.masked = False
        self.enter_enabled = True
        self.user_id: int | None = None

    @property
    def keypad_visible(self) -> bool:
        return self.stage is AuthStage.PIN

    def reset(self) -> None:
        """Return to the login prompt with an empty input."""
        self.text = ""
        self.masked = False
        self.stage = AuthStage.LOGIN
        self.prompt = LOGIN_PROMPT
        self.enter_enabled = True
        self.user_id = None

    def type_text(self, text: str) -> None:
        """Append typed characters to the input."""
        self.text += text

    def press_digit(self, digit: int | str) -> None:
        """Append a keypad digit unless the PIN is already full."""
        key = str(digit)
        if len(key) != 1 or key not in "0123456789":
            raise ValueError(f"not a keypad digit: {digit!r}")
        if len(self.text) < PIN_LENGTH:
            self.text += key

    def cancel(self) -> None:
        """Keypad cancel: empty the input."""
        self.text = ""

    def backspace(self) -> None:
        """Keypad clear: drop the last character."""
        self.text = self.text[:-1]

    def clear_input(self) -> None:
        """Reset button: empty the input."""
        self.text = ""

    def submit_login(self) -> int:
        """Look up the entered login and move on to PIN entry."""
        self.user_id = None
        self.user_id = self.database.check_login(self.text)
        self.enter_enabled = False
        self.stage = AuthStage.PIN
        self.prompt = PIN_PROMPT
        self.text = ""
        self.masked = True
        return self.user_id

    def submit_pin(self) -> int:
        """Check the entered PIN; on success the user is signed in."""
        self.database.check_pin(self.user_id, _to_int(self.text))
        self.stage = AuthStage.AUTHENTICATED
        if self.on_authenticated is not None:
            self.on_authenticated(self.user_id)
        return self.user_id

    def key_enter(self) -> int | None:
        """Enter key: submits the login while the login prompt is active."""
        if self.enter_enabled:
            return self.submit_login()
        return None