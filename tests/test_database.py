import sqlite3

import pytest

from bankomat.database import BankError, Database, connect_to_database


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "users.db"
    conn = sqlite3.connect(path)
    conn.execute(
        "CREATE TABLE users (id INTEGER PRIMARY KEY, login TEXT, pin INTEGER, balance INTEGER)"
    )
    conn.executemany(
        "INSERT INTO users VALUES (?, ?, ?, ?)",
        [(1, "alice", 1234, 5000), (2, "bob", 0, 0)],
    )
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def db(db_path):
    database = connect_to_database(db_path)
    yield database
    database.close()


def test_connect_missing_file(tmp_path):
    with pytest.raises(BankError) as info:
        connect_to_database(tmp_path / "absent.db")
    assert info.value.message == "Ошибка подключения: файл БД не найден"


def test_check_login_found(db):
    assert db.check_login("alice") == 1
    assert db.check_login("bob") == 2


def test_check_login_empty(db):
    with pytest.raises(BankError, match="Поле ввода пустое."):
        db.check_login("")


def test_check_login_unknown(db):
    with pytest.raises(BankError, match="Пользователь с таким логином не найден"):
        db.check_login("carol")


def test_check_pin(db):
    assert db.check_pin(1, 1234) is True
    assert db.check_pin(2, 0) is True


def test_check_pin_wrong(db):
    with pytest.raises(BankError, match="Неверный pin-код"):
        db.check_pin(1, 4321)


def test_check_pin_unknown_user(db):
    with pytest.raises(BankError, match="Неверный pin-код"):
        db.check_pin(0, 1234)


def test_check_balance(db):
    assert db.check_balance(1) == 5000


def test_check_balance_unknown(db):
    with pytest.raises(BankError) as info:
        db.check_balance(99)
    assert info.value.title == "Пользователь не найден"


def test_deposit_increases_balance(db):
    before = db.check_balance(1)
    db.deposit(1, 150)
    assert db.check_balance(1) == before + 150


def test_deposit_persists(db, db_path):
    db.deposit(2, 1000)
    db.close()
    with Database(db_path) as again:
        assert again.check_balance(2) == 1000


@pytest.mark.parametrize(
    "amount, message",
    [
        (100050, "Максимальная сумма пополнения: 100.000 руб."),
        (30, "Сумма должна быть кратна купюрам '50', '100', '500', '1000'"),
        (0, "Сумма должна быть положительной"),
        (-50, "Сумма должна быть положительной"),
    ],
)
def test_deposit_rejected(db, amount, message):
    before = db.check_balance(1)
    with pytest.raises(BankError) as info:
        db.deposit(1, amount)
    assert info.value.message == message
    assert db.check_balance(1) == before


def test_deposit_maximum_allowed(db):
    before = db.check_balance(2)
    db.deposit(2, 100000)
    assert db.check_balance(2) == before + 100000


def test_withdraw_decreases_balance(db):
    before = db.check_balance(1)
    db.withdraw(1, 500)
    assert db.check_balance(1) == before - 500


def test_withdraw_whole_balance(db):
    db.withdraw(1, db.check_balance(1))
    assert db.check_balance(1) == 0


@pytest.mark.parametrize(
    "user_id, amount, message",
    [
        (1, 100100, "Максимальная сумма снятия наличных: 100.000 руб."),
        (0, 100, "Вы не авторизованы!"),
        (None, 100, "Вы не авторизованы!"),
        (1, 150, "Сумма должна быть кратна купюрам '100', '500', '1000'"),
        (1, -100, "Сумма должна быть положительной"),
        (2, 100, "На счёте недостаточно средств"),
        (99, 100, "Пользователь с таким ID не найден."),
    ],
)
def test_withdraw_rejected(db, user_id, amount, message):
    before = db.check_balance(1)
    with pytest.raises(BankError) as info:
        db.withdraw(user_id, amount)
    assert info.value.message == message
    assert db.check_balance(1) == before


def test_query_error_is_bank_error(tmp_path):
    path = tmp_path / "empty.db"
    sqlite3.connect(path).close()
    with connect_to_database(path) as database:
        with pytest.raises(BankError) as info:
            database.check_login("alice")
    assert info.value.title == "Ошибка БД"
    assert info.value.message.startswith("Ошибка выполнения запроса: ")


def test_closed_database_raises(db):
    db.close()
    with pytest.raises(BankError) as info:
        db.check_balance(1)
    assert info.value.title == "Ошибка БД"