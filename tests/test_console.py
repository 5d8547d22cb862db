"""
Тесты консольного интерфейса: сценарии ввода прогоняются целиком.
"""
from typing import List

import pytest

from hotel_management.accommodation.application import AddRoomRequest
from hotel_management.console import HotelConsole


def run_session(app, *lines: str) -> str:
    """Прогоняет консоль на заданных строках ввода и возвращает весь вывод."""
    inputs = iter(lines)
    output: List[str] = []

    def fake_input(prompt: str) -> str:
        output.append(prompt)
        try:
            return next(inputs)
        except StopIteration:
            raise EOFError from None

    HotelConsole(app, input_func=fake_input, output=output.append).run()
    return "\n".join(output)


class TestCustomerSession:
    """Сценарии клиента."""

    @pytest.fixture
    def suite(self, app):
        return app.rooms.add_room(AddRoomRequest(type="двухместный", price=250.0, total=4))

    def test_register_login_book_and_check_balance(self, app, suite):
        output = run_session(
            app,
            "2", "ivan", "secret", "1",  # регистрация участника программы
            "1", "ivan", "secret",  # вход
            "2", str(suite.id), "2",  # бронирование двух номеров
            "3",  # баланс
            "4",  # выход из учетной записи
            "3",  # выход из системы
        )

        assert "Регистрация успешна! Начальный баланс: 1000.00" in output
        assert "Бронирование выполнено! Списано 500.00, остаток на балансе: 500.00" in output
        assert "Текущий баланс: 500.00" in output
        assert output.rstrip().endswith("Выход из системы")
        assert app.rooms.get_room(suite.id).available == 2

    def test_duplicate_registration_is_reported(self, app):
        output = run_session(app, "2", "admin", "3")

        assert "Имя пользователя уже существует!" in output
        assert len(app.users.list_users()) == 1

    def test_wrong_password_is_reported(self, app, customer):
        output = run_session(app, "1", "ivan", "oops", "3")

        assert "Неверное имя пользователя или пароль" in output
        assert "Меню клиента" not in output

    def test_overbooking_is_reported(self, app, customer, suite):
        output = run_session(app, "1", "ivan", "secret", "2", str(suite.id), "5", "4", "3")

        assert "доступно только 4" in output
        assert app.users.get_user(customer.id).balance == 1000.0
        assert app.rooms.get_room(suite.id).available == 4

    @pytest.mark.parametrize("room_id, quantity, message", [
        ("abc", None, "Некорректный ID"),
        ("99", None, "Номер с ID 99 не найден"),
        ("1", "0", "Некорректное количество"),
        ("1", "два", "Некорректное количество"),
    ])
    def test_invalid_booking_input(self, app, customer, suite, room_id, quantity, message):
        lines = ["1", "ivan", "secret", "2", room_id]
        if quantity is not None:
            lines.append(quantity)
        output = run_session(app, *lines, "4", "3")

        assert message in output
        assert app.users.get_user(customer.id).balance == 1000.0

    def test_booking_without_rooms(self, app, customer):
        output = run_session(app, "1", "ivan", "secret", "2", "4", "3")

        assert "Нет номеров для бронирования" in output


class TestAdminSession:
    """Сценарии администратора."""

    def test_room_management(self, app):
        output = run_session(
            app,
            "1", "admin", "admin",
            "2",  # управление номерами
            "2", "люкс", "300", "3",  # добавить
            "3", "1", "", "", "1",  # изменить только количество
            "1",  # список
            "5", "3", "3",
        )

        room = app.rooms.get_room(1)
        assert "Номер добавлен!" in output
        assert "Данные номера обновлены" in output
        assert "ID: 1, тип: люкс, цена: 300.00, всего: 1, доступно: 1" in output
        assert (room.type, room.price, room.total, room.available) == ("люкс", 300.0, 1, 1)

    def test_invalid_price_aborts_add(self, app):
        output = run_session(app, "1", "admin", "admin", "2", "2", "люкс", "дорого", "5", "3", "3")

        assert "Некорректная цена" in output
        assert app.rooms.list_rooms() == []

    def test_infinite_price_is_reported(self, app):
        output = run_session(app, "1", "admin", "admin", "2", "2", "люкс", "inf", "3", "5", "3", "3")

        assert "Некорректные данные" in output
        assert app.rooms.list_rooms() == []
        assert "Infinity" not in app.uow.rooms.file_path.read_text(encoding="utf-8")

    def test_negative_total_is_reported(self, app):
        output = run_session(app, "1", "admin", "admin", "2", "2", "люкс", "10", "-1", "5", "3", "3")

        assert "Некорректные данные" in output
        assert app.rooms.list_rooms() == []

    def test_delete_missing_room_reports_not_found(self, app):
        output = run_session(app, "1", "admin", "admin", "2", "4", "7", "5", "3", "3")

        assert "Номер с ID 7 не найден" in output

    def test_delete_requires_confirmation(self, app, room):
        output = run_session(
            app,
            "1", "admin", "admin", "2",
            "4", str(room.id), "n",  # отказ
            "4", str(room.id), "Y",  # подтверждение
            "5", "3", "3",
        )

        assert "Удаление отменено" in output
        assert "Номер удален" in output
        assert app.rooms.list_rooms() == []

    def test_user_management(self, app, customer):
        output = run_session(
            app,
            "1", "admin", "admin",
            "1",  # управление пользователями
            "2", "boss", "pw", "1",  # новый администратор
            "3", str(customer.id), "", "", "2", "1500",  # тип и баланс клиента
            "1",  # список
            "5", "3", "3",
        )

        updated = app.users.get_user(customer.id)
        assert "Пользователь добавлен!" in output
        assert "ID: 2, имя: ivan, роль: customer, тип: regular, баланс: 1500.00" in output
        assert "ID: 3, имя: boss, роль: admin" in output
        assert (updated.customer_type.value, updated.balance) == ("regular", 1500.0)

    def test_invalid_balance_aborts_update(self, app, customer):
        output = run_session(
            app, "1", "admin", "admin", "1",
            "3", str(customer.id), "ivan2", "", "", "много",
            "5", "3", "3",
        )

        assert "Некорректный баланс" in output
        assert app.users.get_user(customer.id).username == "ivan"

    def test_invalid_role_is_reported(self, app):
        output = run_session(app, "1", "admin", "admin", "1", "2", "anna", "pw", "9", "5", "3", "3")

        assert "Некорректная роль" in output
        assert len(app.users.list_users()) == 1


class TestMenuLoop:
    """Общие свойства главного цикла."""

    def test_unknown_option(self, app):
        output = run_session(app, "42", "3")

        assert "Неверный пункт меню" in output

    def test_end_of_input_exits(self, app):
        output = run_session(app)

        assert output.rstrip().endswith("Выход из системы")
