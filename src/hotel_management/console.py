"""
Консольный интерфейс системы управления отелем.

Нумерованные меню для администратора и клиента поверх сервисов
приложения. Ввод и вывод передаются через функции, поэтому
интерфейс можно прогонять в тестах без терминала.
"""
import sys
from typing import Callable, Optional, TypeVar

from pydantic import ValidationError

from .accommodation.application import AddRoomRequest, RoomDTO, UpdateRoomRequest
from .booking.application import BookRoomRequest
from .bootstrap import HotelApp, bootstrap_app
from .config import Settings
from .identity.application import (
    AddUserRequest,
    RegisterCustomerRequest,
    UpdateUserRequest,
    UserDTO,
)
from .shared_kernel import (
    CustomerType,
    DomainException,
    StorageException,
    UserRole,
    configure_logging,
)

T = TypeVar("T")

SEPARATOR = "================================"


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text)
    except ValueError:
        return None


def _parse_float(text: str) -> Optional[float]:
    try:
        return float(text)
    except ValueError:
        return None


def _describe_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


def _customer_type_from_choice(choice: str) -> CustomerType:
    return CustomerType.MEMBER if choice == "1" else CustomerType.REGULAR


class HotelConsole:
    """Диспетчер консольных меню."""

    def __init__(
        self,
        app: HotelApp,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self._app = app
        self._input = input_func
        self._output = output

    # ---------- ввод/вывод ----------

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _say(self, message: str = "") -> None:
        self._output(message)

    def _attempt(self, action: Callable[[], T]) -> Optional[T]:
        """Выполняет действие; ошибки показывает пользователю и возвращает None."""
        try:
            return action()
        except ValidationError as e:
            self._say(f"✗ Некорректные данные: {_describe_validation_error(e)}")
        except DomainException as e:
            self._say(f"✗ {e}")
        except StorageException as e:
            self._say(f"✗ Ошибка сохранения данных: {e}")
        return None

    def _ask_id(self, prompt: str) -> Optional[int]:
        entity_id = _parse_int(self._ask(prompt))
        if entity_id is None:
            self._say("Некорректный ID")
        return entity_id

    def _confirm(self, prompt: str) -> bool:
        return self._ask(f"{prompt} (y/n): ") in ("y", "Y")

    # ---------- главное меню ----------

    def run(self) -> None:
        """Запускает главный цикл. Конец ввода равносилен выходу."""
        try:
            self._main_menu()
        except EOFError:
            self._say()
            self._say("Выход из системы")

    def _main_menu(self) -> None:
        while True:
            self._say(SEPARATOR)
            self._say("Добро пожаловать в систему управления отелем")
            self._say("1. Вход")
            self._say("2. Регистрация (только для клиентов)")
            self._say("3. Выход")
            choice = self._ask("Выберите действие: ")

            if choice == "1":
                user = self._login()
                if user is None:
                    continue
                if user.is_admin:
                    self._admin_menu()
                elif user.is_customer:
                    self._customer_menu(user.id)
            elif choice == "2":
                self._register_customer()
            elif choice == "3":
                self._say("Выход из системы")
                return
            else:
                self._say("Неверный пункт меню, попробуйте еще раз.")

    def _login(self) -> Optional[UserDTO]:
        username = self._ask("Имя пользователя: ")
        password = self._ask("Пароль: ")
        user = self._attempt(lambda: self._app.users.authenticate(username, password))
        if user is not None:
            self._say("Вход выполнен!")
        return user

    def _register_customer(self) -> None:
        self._say("Регистрация нового клиента")
        username = self._ask("Имя пользователя: ")
        if self._app.users.is_username_taken(username):
            self._say("Имя пользователя уже существует!")
            return
        password = self._ask("Пароль: ")
        choice = self._ask("Тип клиента (1. участник программы лояльности 2. обычный): ")

        user = self._attempt(
            lambda: self._app.users.register_customer(
                RegisterCustomerRequest(
                    username=username,
                    password=password,
                    customer_type=_customer_type_from_choice(choice),
                )
            )
        )
        if user is not None:
            self._say(f"Регистрация успешна! Начальный баланс: {user.balance:.2f}")

    # ---------- меню администратора ----------

    def _admin_menu(self) -> None:
        while True:
            self._say(SEPARATOR)
            self._say("Меню администратора")
            self._say("1. Управление пользователями")
            self._say("2. Управление номерами")
            self._say("3. Выйти из учетной записи")
            choice = self._ask("Выберите действие: ")

            if choice == "1":
                self._user_management_menu()
            elif choice == "2":
                self._room_management_menu()
            elif choice == "3":
                self._say("Вы вышли из учетной записи")
                return
            else:
                self._say("Неверный пункт меню, попробуйте еще раз.")

    def _user_management_menu(self) -> None:
        actions = {
            "1": self._list_users,
            "2": self._add_user,
            "3": self._update_user,
            "4": self._delete_user,
        }
        while True:
            self._say("--------- Управление пользователями ---------")
            self._say("1. Список пользователей")
            self._say("2. Добавить пользователя")
            self._say("3. Изменить пользователя")
            self._say("4. Удалить пользователя")
            self._say("5. Назад")
            choice = self._ask("Выберите действие: ")

            if choice == "5":
                return
            action = actions.get(choice)
            if action is None:
                self._say("Неверный пункт меню, попробуйте еще раз.")
            else:
                action()

    def _list_users(self) -> None:
        self._say("----- Все пользователи -----")
        for user in self._app.users.list_users():
            line = f"ID: {user.id}, имя: {user.username}, роль: {user.role.value}"
            if user.is_customer:
                customer_type = user.customer_type.value if user.customer_type else "-"
                line += f", тип: {customer_type}, баланс: {user.balance:.2f}"
            self._say(line)

    def _add_user(self) -> None:
        self._say("----- Новый пользователь -----")
        username = self._ask("Имя пользователя: ")
        if self._app.users.is_username_taken(username):
            self._say("Имя пользователя уже существует!")
            return
        password = self._ask("Пароль: ")
        role_choice = self._ask("Роль (1. администратор 2. клиент): ")

        customer_type = None
        if role_choice == "1":
            role = UserRole.ADMIN
        elif role_choice == "2":
            role = UserRole.CUSTOMER
            customer_type = _customer_type_from_choice(
                self._ask("Тип клиента (1. участник программы лояльности 2. обычный): ")
            )
        else:
            self._say("Некорректная роль")
            return

        user = self._attempt(
            lambda: self._app.users.add_user(
                AddUserRequest(
                    username=username,
                    password=password,
                    role=role,
                    customer_type=customer_type,
                )
            )
        )
        if user is not None:
            self._say("Пользователь добавлен!")

    def _update_user(self) -> None:
        user_id = self._ask_id("ID пользователя для изменения: ")
        if user_id is None:
            return
        user = self._attempt(lambda: self._app.users.get_user(user_id))
        if user is None:
            return

        self._say(f"Текущее имя: {user.username}")
        username = self._ask("Новое имя (Enter - оставить без изменений): ")
        password = self._ask("Новый пароль (Enter - оставить без изменений): ")

        customer_type = None
        balance = None
        if user.is_customer:
            current_type = user.customer_type.value if user.customer_type else "-"
            self._say(f"Текущий тип клиента: {current_type}")
            type_choice = self._ask(
                "Новый тип (1. участник программы лояльности 2. обычный, Enter - без изменений): "
            )
            if type_choice in ("1", "2"):
                customer_type = _customer_type_from_choice(type_choice)

            self._say(f"Текущий баланс: {user.balance:.2f}")
            balance_text = self._ask("Новый баланс (Enter - оставить без изменений): ")
            if balance_text:
                balance = _parse_float(balance_text)
                if balance is None:
                    self._say("Некорректный баланс")
                    return

        updated = self._attempt(
            lambda: self._app.users.update_user(
                UpdateUserRequest(
                    user_id=user_id,
                    username=username or None,
                    password=password or None,
                    customer_type=customer_type,
                    balance=balance,
                )
            )
        )
        if updated is not None:
            self._say("Данные пользователя обновлены")

    def _delete_user(self) -> None:
        user_id = self._ask_id("ID пользователя для удаления: ")
        if user_id is None:
            return
        if self._attempt(lambda: self._app.users.get_user(user_id)) is None:
            return
        if not self._confirm("Удалить этого пользователя?"):
            self._say("Удаление отменено")
            return

        def delete() -> bool:
            self._app.users.delete_user(user_id)
            return True

        if self._attempt(delete):
            self._say("Пользователь удален")

    def _room_management_menu(self) -> None:
        actions = {
            "1": self._list_rooms,
            "2": self._add_room,
            "3": self._update_room,
            "4": self._delete_room,
        }
        while True:
            self._say("--------- Управление номерами ---------")
            self._say("1. Список номеров")
            self._say("2. Добавить номер")
            self._say("3. Изменить номер")
            self._say("4. Удалить номер")
            self._say("5. Назад")
            choice = self._ask("Выберите действие: ")

            if choice == "5":
                return
            action = actions.get(choice)
            if action is None:
                self._say("Неверный пункт меню, попробуйте еще раз.")
            else:
                action()

    def _list_rooms(self) -> None:
        rooms = self._app.rooms.list_rooms()
        if not rooms:
            self._say("Номеров пока нет")
            return
        self._say("----- Список номеров -----")
        for room in rooms:
            self._say(self._format_room(room))

    @staticmethod
    def _format_room(room: RoomDTO) -> str:
        return (
            f"ID: {room.id}, тип: {room.type}, цена: {room.price:.2f}, "
            f"всего: {room.total}, доступно: {room.available}"
        )

    def _add_room(self) -> None:
        self._say("----- Новый номер -----")
        room_type = self._ask("Тип номера: ")
        price = _parse_float(self._ask("Цена: "))
        if price is None:
            self._say("Некорректная цена")
            return
        total = _parse_int(self._ask("Общее количество: "))
        if total is None:
            self._say("Некорректное количество номеров")
            return

        room = self._attempt(
            lambda: self._app.rooms.add_room(
                AddRoomRequest(type=room_type, price=price, total=total)
            )
        )
        if room is not None:
            self._say("Номер добавлен!")

    def _update_room(self) -> None:
        room_id = self._ask_id("ID номера для изменения: ")
        if room_id is None:
            return
        room = self._attempt(lambda: self._app.rooms.get_room(room_id))
        if room is None:
            return

        self._say(f"Текущий тип: {room.type}")
        room_type = self._ask("Новый тип (Enter - оставить без изменений): ")

        self._say(f"Текущая цена: {room.price:.2f}")
        price_text = self._ask("Новая цена (Enter - оставить без изменений): ")
        price = None
        if price_text:
            price = _parse_float(price_text)
            if price is None:
                self._say("Некорректная цена")
                return

        self._say(f"Текущее количество: {room.total}")
        total_text = self._ask("Новое количество (Enter - оставить без изменений): ")
        total = None
        if total_text:
            total = _parse_int(total_text)
            if total is None:
                self._say("Некорректное количество номеров")
                return

        updated = self._attempt(
            lambda: self._app.rooms.update_room(
                UpdateRoomRequest(
                    room_id=room_id,
                    type=room_type or None,
                    price=price,
                    total=total,
                )
            )
        )
        if updated is not None:
            self._say("Данные номера обновлены")

    def _delete_room(self) -> None:
        room_id = self._ask_id("ID номера для удаления: ")
        if room_id is None:
            return
        if self._attempt(lambda: self._app.rooms.get_room(room_id)) is None:
            return
        if not self._confirm("Удалить этот номер?"):
            self._say("Удаление отменено")
            return

        def delete() -> bool:
            self._app.rooms.delete_room(room_id)
            return True

        if self._attempt(delete):
            self._say("Номер удален")

    # ---------- меню клиента ----------

    def _customer_menu(self, customer_id: int) -> None:
        while True:
            self._say(SEPARATOR)
            self._say("Меню клиента")
            self._say("1. Список номеров")
            self._say("2. Забронировать номер")
            self._say("3. Баланс")
            self._say("4. Выйти из учетной записи")
            choice = self._ask("Выберите действие: ")

            if choice == "1":
                self._list_rooms()
            elif choice == "2":
                self._book_room(customer_id)
            elif choice == "3":
                customer = self._attempt(lambda: self._app.users.get_user(customer_id))
                if customer is not None:
                    self._say(f"Текущий баланс: {customer.balance:.2f}")
            elif choice == "4":
                self._say("Вы вышли из учетной записи")
                return
            else:
                self._say("Неверный пункт меню, попробуйте еще раз.")

    def _book_room(self, customer_id: int) -> None:
        if not self._app.rooms.list_rooms():
            self._say("Нет номеров для бронирования")
            return
        self._list_rooms()

        room_id = self._ask_id("ID номера для бронирования: ")
        if room_id is None:
            return
        room = self._attempt(lambda: self._app.rooms.get_room(room_id))
        if room is None:
            return
        self._say(
            f"Выбран номер: {room.type}, цена: {room.price:.2f}, доступно: {room.available}"
        )

        quantity = _parse_int(self._ask("Количество номеров: "))
        if quantity is None or quantity <= 0:
            self._say("Некорректное количество")
            return

        receipt = self._attempt(
            lambda: self._app.booking.book_room(
                BookRoomRequest(customer_id=customer_id, room_id=room_id, quantity=quantity)
            )
        )
        if receipt is not None:
            self._say(
                f"Бронирование выполнено! Списано {receipt.total_cost:.2f}, "
                f"остаток на балансе: {receipt.remaining_balance:.2f}"
            )


def main(settings: Optional[Settings] = None) -> int:
    """Точка входа консольного приложения."""
    settings = settings or Settings()
    configure_logging(settings.log_level)
    try:
        app = bootstrap_app(settings)
    except StorageException as e:
        print(f"Ошибка загрузки данных: {e}", file=sys.stderr)
        return 1

    HotelConsole(app).run()
    return 0
