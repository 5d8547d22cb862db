"""
Общие фикстуры для тестов.

Каждый тест работает с собственным каталогом данных (tmp_path),
поэтому файлы users.json и rooms.json не пересекаются между тестами.
"""
import pytest

from hotel_management.accommodation.application import AddRoomRequest, RoomDTO
from hotel_management.bootstrap import HotelApp, bootstrap_app
from hotel_management.config import Settings
from hotel_management.identity.application import RegisterCustomerRequest, UserDTO
from hotel_management.shared_kernel import CustomerType


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Настройки с каталогом данных во временной директории."""
    return Settings(data_dir=tmp_path)


@pytest.fixture
def app(settings: Settings) -> HotelApp:
    """Полностью настроенное приложение с пустыми хранилищами."""
    return bootstrap_app(settings)


@pytest.fixture
def customer(app: HotelApp) -> UserDTO:
    """Зарегистрированный клиент с начальным балансом 1000."""
    return app.users.register_customer(
        RegisterCustomerRequest(
            username="ivan", password="secret", customer_type=CustomerType.MEMBER
        )
    )


@pytest.fixture
def room(app: HotelApp) -> RoomDTO:
    """Категория из 4 номеров по 250."""
    return app.rooms.add_room(AddRoomRequest(type="двухместный", price=250.0, total=4))
