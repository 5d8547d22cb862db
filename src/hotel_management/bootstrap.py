from dataclasses import dataclass
from typing import Optional

from .accommodation.application import RoomApplicationService
from .accommodation.infrastructure import JsonRoomRepository
from .booking.application import BookingApplicationService
from .config import Settings
from .identity.application import UserApplicationService
from .identity.infrastructure import JsonUserRepository
from .shared_kernel import ConsoleLogger, ILogger
from .unit_of_work import HotelUnitOfWork


@dataclass
class HotelApp:
    """Настроенные компоненты приложения."""

    settings: Settings
    uow: HotelUnitOfWork
    users: UserApplicationService
    rooms: RoomApplicationService
    booking: BookingApplicationService


def bootstrap_app(settings: Optional[Settings] = None, logger: Optional[ILogger] = None) -> HotelApp:
    """
    Создает и настраивает все компоненты приложения.

    Загружает оба хранилища. Если файла пользователей нет, создается
    администратор по умолчанию; если нет файла номеров - пустой список.

    Raises:
        StorageException: Один из файлов поврежден или недоступен
    """
    settings = settings or Settings()
    logger = logger or ConsoleLogger()

    # 1. Загружаем хранилища
    users_repo = JsonUserRepository(str(settings.users_path), logger)
    if not users_repo.load():
        logger.warning(
            "Файл пользователей не найден, создан администратор по умолчанию",
            file=str(settings.users_path),
        )
        users_repo.seed_default_admin(
            settings.default_admin_username, settings.default_admin_password
        )

    rooms_repo = JsonRoomRepository(str(settings.rooms_path), logger)
    if not rooms_repo.load():
        logger.warning(
            "Файл номеров не найден, создан пустой список номеров",
            file=str(settings.rooms_path),
        )
        rooms_repo.save()

    # 2. Создаем сервисы, передавая им общую единицу работы
    uow = HotelUnitOfWork(users_repo, rooms_repo, logger)
    return HotelApp(
        settings=settings,
        uow=uow,
        users=UserApplicationService(uow, settings.initial_balance, logger),
        rooms=RoomApplicationService(uow, logger),
        booking=BookingApplicationService(uow, logger),
    )
