"""
Инфраструктурный слой контекста пользователей.
"""
from typing import Optional

from ..shared_kernel import ILogger, JsonFileRepository
from .domain import User


class JsonUserRepository(JsonFileRepository[User]):
    """Репозиторий пользователей, хранящий данные в JSON-файле."""

    entity_name = "Пользователь"

    def __init__(self, file_path: str, logger: Optional[ILogger] = None):
        super().__init__(file_path, User, logger)

    def find_by_username(self, username: str) -> Optional[User]:
        for user in self._items.values():
            if user.username == username:
                return user
        return None

    def seed_default_admin(self, username: str, password: str) -> User:
        """Создает администратора по умолчанию и сразу сохраняет файл."""
        admin = User.create_admin(self.next_id(), username, password)
        self.add(admin)
        self.save()
        return admin
