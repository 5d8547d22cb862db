"""
Интерфейсы (порты) для контекста пользователей.
"""
from abc import abstractmethod
from typing import List, Optional, Protocol

from ..shared_kernel import EntityId
from .domain import User


class IUserRepository(Protocol):
    """Репозиторий для работы с пользователями."""

    @abstractmethod
    def list(self) -> List[User]:
        """Возвращает всех пользователей в порядке добавления."""
        ...

    @abstractmethod
    def get_by_id(self, user_id: EntityId) -> User:
        """Возвращает пользователя по идентификатору."""
        ...

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[User]:
        """Находит пользователя по имени."""
        ...

    @abstractmethod
    def next_id(self) -> EntityId:
        """Возвращает идентификатор для нового пользователя."""
        ...

    @abstractmethod
    def add(self, user: User) -> None:
        """Добавляет нового пользователя."""
        ...

    @abstractmethod
    def update(self, user: User) -> None:
        """Обновляет информацию о пользователе."""
        ...

    @abstractmethod
    def delete(self, user_id: EntityId) -> None:
        """Удаляет пользователя."""
        ...


class IIdentityUnitOfWork(Protocol):
    """Единица работы (Unit of Work) для контекста пользователей."""

    @property
    def users(self) -> IUserRepository:
        """Репозиторий пользователей."""
        ...

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        ...

    def __enter__(self) -> "IIdentityUnitOfWork":
        ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        ...
