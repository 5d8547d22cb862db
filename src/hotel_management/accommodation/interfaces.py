"""
Интерфейсы (порты) для контекста номерного фонда.
"""
from abc import abstractmethod
from typing import List, Protocol

from ..shared_kernel import EntityId
from .domain import Room


class IRoomRepository(Protocol):
    """Репозиторий для работы с номерами."""

    @abstractmethod
    def list(self) -> List[Room]:
        """Возвращает все номера в порядке добавления."""
        ...

    @abstractmethod
    def get_by_id(self, room_id: EntityId) -> Room:
        """Возвращает номер по идентификатору."""
        ...

    @abstractmethod
    def next_id(self) -> EntityId:
        ...

    @abstractmethod
    def add(self, room: Room) -> None:
        ...

    @abstractmethod
    def update(self, room: Room) -> None:
        ...

    @abstractmethod
    def delete(self, room_id: EntityId) -> None:
        ...


class IAccommodationUnitOfWork(Protocol):
    """Единица работы (Unit of Work) для контекста номерного фонда."""

    @property
    def rooms(self) -> IRoomRepository:
        """Репозиторий номеров."""
        ...

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        ...

    def __enter__(self) -> "IAccommodationUnitOfWork":
        ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        ...
