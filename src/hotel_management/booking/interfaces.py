"""
Интерфейсы (порты) для контекста бронирования.
"""
from typing import Protocol

from ..accommodation.interfaces import IRoomRepository
from ..identity.interfaces import IUserRepository


class IBookingUnitOfWork(Protocol):
    """Единица работы, охватывающая пользователей и номера."""

    @property
    def users(self) -> IUserRepository:
        ...

    @property
    def rooms(self) -> IRoomRepository:
        ...

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        ...

    def __enter__(self) -> "IBookingUnitOfWork":
        ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        ...
