"""
Единица работы (Unit of Work) для хранилищ пользователей и номеров.
"""
from typing import Optional

from .accommodation.infrastructure import JsonRoomRepository
from .identity.infrastructure import JsonUserRepository
from .shared_kernel import ConsoleLogger, ILogger, StorageException


class HotelUnitOfWork:
    """
    Группирует репозитории пользователей и номеров.

    При входе в блок ``with`` запоминает снимок обеих коллекций.
    Без исключений изменения сохраняются в файлы (только измененные
    хранилища), иначе коллекции в памяти восстанавливаются из снимка.
    Если commit() упал на середине, уже записанные файлы перезаписываются
    восстановленным состоянием.
    """

    def __init__(
        self,
        users_repo: JsonUserRepository,
        rooms_repo: JsonRoomRepository,
        logger: Optional[ILogger] = None,
    ):
        self._users = users_repo
        self._rooms = rooms_repo
        self._logger = logger or ConsoleLogger()
        self._snapshots = None
        self._saved = []

    @property
    def users(self) -> JsonUserRepository:
        return self._users

    @property
    def rooms(self) -> JsonRoomRepository:
        return self._rooms

    def begin(self) -> None:
        """Запоминает текущее состояние обоих хранилищ."""
        self._snapshots = (self._users.snapshot(), self._rooms.snapshot())
        self._saved = []

    def commit(self) -> None:
        """Сохраняет измененные хранилища в файлы."""
        for repo in (self._users, self._rooms):
            if repo.dirty:
                repo.save()
                self._saved.append(repo)
        self._snapshots = None
        self._saved = []
        self._logger.debug("HotelUnitOfWork committed")

    def rollback(self) -> None:
        """Возвращает хранилища к состоянию на момент begin()."""
        if self._snapshots is None:
            self._logger.warning("HotelUnitOfWork rollback без активной транзакции")
            return
        users_snapshot, rooms_snapshot = self._snapshots
        self._users.restore(users_snapshot)
        self._rooms.restore(rooms_snapshot)
        # Файлы, записанные до сбоя commit(), возвращаем к снимку
        for repo in self._saved:
            try:
                repo.save()
            except StorageException as e:
                self._logger.error(f"Не удалось восстановить {repo.file_path}: {e}")
        self._snapshots = None
        self._saved = []
        self._logger.debug("HotelUnitOfWork rolled back")

    def __enter__(self):
        self.begin()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.rollback()
            return False  # Пробрасываем исключение дальше

        try:
            self.commit()
        except Exception:
            self.rollback()
            raise
        return False
