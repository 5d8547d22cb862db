"""
Общая инфраструктура: базовый JSON-репозиторий и консольный логгер.
"""
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .domain import EntityId, EntityNotFoundException, StorageException, next_id
from .interfaces import ILogger

T = TypeVar("T", bound=BaseModel)

LOG_FORMAT = "[%(levelname)s] %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Настраивает вывод логов в stderr, чтобы не мешать меню в stdout."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stderr)


class ConsoleLogger(ILogger):
    """Логгер, пишущий сообщения через модуль logging."""

    def __init__(self, name: str = "hotel_management"):
        self._logger = logging.getLogger(name)

    def _log(self, level: int, message: str, context: dict) -> None:
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str, ensure_ascii=False)}"
        self._logger.log(level, message)

    def debug(self, message: str, **kwargs) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log(logging.ERROR, message, kwargs)


class JsonFileRepository(Generic[T]):
    """Базовый класс для репозиториев, работающих с JSON-файлами.

    Коллекция целиком хранится в памяти и перезаписывается в файл при
    каждом сохранении. Порядок элементов совпадает с порядком добавления.
    """

    entity_name = "Запись"

    def __init__(
        self,
        file_path: str,
        model_class: Type[T],
        logger: Optional[ILogger] = None,
    ):
        """
        Инициализирует репозиторий.

        Args:
            file_path: Путь к JSON-файлу с данными
            model_class: Класс модели данных
            logger: Логгер
        """
        self._file_path = Path(file_path)
        self._model_class = model_class
        self._logger = logger or ConsoleLogger()
        self._items: Dict[EntityId, T] = {}
        self._dirty = False

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def dirty(self) -> bool:
        """Есть ли несохраненные изменения."""
        return self._dirty

    def load(self) -> bool:
        """
        Загружает данные из JSON-файла.

        Returns:
            False, если файла нет (коллекция остается пустой), иначе True

        Raises:
            StorageException: Файл не читается или содержит некорректные данные
        """
        self._items = {}
        self._dirty = False
        if not self._file_path.exists():
            return False

        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                raw_data = f.read()
        except OSError as e:
            raise StorageException(f"Не удалось прочитать {self._file_path}: {e}") from e

        try:
            items = json.loads(raw_data)
            if items is None:
                items = []
            if not isinstance(items, list):
                raise ValueError("ожидался JSON-массив")
            for item in items:
                model = self._model_class.model_validate(item)
                self._items[model.id] = model
        except (ValueError, ValidationError) as e:
            # json.JSONDecodeError тоже наследуется от ValueError
            raise StorageException(f"Некорректные данные в {self._file_path}: {e}") from e

        self._logger.debug(f"Загружено записей: {len(self._items)}", file=str(self._file_path))
        return True

    def save(self) -> None:
        """Сохраняет данные в JSON-файл."""
        data = [item.model_dump(mode="json") for item in self._items.values()]
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._file_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise StorageException(f"Не удалось записать {self._file_path}: {e}") from e
        self._dirty = False

    def list(self) -> List[T]:
        return list(self._items.values())

    def find_by_id(self, entity_id: EntityId) -> Optional[T]:
        return self._items.get(entity_id)

    def get_by_id(self, entity_id: EntityId) -> T:
        item = self._items.get(entity_id)
        if item is None:
            raise EntityNotFoundException(self.entity_name, entity_id)
        return item

    def next_id(self) -> EntityId:
        return next_id(self._items.keys())

    def add(self, item: T) -> None:
        if item.id in self._items:
            raise ValueError(f"{self.entity_name} с ID {item.id} уже существует")
        self._items[item.id] = item
        self._dirty = True

    def update(self, item: T) -> None:
        if item.id not in self._items:
            raise EntityNotFoundException(self.entity_name, item.id)
        self._items[item.id] = item
        self._dirty = True

    def delete(self, entity_id: EntityId) -> None:
        if entity_id not in self._items:
            raise EntityNotFoundException(self.entity_name, entity_id)
        del self._items[entity_id]
        self._dirty = True

    def snapshot(self) -> Dict[EntityId, T]:
        """Возвращает глубокую копию коллекции."""
        return {key: item.model_copy(deep=True) for key, item in self._items.items()}

    def restore(self, snapshot: Dict[EntityId, T]) -> None:
        """Восстанавливает коллекцию из снимка."""
        self._items = dict(snapshot)
        self._dirty = False
