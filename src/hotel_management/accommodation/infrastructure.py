"""
Инфраструктурный слой контекста номерного фонда.
"""
from typing import Optional

from ..shared_kernel import ILogger, JsonFileRepository
from .domain import Room


class JsonRoomRepository(JsonFileRepository[Room]):
    """Репозиторий номеров, хранящий данные в JSON-файле."""

    entity_name = "Номер"

    def __init__(self, file_path: str, logger: Optional[ILogger] = None):
        super().__init__(file_path, Room, logger)
