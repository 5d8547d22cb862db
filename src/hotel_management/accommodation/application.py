"""
Прикладной слой контекста номерного фонда.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..shared_kernel import ConsoleLogger, DomainException, EntityId, ILogger
from . import interfaces as ports
from .domain import Room

# DTO для входящих данных


class AddRoomRequest(BaseModel):
    """Запрос на добавление категории номеров."""

    type: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    total: int = Field(..., ge=0)


class UpdateRoomRequest(BaseModel):
    """Запрос на частичное обновление номера. None - оставить как есть."""

    room_id: EntityId
    type: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    total: Optional[int] = Field(None, ge=0)


# DTO для исходящих данных


class RoomDTO(BaseModel):
    """DTO для представления номера."""

    id: EntityId
    type: str
    price: float
    total: int
    available: int

    @classmethod
    def from_domain(cls, room: Room) -> "RoomDTO":
        """Создает DTO из доменной модели."""
        return cls(
            id=room.id,
            type=room.type,
            price=room.price,
            total=room.total,
            available=room.available,
        )


class RoomApplicationService:
    """Сервис приложения для работы с номерами."""

    def __init__(
        self,
        uow: ports.IAccommodationUnitOfWork,
        logger: Optional[ILogger] = None,
    ):
        """Инициализирует сервис."""
        self._uow = uow
        self._logger = logger or ConsoleLogger()

    def add_room(self, request: AddRoomRequest) -> RoomDTO:
        """Добавляет новую категорию номеров."""
        try:
            with self._uow:
                room = Room.create(
                    room_id=self._uow.rooms.next_id(),
                    room_type=request.type,
                    price=request.price,
                    total=request.total,
                )
                self._uow.rooms.add(room)
        except Exception as e:
            self._logger.error(f"Ошибка при добавлении номера: {str(e)}")
            raise

        self._logger.info("Добавлен номер", room_id=room.id, type=room.type)
        return RoomDTO.from_domain(room)

    def get_room(self, room_id: EntityId) -> RoomDTO:
        """Возвращает информацию о номере."""
        return RoomDTO.from_domain(self._uow.rooms.get_by_id(room_id))

    def list_rooms(self) -> List[RoomDTO]:
        """Возвращает список всех номеров."""
        return [RoomDTO.from_domain(room) for room in self._uow.rooms.list()]

    def update_room(self, request: UpdateRoomRequest) -> RoomDTO:
        """Обновляет информацию о номере."""
        try:
            with self._uow:
                room = self._uow.rooms.get_by_id(request.room_id)
                if request.type is not None:
                    room.type = request.type
                if request.price is not None:
                    room.price = request.price
                if request.total is not None:
                    room.resize(request.total)
                self._uow.rooms.update(room)
        except DomainException as e:
            self._logger.info(f"Обновление номера отклонено: {e}")
            raise
        except Exception as e:
            self._logger.error(f"Ошибка при обновлении номера: {str(e)}")
            raise

        return RoomDTO.from_domain(room)

    def delete_room(self, room_id: EntityId) -> None:
        """Удаляет номер."""
        try:
            with self._uow:
                self._uow.rooms.delete(room_id)
        except DomainException as e:
            self._logger.info(f"Удаление номера отклонено: {e}")
            raise
        except Exception as e:
            self._logger.error(f"Ошибка при удалении номера: {str(e)}")
            raise

        self._logger.info("Номер удален", room_id=room_id)
