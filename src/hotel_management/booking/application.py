"""
Прикладной слой контекста бронирования.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..shared_kernel import ConsoleLogger, DomainException, EntityId, ILogger
from . import interfaces as ports
from .domain import BookingReceipt, BookingService


class BookRoomRequest(BaseModel):
    """Запрос на бронирование номеров."""

    customer_id: EntityId
    room_id: EntityId
    quantity: int = Field(..., gt=0)


class BookingApplicationService:
    """Сервис приложения для бронирования номеров."""

    def __init__(
        self,
        uow: ports.IBookingUnitOfWork,
        logger: Optional[ILogger] = None,
    ):
        """Инициализирует сервис."""
        self._uow = uow
        self._logger = logger or ConsoleLogger()
        self._booking_service = BookingService()

    def book_room(self, request: BookRoomRequest) -> BookingReceipt:
        """Бронирует номера и сохраняет оба хранилища."""
        try:
            with self._uow:
                customer = self._uow.users.get_by_id(request.customer_id)
                room = self._uow.rooms.get_by_id(request.room_id)

                receipt = self._booking_service.book(customer, room, request.quantity)

                self._uow.users.update(customer)
                self._uow.rooms.update(room)
        except DomainException as e:
            self._logger.info(f"Бронирование отклонено: {e}", **request.model_dump())
            raise
        except Exception as e:
            self._logger.error(f"Ошибка при бронировании номера: {str(e)}")
            raise

        self._logger.info("Номер забронирован", **receipt.model_dump())
        return receipt
