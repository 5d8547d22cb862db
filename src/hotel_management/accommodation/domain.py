"""
Доменная модель контекста номерного фонда.

Номер описывает категорию (тип) с ценой, общим количеством
и количеством, доступным для бронирования.
"""

from pydantic import BaseModel, Field, model_validator

from ..shared_kernel import BusinessRuleValidationException, EntityId


class InsufficientAvailabilityException(BusinessRuleValidationException):
    """Запрошено больше номеров, чем осталось."""

    def __init__(self, requested: int, available: int):
        super().__init__(
            f"Запрошено номеров: {requested}, доступно только {available}"
        )
        self.requested = requested
        self.available = available


class Room(BaseModel):
    """Категория номеров в отеле."""

    id: EntityId
    type: str  # Тип номера, например "одноместный"
    price: float = Field(..., ge=0, allow_inf_nan=False)
    total: int = Field(..., ge=0)
    available: int = Field(..., ge=0)

    @model_validator(mode="after")
    def available_within_total(self) -> "Room":
        if self.available > self.total:
            raise ValueError("Доступных номеров не может быть больше общего числа")
        return self

    @staticmethod
    def create(room_id: EntityId, room_type: str, price: float, total: int) -> "Room":
        """Создает категорию, в которой свободны все номера."""
        return Room(id=room_id, type=room_type, price=price, total=total, available=total)

    def cost_of(self, quantity: int) -> float:
        """Стоимость бронирования указанного количества номеров."""
        return self.price * quantity

    def ensure_can_reserve(self, quantity: int) -> None:
        if quantity <= 0:
            raise BusinessRuleValidationException("Количество номеров должно быть положительным")
        if quantity > self.available:
            raise InsufficientAvailabilityException(quantity, self.available)

    def reserve(self, quantity: int) -> None:
        """Уменьшает количество доступных номеров."""
        self.ensure_can_reserve(quantity)
        self.available -= quantity

    def resize(self, new_total: int) -> None:
        """
        Изменяет общее количество номеров.

        Разница применяется и к доступным номерам; если номеров уже
        забронировано больше, чем останется, доступных становится 0.
        """
        if new_total < 0:
            raise BusinessRuleValidationException("Количество номеров не может быть отрицательным")
        delta = new_total - self.total
        self.total = new_total
        self.available = max(self.available + delta, 0)
