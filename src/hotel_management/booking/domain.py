"""
Доменная модель контекста бронирования.

Бронирование затрагивает два агрегата сразу: списывает деньги
с баланса клиента и уменьшает количество доступных номеров.
"""

from pydantic import BaseModel

from ..accommodation.domain import Room
from ..identity.domain import User
from ..shared_kernel import EntityId


class BookingReceipt(BaseModel):
    """Результат успешного бронирования."""

    customer_id: EntityId
    room_id: EntityId
    room_type: str
    quantity: int
    unit_price: float
    total_cost: float
    remaining_balance: float


class BookingService:
    """Доменный сервис бронирования номеров."""

    def book(self, customer: User, room: Room, quantity: int) -> BookingReceipt:
        """
        Бронирует номера для клиента.

        Все проверки выполняются до изменения состояния, поэтому
        при отказе ни клиент, ни номер не меняются.

        Raises:
            InsufficientAvailabilityException: Номеров осталось меньше, чем запрошено
            InsufficientFundsException: На балансе не хватает денег
        """
        room.ensure_can_reserve(quantity)
        total_cost = room.cost_of(quantity)
        customer.ensure_can_pay(total_cost)

        customer.debit(total_cost)
        room.reserve(quantity)

        return BookingReceipt(
            customer_id=customer.id,
            room_id=room.id,
            room_type=room.type,
            quantity=quantity,
            unit_price=room.price,
            total_cost=total_cost,
            remaining_balance=customer.balance,
        )
