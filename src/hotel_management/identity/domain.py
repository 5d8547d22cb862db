"""
Доменная модель контекста пользователей.

Содержит сущность пользователя (администратора или клиента)
и связанные с ней бизнес-правила.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..shared_kernel import (
    BusinessRuleValidationException,
    CustomerType,
    EntityId,
    UserRole,
)


class DuplicateUsernameException(BusinessRuleValidationException):
    """Имя пользователя уже занято."""

    def __init__(self, username: str):
        super().__init__(f"Имя пользователя '{username}' уже существует")
        self.username = username


class InvalidCredentialsException(BusinessRuleValidationException):
    """Неверное имя пользователя или пароль."""

    def __init__(self):
        super().__init__("Неверное имя пользователя или пароль")


class InsufficientFundsException(BusinessRuleValidationException):
    """На балансе клиента недостаточно средств."""

    def __init__(self, balance: float, amount: float):
        super().__init__(
            f"Недостаточно средств: требуется {amount:.2f}, на балансе {balance:.2f}"
        )
        self.balance = balance
        self.amount = amount


class User(BaseModel):
    """Пользователь системы."""

    id: EntityId
    username: str
    password: str
    role: UserRole
    customer_type: Optional[CustomerType] = None  # Только для клиентов
    balance: float = Field(0.0, allow_inf_nan=False)  # Только для клиентов

    @field_validator("customer_type", mode="before")
    @classmethod
    def empty_customer_type_is_none(cls, v):
        # У администраторов в старых файлах тип хранится пустой строкой
        return v or None

    @staticmethod
    def create_admin(user_id: EntityId, username: str, password: str) -> "User":
        return User(id=user_id, username=username, password=password, role=UserRole.ADMIN)

    @staticmethod
    def create_customer(
        user_id: EntityId,
        username: str,
        password: str,
        customer_type: CustomerType,
        balance: float,
    ) -> "User":
        return User(
            id=user_id,
            username=username,
            password=password,
            role=UserRole.CUSTOMER,
            customer_type=customer_type,
            balance=balance,
        )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_customer(self) -> bool:
        return self.role == UserRole.CUSTOMER

    def check_password(self, password: str) -> bool:
        return self.password == password

    def ensure_can_pay(self, amount: float) -> None:
        """Проверяет, что клиент может оплатить указанную сумму."""
        if not self.is_customer:
            raise BusinessRuleValidationException("Оплата доступна только клиентам")
        if amount < 0:
            raise BusinessRuleValidationException("Сумма списания не может быть отрицательной")
        if self.balance < amount:
            raise InsufficientFundsException(self.balance, amount)

    def debit(self, amount: float) -> None:
        """Списывает сумму с баланса клиента."""
        self.ensure_can_pay(amount)
        self.balance -= amount
