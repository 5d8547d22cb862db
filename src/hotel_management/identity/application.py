"""
Прикладной слой контекста пользователей.

Содержит сервис приложения, который координирует
взаимодействие между консольным интерфейсом и доменной моделью.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..shared_kernel import (
    BusinessRuleValidationException,
    ConsoleLogger,
    CustomerType,
    DomainException,
    EntityId,
    ILogger,
    UserRole,
)
from . import interfaces as ports
from .domain import DuplicateUsernameException, InvalidCredentialsException, User

DEFAULT_INITIAL_BALANCE = 1000.0

# DTO (Data Transfer Objects) для входящих данных


class RegisterCustomerRequest(BaseModel):
    """Запрос на самостоятельную регистрацию клиента."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    customer_type: CustomerType = CustomerType.REGULAR


class AddUserRequest(BaseModel):
    """Запрос администратора на добавление пользователя."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    role: UserRole
    customer_type: Optional[CustomerType] = None


class UpdateUserRequest(BaseModel):
    """Запрос на частичное обновление пользователя.

    Поля со значением None остаются без изменений.
    """

    user_id: EntityId
    username: Optional[str] = Field(None, min_length=1)
    password: Optional[str] = Field(None, min_length=1)
    customer_type: Optional[CustomerType] = None
    balance: Optional[float] = Field(None, ge=0, allow_inf_nan=False)


# DTO для исходящих данных


class UserDTO(BaseModel):
    """DTO для представления пользователя (без пароля)."""

    id: EntityId
    username: str
    role: UserRole
    customer_type: Optional[CustomerType]
    balance: float

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_customer(self) -> bool:
        return self.role == UserRole.CUSTOMER

    @classmethod
    def from_domain(cls, user: User) -> "UserDTO":
        """Создает DTO из доменной модели."""
        return cls(
            id=user.id,
            username=user.username,
            role=user.role,
            customer_type=user.customer_type,
            balance=user.balance,
        )


# Сервисы приложения


class UserApplicationService:
    """Сервис приложения для управления пользователями."""

    def __init__(
        self,
        uow: ports.IIdentityUnitOfWork,
        initial_balance: float = DEFAULT_INITIAL_BALANCE,
        logger: Optional[ILogger] = None,
    ):
        """Инициализирует сервис."""
        self._uow = uow
        self._initial_balance = initial_balance
        self._logger = logger or ConsoleLogger()

    def _ensure_username_free(self, username: str, owner_id: Optional[EntityId] = None) -> None:
        existing = self._uow.users.find_by_username(username)
        if existing is not None and existing.id != owner_id:
            raise DuplicateUsernameException(username)

    def is_username_taken(self, username: str) -> bool:
        return self._uow.users.find_by_username(username) is not None

    def authenticate(self, username: str, password: str) -> UserDTO:
        """Проверяет учетные данные и возвращает пользователя."""
        user = self._uow.users.find_by_username(username)
        if user is None or not user.check_password(password):
            self._logger.info("Неудачная попытка входа", username=username)
            raise InvalidCredentialsException()
        self._logger.info("Пользователь вошел в систему", user_id=user.id)
        return UserDTO.from_domain(user)

    def register_customer(self, request: RegisterCustomerRequest) -> UserDTO:
        """Регистрирует нового клиента с начальным балансом."""
        try:
            with self._uow:
                self._ensure_username_free(request.username)
                user = User.create_customer(
                    user_id=self._uow.users.next_id(),
                    username=request.username,
                    password=request.password,
                    customer_type=request.customer_type,
                    balance=self._initial_balance,
                )
                self._uow.users.add(user)
        except DomainException as e:
            self._logger.info(f"Регистрация отклонена: {e}")
            raise
        except Exception as e:
            self._logger.error(f"Ошибка при регистрации клиента: {str(e)}")
            raise

        self._logger.info("Зарегистрирован клиент", user_id=user.id)
        return UserDTO.from_domain(user)

    def add_user(self, request: AddUserRequest) -> UserDTO:
        """Добавляет администратора или клиента."""
        try:
            with self._uow:
                self._ensure_username_free(request.username)
                user_id = self._uow.users.next_id()
                if request.role == UserRole.ADMIN:
                    user = User.create_admin(user_id, request.username, request.password)
                else:
                    user = User.create_customer(
                        user_id=user_id,
                        username=request.username,
                        password=request.password,
                        customer_type=request.customer_type or CustomerType.REGULAR,
                        balance=self._initial_balance,
                    )
                self._uow.users.add(user)
        except DomainException as e:
            self._logger.info(f"Добавление пользователя отклонено: {e}")
            raise
        except Exception as e:
            self._logger.error(f"Ошибка при добавлении пользователя: {str(e)}")
            raise

        return UserDTO.from_domain(user)

    def get_user(self, user_id: EntityId) -> UserDTO:
        """Возвращает информацию о пользователе."""
        return UserDTO.from_domain(self._uow.users.get_by_id(user_id))

    def list_users(self) -> List[UserDTO]:
        """Возвращает список всех пользователей."""
        return [UserDTO.from_domain(user) for user in self._uow.users.list()]

    def update_user(self, request: UpdateUserRequest) -> UserDTO:
        """Обновляет информацию о пользователе."""
        try:
            with self._uow:
                user = self._uow.users.get_by_id(request.user_id)

                if not user.is_customer and (
                    request.customer_type is not None or request.balance is not None
                ):
                    raise BusinessRuleValidationException(
                        "Тип клиента и баланс есть только у клиентов"
                    )
                if request.username is not None:
                    self._ensure_username_free(request.username, owner_id=user.id)

                # Проверки пройдены, изменяем сущность
                if request.username is not None:
                    user.username = request.username
                if request.password is not None:
                    user.password = request.password
                if request.customer_type is not None:
                    user.customer_type = request.customer_type
                if request.balance is not None:
                    user.balance = request.balance

                self._uow.users.update(user)
        except DomainException as e:
            self._logger.info(f"Обновление пользователя отклонено: {e}")
            raise
        except Exception as e:
            self._logger.error(f"Ошибка при обновлении пользователя: {str(e)}")
            raise

        return UserDTO.from_domain(user)

    def delete_user(self, user_id: EntityId) -> None:
        """Удаляет пользователя."""
        try:
            with self._uow:
                self._uow.users.delete(user_id)
        except DomainException as e:
            self._logger.info(f"Удаление пользователя отклонено: {e}")
            raise
        except Exception as e:
            self._logger.error(f"Ошибка при удалении пользователя: {str(e)}")
            raise

        self._logger.info("Пользователь удален", user_id=user_id)
