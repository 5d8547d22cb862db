"""
Тесты контекста пользователей: доменная модель и сервис приложения.
"""
import json

import pytest
from pydantic import ValidationError

from hotel_management.identity.application import (
    AddUserRequest,
    RegisterCustomerRequest,
    UpdateUserRequest,
    UserApplicationService,
)
from hotel_management.identity.domain import (
    DuplicateUsernameException,
    InsufficientFundsException,
    InvalidCredentialsException,
    User,
)
from hotel_management.shared_kernel import (
    BusinessRuleValidationException,
    CustomerType,
    EntityNotFoundException,
    UserRole,
)


class TestUser:
    """Тесты для сущности User."""

    def test_debit_reduces_balance(self):
        user = User.create_customer(1, "ivan", "secret", CustomerType.REGULAR, 1000.0)

        user.debit(300.0)

        assert user.balance == 700.0

    def test_debit_more_than_balance_fails(self):
        """Списание сверх баланса отклоняется, баланс не меняется."""
        user = User.create_customer(1, "ivan", "secret", CustomerType.REGULAR, 100.0)

        with pytest.raises(InsufficientFundsException):
            user.debit(100.01)

        assert user.balance == 100.0

    def test_negative_debit_fails(self):
        user = User.create_customer(1, "ivan", "secret", CustomerType.REGULAR, 100.0)

        with pytest.raises(BusinessRuleValidationException):
            user.debit(-1.0)

        assert user.balance == 100.0

    def test_admin_cannot_pay(self):
        admin = User.create_admin(1, "admin", "admin")

        with pytest.raises(BusinessRuleValidationException):
            admin.debit(1.0)

    def test_empty_customer_type_loads_as_none(self):
        """Администратор в старом формате файла хранит тип пустой строкой."""
        admin = User.model_validate(
            {
                "id": 1,
                "username": "admin",
                "password": "admin",
                "role": "admin",
                "customer_type": "",
                "balance": 0,
            }
        )

        assert admin.customer_type is None
        assert admin.is_admin


class TestUserApplicationService:
    """Тесты для сервиса приложения пользователей."""

    def test_default_admin_is_seeded(self, app):
        users = app.users.list_users()

        assert len(users) == 1
        assert users[0].id == 1
        assert users[0].username == "admin"
        assert users[0].role == UserRole.ADMIN

    def test_register_customer(self, app, customer):
        # Проверка
        assert customer.id == 2
        assert customer.role == UserRole.CUSTOMER
        assert customer.customer_type == CustomerType.MEMBER
        assert customer.balance == 1000.0

        # Изменение сразу сохраняется в файл
        saved = json.loads(app.settings.users_path.read_text(encoding="utf-8"))
        assert [u["username"] for u in saved] == ["admin", "ivan"]

    def test_register_duplicate_username_fails(self, app, customer):
        """Повторная регистрация с тем же именем отклоняется."""
        with pytest.raises(DuplicateUsernameException):
            app.users.register_customer(
                RegisterCustomerRequest(username="ivan", password="other")
            )

        assert len(app.users.list_users()) == 2

    def test_register_uses_configured_initial_balance(self, app):
        service = UserApplicationService(app.uow, initial_balance=50.0)
        user = service.register_customer(
            RegisterCustomerRequest(username="petr", password="secret")
        )

        assert user.balance == 50.0
        assert user.customer_type == CustomerType.REGULAR

    def test_empty_username_rejected(self):
        with pytest.raises(ValidationError):
            RegisterCustomerRequest(username="", password="secret")

    def test_add_admin(self, app):
        user = app.users.add_user(
            AddUserRequest(username="boss", password="pw", role=UserRole.ADMIN)
        )

        assert user.is_admin
        assert user.customer_type is None
        assert user.balance == 0.0

    def test_add_customer_gets_initial_balance(self, app):
        user = app.users.add_user(
            AddUserRequest(username="anna", password="pw", role=UserRole.CUSTOMER)
        )

        assert user.customer_type == CustomerType.REGULAR
        assert user.balance == 1000.0

    def test_add_duplicate_username_fails(self, app):
        with pytest.raises(DuplicateUsernameException):
            app.users.add_user(
                AddUserRequest(username="admin", password="pw", role=UserRole.ADMIN)
            )

    def test_next_id_is_max_plus_one(self, app, customer):
        """Новый ID = максимальный существующий + 1, даже после удаления."""
        third = app.users.add_user(
            AddUserRequest(username="anna", password="pw", role=UserRole.CUSTOMER)
        )
        app.users.delete_user(customer.id)

        fourth = app.users.add_user(
            AddUserRequest(username="olga", password="pw", role=UserRole.CUSTOMER)
        )

        assert third.id == 3
        assert fourth.id == 4

    def test_authenticate(self, app, customer):
        user = app.users.authenticate("ivan", "secret")

        assert user.id == customer.id

    @pytest.mark.parametrize("username, password", [("ivan", "wrong"), ("nobody", "secret")])
    def test_authenticate_with_wrong_credentials_fails(self, app, customer, username, password):
        with pytest.raises(InvalidCredentialsException):
            app.users.authenticate(username, password)

    def test_partial_update_keeps_other_fields(self, app, customer):
        updated = app.users.update_user(UpdateUserRequest(user_id=customer.id, balance=42.5))

        assert updated.balance == 42.5
        assert updated.username == "ivan"
        assert updated.customer_type == CustomerType.MEMBER
        assert app.users.authenticate("ivan", "secret").id == customer.id

    def test_update_username_and_password(self, app, customer):
        app.users.update_user(
            UpdateUserRequest(user_id=customer.id, username="ivan2", password="new")
        )

        assert app.users.authenticate("ivan2", "new").id == customer.id

    def test_update_to_taken_username_fails(self, app, customer):
        with pytest.raises(DuplicateUsernameException):
            app.users.update_user(UpdateUserRequest(user_id=customer.id, username="admin"))

        assert app.users.get_user(customer.id).username == "ivan"

    def test_update_balance_of_admin_fails(self, app):
        with pytest.raises(BusinessRuleValidationException):
            app.users.update_user(UpdateUserRequest(user_id=1, balance=10.0))

    def test_negative_balance_rejected(self):
        with pytest.raises(ValidationError):
            UpdateUserRequest(user_id=2, balance=-1.0)

    @pytest.mark.parametrize("balance", [float("inf"), float("nan")])
    def test_non_finite_balance_rejected(self, balance):
        with pytest.raises(ValidationError):
            UpdateUserRequest(user_id=2, balance=balance)

    def test_update_missing_user_fails(self, app):
        with pytest.raises(EntityNotFoundException):
            app.users.update_user(UpdateUserRequest(user_id=99, username="ghost"))

    def test_delete_user(self, app, customer):
        app.users.delete_user(customer.id)

        assert [u.id for u in app.users.list_users()] == [1]

    def test_delete_missing_user_is_noop(self, app, customer):
        """Удаление несуществующего ID сообщает об ошибке и ничего не меняет."""
        before = app.users.list_users()

        with pytest.raises(EntityNotFoundException):
            app.users.delete_user(99)

        assert app.users.list_users() == before
