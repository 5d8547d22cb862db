"""
Основные доменные типы и утилиты общего ядра.
"""

from enum import Enum
from typing import Iterable

# Идентификаторы сущностей - целые числа, выдаваемые по возрастанию
EntityId = int


def next_id(existing_ids: Iterable[EntityId]) -> EntityId:
    """Возвращает следующий идентификатор: максимальный существующий + 1."""
    return max(existing_ids, default=0) + 1


class UserRole(str, Enum):
    """Роли пользователей."""

    ADMIN = "admin"
    CUSTOMER = "customer"


class CustomerType(str, Enum):
    """Типы клиентских аккаунтов."""

    MEMBER = "member"  # Участник программы лояльности
    REGULAR = "regular"  # Обычный аккаунт


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    pass


class EntityNotFoundException(DomainException):
    """Сущность с указанным идентификатором не найдена."""

    def __init__(self, entity: str, entity_id: EntityId):
        super().__init__(f"{entity} с ID {entity_id} не найден")
        self.entity = entity
        self.entity_id = entity_id


class StorageException(Exception):
    """Ошибка чтения или записи хранилища."""

    pass
