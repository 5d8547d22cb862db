"""
Общее ядро (Shared Kernel) системы управления отелем.

Содержит общие типы данных и утилиты, используемые в различных ограниченных контекстах.
"""

from .domain import (
    BusinessRuleValidationException,
    CustomerType,
    # Исключения
    DomainException,
    # Базовые типы
    EntityId,
    EntityNotFoundException,
    StorageException,
    # Перечисления
    UserRole,
    # Утилиты
    next_id,
)
from .infrastructure import ConsoleLogger, JsonFileRepository, configure_logging
from .interfaces import ILogger

__all__ = [
    # Базовые типы
    "EntityId",
    "next_id",
    # Перечисления
    "UserRole",
    "CustomerType",
    # Исключения
    "DomainException",
    "BusinessRuleValidationException",
    "EntityNotFoundException",
    "StorageException",
    # Инфраструктура
    "ILogger",
    "ConsoleLogger",
    "JsonFileRepository",
    "configure_logging",
]
