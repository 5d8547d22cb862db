"""
Модуль контекста пользователей (Identity Context).

Отвечает за учетные записи администраторов и клиентов:
регистрацию, вход в систему и управление пользователями.
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
