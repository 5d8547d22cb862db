"""
Модуль контекста бронирования (Booking Context).

Отвечает за бронирование номеров клиентами:
- Проверку доступности номеров и баланса
- Списание оплаты и уменьшение количества доступных номеров
"""

from . import application, domain, interfaces

__all__ = [
    "domain",
    "application",
    "interfaces",
]
