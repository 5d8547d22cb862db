"""
Модуль контекста номерного фонда (Accommodation Context).

Отвечает за категории номеров отеля: цены, общее
количество и количество номеров, доступных для бронирования.
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
