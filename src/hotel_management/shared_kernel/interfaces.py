"""
Общие интерфейсы (порты), используемые всеми контекстами.
"""
from abc import abstractmethod
from typing import Protocol


class ILogger(Protocol):
    """Абстракция для логирования."""

    @abstractmethod
    def debug(self, message: str, **kwargs) -> None:
        """Записывает отладочное сообщение."""
        ...

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Записывает информационное сообщение."""
        ...

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Записывает предупреждение."""
        ...

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Записывает сообщение об ошибке."""
        ...
