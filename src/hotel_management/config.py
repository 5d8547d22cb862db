"""
Настройки приложения.

Значения задаются только в коде: консольное приложение
не читает ни аргументов командной строки, ни переменных окружения.
"""
from pathlib import Path

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Настройки системы управления отелем."""

    data_dir: Path = Path(".")
    users_file: str = "users.json"
    rooms_file: str = "rooms.json"
    default_admin_username: str = "admin"
    default_admin_password: str = "admin"
    initial_balance: float = Field(1000.0, ge=0, allow_inf_nan=False)  # Начальный баланс нового клиента
    log_level: str = "WARNING"

    @property
    def users_path(self) -> Path:
        return self.data_dir / self.users_file

    @property
    def rooms_path(self) -> Path:
        return self.data_dir / self.rooms_file
