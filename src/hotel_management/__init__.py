"""
Консольная система управления отелем.

Два вида пользователей - администраторы и клиенты; пользователи и
номера хранятся в JSON-файлах и сохраняются после каждого изменения.
"""

__version__ = "0.1.0"
