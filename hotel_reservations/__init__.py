"""
Система бронирования номеров отеля.

Консольное приложение для одного пользователя: учет категорий номеров,
бронирование и отмена брони, хранение бронирований в текстовом файле.
"""

__version__ = "0.1.0"
