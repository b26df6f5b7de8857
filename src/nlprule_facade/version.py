"""Версия фасада. Та же строка задаёт путь кэша и URL артефактов."""

__version__ = "0.3.0"
