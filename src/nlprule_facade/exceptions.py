"""
Иерархия исключений фасада.

Все ошибки наследуются от NlpruleError и дополнительно от встроенного
типа, который ожидает вызывающий код (ValueError, TypeError, RuntimeError).
"""

from __future__ import annotations


class NlpruleError(Exception):
    """Базовое исключение пакета."""


class ConfigurationError(NlpruleError, ValueError):
    """Неправильное использование: нет сплиттера, неверные split_chars, имя ресурса без .gz."""


class ResourceUnavailable(NlpruleError, RuntimeError):
    """Сетевая или файловая ошибка, после которой нет пригодных данных."""


class ResourceCorrupt(NlpruleError, RuntimeError):
    """Данные получены, но не распаковываются или не десериализуются."""


class InputTypeError(NlpruleError, TypeError):
    """Элемент входных данных не является строкой."""


__all__ = [
    "NlpruleError",
    "ConfigurationError",
    "ResourceUnavailable",
    "ResourceCorrupt",
    "InputTypeError",
]
