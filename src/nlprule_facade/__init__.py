"""
nlprule-facade - фасад над движком грамматических правил

Этот модуль предоставляет инструменты для:
- Токенизации текста внешним токенизатором с дизамбигуацией
- Поиска грамматических ошибок внешним движком правил
- Исправления предложений и целых текстов
- Загрузки и кэширования версионированных артефактов движка
"""

from .version import __version__

from .exceptions import (
    NlpruleError,
    ConfigurationError,
    ResourceUnavailable,
    ResourceCorrupt,
    InputTypeError,
)
from .models import Token, Suggestion, WordData
from .components import SplitOn, Tagger
from .tokenizer import Tokenizer
from .rules import Rules

__all__ = [
    "__version__",
    "Tokenizer",
    "Rules",
    "Token",
    "Suggestion",
    "WordData",
    "SplitOn",
    "Tagger",
    "NlpruleError",
    "ConfigurationError",
    "ResourceUnavailable",
    "ResourceCorrupt",
    "InputTypeError",
]
