"""
Интерфейсы внешних движков.

Описывают контракт, который должен выполнять токенизатор и движок правил,
чтобы фасад мог с ними работать.
"""

from .engine import (
    TokenizerOptionsLike,
    TaggerEngine,
    FinalizedToken,
    TokenizerEngine,
    RulesEngine,
)

__all__ = [
    'TokenizerOptionsLike',
    'TaggerEngine',
    'FinalizedToken',
    'TokenizerEngine',
    'RulesEngine',
]
