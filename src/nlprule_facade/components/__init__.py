"""
Компоненты фасада.

Каждый компонент отвечает за одну конкретную задачу:
- SplitOn, CallableSplitter - разбиение текста на предложения
- sentence_guard, text_guard - диспетчеризация строки и набора строк
- rebase_suggestions, apply_suggestions - смещения и применение исправлений
- Tagger - запросы к морфологическому словарю
"""

from .splitter import SplitOn, CallableSplitter, as_splitter
from .dispatch import is_batch, extract_strings, sentence_guard, text_guard
from .corrector import rebase_suggestions, apply_suggestions
from .tagger import Tagger

__all__ = [
    'SplitOn',
    'CallableSplitter',
    'as_splitter',
    'is_batch',
    'extract_strings',
    'sentence_guard',
    'text_guard',
    'rebase_suggestions',
    'apply_suggestions',
    'Tagger',
]
