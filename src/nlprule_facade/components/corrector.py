"""
Компонент для переноса смещений и применения исправлений.
"""

import logging
from typing import Iterable, List, Sequence

from ..models.base_model import Suggestion

logger = logging.getLogger(__name__)


def rebase_suggestions(per_sentence: Iterable[Sequence[Suggestion]], sentences: Sequence[str]) -> List[Suggestion]:
    """
    Переводит смещения исправлений из координат предложения в координаты текста.

    К исправлениям предложения i прибавляется суммарное число символов
    (кодовых точек) всех предыдущих предложений.

    Args:
        per_sentence: Исправления каждого предложения в порядке документа
        sentences: Предложения, из которых получены исправления

    Returns:
        Плоский список исправлений в порядке документа
    """
    output: List[Suggestion] = []
    offset = 0
    for suggestions, sentence in zip(per_sentence, sentences):
        output.extend(s.shifted(offset) for s in suggestions)
        offset += len(sentence)
    return output


def apply_suggestions(text: str, suggestions: Sequence[Suggestion]) -> str:
    """
    Заменяет каждый диапазон первым (лучшим) вариантом исправления.

    Исправления применяются по возрастанию start. Исправление, которое
    пересекается с уже применённым, пропускается.

    Args:
        text: Исходное предложение
        suggestions: Исправления в координатах этого предложения

    Returns:
        Исправленный текст
    """
    if not suggestions:
        return text

    parts: List[str] = []
    cursor = 0
    for suggestion in sorted(suggestions, key=lambda s: s.start):
        if suggestion.start < cursor:
            logger.debug(
                f"Пропущено пересекающееся исправление [{suggestion.start}, {suggestion.end}) -> {suggestion.replacement!r}"
            )
            continue
        parts.append(text[cursor:suggestion.start])
        parts.append(suggestion.replacement)
        cursor = suggestion.end
    parts.append(text[cursor:])
    return "".join(parts)
