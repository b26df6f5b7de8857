"""
Структурные интерфейсы внешних движков.

Токенизатор, дизамбигуатор, теггер и движок правил живут вне пакета.
Фасад полагается только на описанные здесь методы и атрибуты, поэтому
движок не обязан наследоваться от этих классов.
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol, Sequence, Tuple, runtime_checkable


@runtime_checkable
class TokenizerOptionsLike(Protocol):
    """Опции токенизатора, которые фасад передаёт теггеру без изменений."""

    use_compound_split_heuristic: bool


@runtime_checkable
class TaggerEngine(Protocol):
    """Морфологический словарь движка."""

    def get_tags(self, word: str, add_lower: bool, use_compound_split_heuristic: bool) -> Iterable[Any]:
        """Возвращает пары (лемма, POS) или объекты с атрибутами lemma/pos."""
        ...

    def get_group_members(self, word: str) -> Iterable[str]:
        """Возвращает словоформы той же группы."""
        ...


@runtime_checkable
class FinalizedToken(Protocol):
    """Токен после стадии finalize."""

    text: str
    char_span: Tuple[int, int]
    tags: Iterable[Any]
    chunks: Sequence[str]


@runtime_checkable
class TokenizerEngine(Protocol):
    """Токенизатор с дизамбигуацией: tokenize → disambiguate → finalize."""

    tagger: Any
    options: Any

    def tokenize(self, sentence: str) -> Any:
        ...

    def disambiguate(self, tokens: Any) -> Any:
        ...

    def finalize(self, tokens: Any) -> Sequence[Any]:
        ...


@runtime_checkable
class RulesEngine(Protocol):
    """Движок правил: по финализированным токенам выдаёт предложения исправлений."""

    def apply(self, tokens: Sequence[Any]) -> Iterable[Any]:
        """Возвращает объекты с атрибутами start, end и text (лучший вариант первым)."""
        ...
