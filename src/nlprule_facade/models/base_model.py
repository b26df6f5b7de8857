"""
Базовые структуры данных фасада и интерфейс бэкенда десериализации.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, BinaryIO, Dict, NamedTuple, Sequence, Tuple


class WordData(NamedTuple):
    """Пара (лемма, часть речи) из морфологического анализа."""
    lemma: str
    pos: str

    @classmethod
    def from_raw(cls, raw: Any) -> "WordData":
        """Принимает пару или объект с атрибутами lemma/pos."""
        if isinstance(raw, Sequence) and not isinstance(raw, str) and len(raw) == 2:
            return cls(str(raw[0]), str(raw[1]))
        return cls(str(raw.lemma), str(raw.pos))


@dataclass(frozen=True)
class Token:
    """Финализированный токен.

    span задаётся в символах (кодовых точках) относительно предложения,
    из которого получен токен.
    """
    text: str
    span: Tuple[int, int]
    data: Tuple[WordData, ...] = ()
    chunks: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "span", tuple(self.span))
        object.__setattr__(self, "data", tuple(WordData(*d) for d in self.data))
        object.__setattr__(self, "chunks", tuple(self.chunks))

    @property
    def lemmas(self) -> list:
        """Уникальные непустые леммы в отсортированном порядке."""
        return sorted({d.lemma for d in self.data if d.lemma})

    @property
    def tags(self) -> list:
        """Уникальные непустые POS-теги в отсортированном порядке."""
        return sorted({d.pos for d in self.data if d.pos})

    @classmethod
    def from_raw(cls, raw: Any) -> "Token":
        start, end = raw.char_span
        return cls(
            text=str(raw.text),
            span=(int(start), int(end)),
            data=tuple(WordData.from_raw(t) for t in raw.tags),
            chunks=tuple(str(c) for c in raw.chunks),
        )


@dataclass(frozen=True)
class Suggestion:
    """Предложение исправления для полуоткрытого диапазона [start, end)."""
    start: int
    end: int
    text: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", tuple(self.text))
        if self.start < 0 or self.start > self.end:
            raise ValueError(f"Некорректный диапазон исправления: start={self.start}, end={self.end}")
        if not self.text:
            raise ValueError("Исправление должно содержать хотя бы один вариант замены")

    @property
    def replacement(self) -> str:
        """Лучший (первый) вариант замены."""
        return self.text[0]

    def shifted(self, offset: int) -> "Suggestion":
        """Копия с диапазоном, сдвинутым на offset символов."""
        if offset == 0:
            return self
        return replace(self, start=self.start + offset, end=self.end + offset)

    @classmethod
    def from_raw(cls, raw: Any) -> "Suggestion":
        text = raw.text
        # Одиночная строка считается единственным вариантом
        if isinstance(text, str):
            text = (text,)
        return cls(start=int(raw.start), end=int(raw.end), text=tuple(str(t) for t in text))


class BaseEngineBackend(ABC):
    """Базовый интерфейс бэкенда, превращающего байты артефакта в движок."""

    @abstractmethod
    def load_tokenizer(self, stream: BinaryIO) -> Any:
        """Десериализует токенизатор из tokenizer.bin."""
        pass

    @abstractmethod
    def load_rules(self, stream: BinaryIO) -> Any:
        """Десериализует движок правил из rules.bin."""
        pass

    @abstractmethod
    def get_backend_info(self) -> Dict[str, Any]:
        """Возвращает информацию о бэкенде (имя, тип)."""
        pass
