"""
Компонент для разбиения текста на предложения.

Сплиттер: любой вызываемый объект, принимающий список текстов и
возвращающий список списков предложений. Конкатенация предложений
каждого текста должна давать исходный текст, иначе смещения
исправлений в полнотекстовом API разойдутся с входом.
"""

from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from ..exceptions import ConfigurationError, InputTypeError


class SplitOn:
    """Тривиальный сплиттер: режет текст после каждого символа-разделителя."""

    def __init__(self, split_chars: Iterable[str]):
        """
        Инициализирует сплиттер.

        Args:
            split_chars: Символы-разделители, каждый ровно из одной кодовой точки
        """
        if isinstance(split_chars, str):
            raise ConfigurationError(
                "split_chars должен быть списком строк, а не строкой."
            )
        chars = []
        for char in split_chars:
            if not isinstance(char, str) or len(char) != 1:
                raise ConfigurationError(
                    "Каждый элемент split_chars должен быть строкой ровно из одного символа."
                )
            chars.append(char)
        self._split_chars: Tuple[str, ...] = tuple(chars)
        self._char_set = frozenset(chars)

    @property
    def split_chars(self) -> Tuple[str, ...]:
        return self._split_chars

    def split(self, text: str) -> List[str]:
        """
        Разбивает один текст на предложения.

        Args:
            text: Исходный текст

        Returns:
            Список предложений; разделитель остаётся в конце предложения
        """
        sentences = []
        start = 0

        for i, char in enumerate(text):
            if char in self._char_set:
                sentences.append(text[start:i + 1])
                start = i + 1

        if start != len(text):
            sentences.append(text[start:])
        return sentences

    def __call__(self, texts: Sequence[str]) -> List[List[str]]:
        return [self.split(text) for text in texts]

    def __repr__(self) -> str:
        return f"SplitOn({list(self._split_chars)!r})"


class CallableSplitter:
    """Адаптер для произвольного вызываемого сплиттера с проверкой результата."""

    def __init__(self, func: Callable[[List[str]], Any]):
        if not callable(func):
            raise ConfigurationError(f"Сплиттер должен быть вызываемым объектом, получен {type(func).__name__}")
        self.func = func

    def __call__(self, texts: Sequence[str]) -> List[List[str]]:
        texts = list(texts)
        output = self.func(texts)
        try:
            groups = [list(group) for group in output]
        except TypeError as e:
            raise ConfigurationError(f"Сплиттер вернул не список списков: {e}") from e

        if len(groups) != len(texts):
            raise ConfigurationError(
                f"Сплиттер вернул {len(groups)} групп предложений для {len(texts)} текстов"
            )
        for group in groups:
            for sentence in group:
                if not isinstance(sentence, str):
                    raise InputTypeError(
                        f"Сплиттер вернул предложение типа {type(sentence).__name__}, ожидалась строка"
                    )
        return groups

    def __repr__(self) -> str:
        return f"CallableSplitter({self.func!r})"


def as_splitter(obj: Any) -> Optional[Callable[[Sequence[str]], List[List[str]]]]:
    """Приводит пользовательский сплиттер к проверенному вызываемому объекту."""
    if obj is None:
        return None
    if isinstance(obj, (SplitOn, CallableSplitter)):
        return obj
    return CallableSplitter(obj)
