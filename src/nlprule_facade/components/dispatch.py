"""
Диспетчеризация «строка или набор строк».

Публичные методы фасадов принимают одну строку или любой итерируемый
набор строк. Форма результата повторяет форму входа: строка даёт одно
значение, набор даёт список той же длины в том же порядке.
"""

from typing import Any, Callable, List, Optional, Sequence, TypeVar

from ..exceptions import ConfigurationError, InputTypeError

T = TypeVar("T")


def is_batch(value: Any) -> bool:
    """Набор: всё, что итерируется и не является строкой."""
    return hasattr(value, "__iter__") and not isinstance(value, str)


def extract_strings(value: Any) -> List[str]:
    """
    Извлекает упорядоченный список строк из строки или набора.

    Raises:
        InputTypeError: если вход или элемент набора не строка
    """
    if not is_batch(value):
        if not isinstance(value, str):
            raise InputTypeError(f"Ожидалась строка или набор строк, получен {type(value).__name__}")
        return [value]

    items = []
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise InputTypeError(
                f"Элемент {index} имеет тип {type(item).__name__}, ожидалась строка"
            )
        items.append(item)
    return items


def sentence_guard(sentence_or_sentences: Any, func: Callable[[str], T]) -> Any:
    """Применяет func к каждому предложению, сохраняя форму входа."""
    batch = is_batch(sentence_or_sentences)
    sentences = extract_strings(sentence_or_sentences)

    output = [func(sentence) for sentence in sentences]
    return output if batch else output[0]


def text_guard(
    text_or_texts: Any,
    sentence_splitter: Optional[Callable[[Sequence[str]], List[List[str]]]],
    sentence_equivalent_name: str,
    func: Callable[[List[str]], T],
) -> Any:
    """
    Делит тексты на предложения и применяет func к предложениям каждого текста.

    Args:
        text_or_texts: Текст или набор текстов
        sentence_splitter: Сплиттер фасада
        sentence_equivalent_name: Метод для одного предложения (для сообщения об ошибке)
        func: Обработчик списка предложений одного текста

    Raises:
        ConfigurationError: если сплиттер не задан
    """
    batch = is_batch(text_or_texts)
    texts = extract_strings(text_or_texts)

    if sentence_splitter is None:
        raise ConfigurationError(
            f"sentence_splitter не задан. Для обработки одного предложения используйте {sentence_equivalent_name}."
        )

    output = [func(sentences) for sentences in sentence_splitter(texts)]
    return output if batch else output[0]
