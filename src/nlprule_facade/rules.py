"""
Фасад движка правил.

Применяет внешние грамматические правила к финализированным токенам
и выдаёт исправления или исправленный текст. Токенизатор разделяется
по ссылке и после загрузки не изменяется.
"""

import logging
from typing import Any, List, Optional

from .components.corrector import apply_suggestions, rebase_suggestions
from .components.dispatch import sentence_guard, text_guard
from .components.splitter import as_splitter
from .exceptions import ResourceUnavailable
from .models.backend_factory import BackendFactory
from .models.base_model import BaseEngineBackend, Suggestion
from .resources import ArtifactResolver, RULES_ARTIFACT
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class Rules:
    """Правила, привязанные к токенизатору."""

    def __init__(self, path: str, tokenizer: Tokenizer, sentence_splitter: Any = None,
                 backend: Optional[BaseEngineBackend] = None):
        """
        Загружает правила из локального файла.

        Args:
            path: Путь к распакованному rules.bin
            tokenizer: Токенизатор, которым готовятся предложения
            sentence_splitter: Сплиттер для полнотекстового API
            backend: Бэкенд десериализации (по умолчанию из config)

        Raises:
            ResourceUnavailable: файл не открывается
            ResourceCorrupt: данные не десериализуются
        """
        backend = BackendFactory.resolve(backend)
        try:
            with open(path, 'rb') as f:
                engine = backend.load_rules(f)
        except OSError as e:
            raise ResourceUnavailable(f"Не удалось прочитать правила {path}: {e}") from e
        logger.info(f"Правила загружены из файла: {path}")
        self._init(engine, tokenizer, sentence_splitter)

    def _init(self, engine: Any, tokenizer: Tokenizer, sentence_splitter: Any) -> None:
        self._engine = engine
        self._tokenizer = tokenizer
        self._sentence_splitter = as_splitter(sentence_splitter)

    @classmethod
    def load(cls, code: str, tokenizer: Tokenizer, sentence_splitter: Any = None,
             backend: Optional[BaseEngineBackend] = None,
             resolver: Optional[ArtifactResolver] = None) -> "Rules":
        """Загружает правила для языка из релизного хранилища (с кэшем)."""
        stream = (resolver or ArtifactResolver()).fetch(code, RULES_ARTIFACT)
        engine = BackendFactory.resolve(backend).load_rules(stream)
        logger.info(f"Правила загружены: {code}")
        return cls.from_engine(engine, tokenizer, sentence_splitter)

    @classmethod
    def from_engine(cls, engine: Any, tokenizer: Tokenizer, sentence_splitter: Any = None) -> "Rules":
        """Создаёт фасад над уже загруженным движком правил."""
        rules = cls.__new__(cls)
        rules._init(engine, tokenizer, sentence_splitter)
        return rules

    @property
    def engine(self) -> Any:
        return self._engine

    @property
    def tokenizer(self) -> Tokenizer:
        return self._tokenizer

    @property
    def sentence_splitter(self) -> Any:
        return self._sentence_splitter

    def _suggest_one(self, sentence: str) -> List[Suggestion]:
        tokens = self._tokenizer.pipe(sentence)
        return [Suggestion.from_raw(raw) for raw in self._engine.apply(tokens)]

    def _correct_one(self, sentence: str) -> str:
        return apply_suggestions(sentence, self._suggest_one(sentence))

    def suggest_sentence(self, sentence_or_sentences: Any) -> Any:
        """Исправления для предложения(й) со смещениями в координатах предложения."""
        return sentence_guard(sentence_or_sentences, self._suggest_one)

    def suggest(self, text_or_texts: Any) -> Any:
        """
        Исправления для текста(ов).

        Смещения переводятся в координаты всего текста: к исправлениям
        предложения прибавляется число символов предыдущих предложений.
        """
        def suggest_sentences(sentences: List[str]) -> List[Suggestion]:
            suggestions = rebase_suggestions((self._suggest_one(s) for s in sentences), sentences)
            logger.debug(f"Проверка: предложений={len(sentences)}, исправлений={len(suggestions)}")
            return suggestions

        return text_guard(text_or_texts, self._sentence_splitter, ".suggest_sentence", suggest_sentences)

    def correct_sentence(self, sentence_or_sentences: Any) -> Any:
        """Исправленное предложение(я): каждый диапазон заменяется лучшим вариантом."""
        return sentence_guard(sentence_or_sentences, self._correct_one)

    def correct(self, text_or_texts: Any) -> Any:
        """Исправленный текст(ы): исправленные предложения склеиваются без разделителя."""
        def correct_sentences(sentences: List[str]) -> str:
            return "".join(self._correct_one(s) for s in sentences)

        return text_guard(text_or_texts, self._sentence_splitter, ".correct_sentence", correct_sentences)
