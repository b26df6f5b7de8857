"""
Фасад токенизатора.

Оборачивает внешний токенизатор с дизамбигуатором и выдаёт токены
с текстом, диапазоном в предложении, леммами, POS-тегами и чанками.
"""

import logging
from typing import Any, List, Optional

from .components.dispatch import sentence_guard, text_guard
from .components.splitter import as_splitter
from .components.tagger import Tagger
from .exceptions import ResourceUnavailable
from .models.backend_factory import BackendFactory
from .models.base_model import BaseEngineBackend, Token
from .resources import ArtifactResolver, TOKENIZER_ARTIFACT

logger = logging.getLogger(__name__)


class Tokenizer:
    """Токенизатор: tokenize → disambiguate → finalize для каждого предложения."""

    def __init__(self, path: str, sentence_splitter: Any = None, backend: Optional[BaseEngineBackend] = None):
        """
        Загружает токенизатор из локального файла.

        Args:
            path: Путь к распакованному tokenizer.bin
            sentence_splitter: Сплиттер для полнотекстового API
            backend: Бэкенд десериализации (по умолчанию из config)

        Raises:
            ResourceUnavailable: файл не открывается
            ResourceCorrupt: данные не десериализуются
        """
        backend = BackendFactory.resolve(backend)
        try:
            with open(path, 'rb') as f:
                engine = backend.load_tokenizer(f)
        except OSError as e:
            raise ResourceUnavailable(f"Не удалось прочитать токенизатор {path}: {e}") from e
        logger.info(f"Токенизатор загружен из файла: {path}")
        self._init(engine, sentence_splitter)

    def _init(self, engine: Any, sentence_splitter: Any) -> None:
        self._engine = engine
        self._sentence_splitter = as_splitter(sentence_splitter)

    @classmethod
    def load(cls, code: str, sentence_splitter: Any = None,
             backend: Optional[BaseEngineBackend] = None,
             resolver: Optional[ArtifactResolver] = None) -> "Tokenizer":
        """
        Загружает токенизатор для языка из релизного хранилища (с кэшем).

        Args:
            code: Код языка, например 'en' или 'de'
            sentence_splitter: Сплиттер для полнотекстового API
            backend: Бэкенд десериализации
            resolver: Резолвер артефактов
        """
        stream = (resolver or ArtifactResolver()).fetch(code, TOKENIZER_ARTIFACT)
        engine = BackendFactory.resolve(backend).load_tokenizer(stream)
        logger.info(f"Токенизатор загружен: {code}")
        return cls.from_engine(engine, sentence_splitter)

    @classmethod
    def from_engine(cls, engine: Any, sentence_splitter: Any = None) -> "Tokenizer":
        """Создаёт фасад над уже загруженным движком."""
        tokenizer = cls.__new__(cls)
        tokenizer._init(engine, sentence_splitter)
        return tokenizer

    @property
    def engine(self) -> Any:
        return self._engine

    @property
    def sentence_splitter(self) -> Any:
        return self._sentence_splitter

    @property
    def tagger(self) -> Tagger:
        return Tagger(self._engine.tagger, self._engine.options)

    def pipe(self, sentence: str) -> List[Any]:
        """Возвращает финализированные токены движка для одного предложения."""
        engine = self._engine
        return list(engine.finalize(engine.disambiguate(engine.tokenize(sentence))))

    def _tokenize_one(self, sentence: str) -> List[Token]:
        return [Token.from_raw(raw) for raw in self.pipe(sentence)]

    def tokenize_sentence(self, sentence_or_sentences: Any) -> Any:
        """
        Токенизирует предложение или набор предложений.

        Returns:
            Список токенов (для строки) или список списков (для набора)
        """
        return sentence_guard(sentence_or_sentences, self._tokenize_one)

    def tokenize(self, text_or_texts: Any) -> Any:
        """
        Токенизирует текст или набор текстов, разбивая их на предложения.

        Токены всех предложений текста идут одним списком; диапазоны
        токенов остаются в координатах своего предложения.
        """
        def tokenize_sentences(sentences: List[str]) -> List[Token]:
            output: List[Token] = []
            for sentence in sentences:
                output.extend(self._tokenize_one(sentence))
            logger.debug(f"Токенизация: предложений={len(sentences)}, токенов={len(output)}")
            return output

        return text_guard(text_or_texts, self._sentence_splitter, ".tokenize_sentence", tokenize_sentences)
