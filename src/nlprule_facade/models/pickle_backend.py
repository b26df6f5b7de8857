"""
Бэкенд по умолчанию: артефакты хранятся как pickle-снимки объектов движка.

Данные распаковываются без изменений, поэтому загружать их можно только
из релизного хранилища или из файлов, которым вы доверяете.
"""

from __future__ import annotations

import logging
import pickle
from typing import Any, BinaryIO, Dict

from ..exceptions import ResourceCorrupt
from ..interfaces.engine import RulesEngine, TokenizerEngine
from .base_model import BaseEngineBackend

logger = logging.getLogger(__name__)

_UNPICKLE_ERRORS = (
    pickle.UnpicklingError,
    EOFError,
    AttributeError,
    ImportError,
    IndexError,
    TypeError,
    ValueError,
    KeyError,
    OverflowError,
    MemoryError,
    RecursionError,
)


class PickleBackend(BaseEngineBackend):
    """Десериализация движков через pickle."""

    def _unpickle(self, stream: BinaryIO, what: str) -> Any:
        try:
            return pickle.load(stream)
        except _UNPICKLE_ERRORS as e:
            raise ResourceCorrupt(f"Не удалось десериализовать {what}: {e}") from e

    def load_tokenizer(self, stream: BinaryIO) -> Any:
        engine = self._unpickle(stream, "токенизатор")
        if not isinstance(engine, TokenizerEngine):
            raise ResourceCorrupt(
                f"Артефакт токенизатора содержит {type(engine).__name__}, а не движок токенизации"
            )
        logger.debug(f"Токенизатор десериализован: {type(engine).__name__}")
        return engine

    def load_rules(self, stream: BinaryIO) -> Any:
        engine = self._unpickle(stream, "правила")
        if not isinstance(engine, RulesEngine):
            raise ResourceCorrupt(
                f"Артефакт правил содержит {type(engine).__name__}, а не движок правил"
            )
        logger.debug(f"Правила десериализованы: {type(engine).__name__}")
        return engine

    def get_backend_info(self) -> Dict[str, Any]:
        return {
            "name": "pickle",
            "type": "pickle",
            "protocol": pickle.HIGHEST_PROTOCOL,
        }
