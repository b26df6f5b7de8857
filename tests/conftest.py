import gzip
import pickle
from pathlib import Path
from unittest.mock import Mock

import pytest

from nlprule_facade import Rules, SplitOn, Tokenizer
from nlprule_facade.config import config as app_config

from utils.fake_engine import FakeRulesEngine, FakeTokenizerEngine
from utils.mock_http import make_session


@pytest.fixture(autouse=True)
def isolated_cache(tmp_path, monkeypatch) -> Path:
    """Каждый тест получает собственный корень кэша.

    Тесты не должны писать в кэш пользователя.
    """
    root = tmp_path / "user-cache"
    monkeypatch.setitem(app_config.config_data["cache"], "root_dir", str(root))
    monkeypatch.setitem(app_config.config_data["cache"], "enabled", True)
    return root


@pytest.fixture
def tokenizer_engine() -> FakeTokenizerEngine:
    return FakeTokenizerEngine()


@pytest.fixture
def rules_engine() -> FakeRulesEngine:
    return FakeRulesEngine()


@pytest.fixture
def splitter() -> SplitOn:
    return SplitOn([".", "!", "?"])


@pytest.fixture
def tokenizer(tokenizer_engine, splitter) -> Tokenizer:
    return Tokenizer.from_engine(tokenizer_engine, sentence_splitter=splitter)


@pytest.fixture
def rules(rules_engine, tokenizer, splitter) -> Rules:
    return Rules.from_engine(rules_engine, tokenizer, sentence_splitter=splitter)


@pytest.fixture
def tokenizer_bytes() -> bytes:
    """Распакованный артефакт токенизатора (pickle)."""
    return pickle.dumps(FakeTokenizerEngine())


@pytest.fixture
def rules_bytes() -> bytes:
    """Распакованный артефакт правил (pickle)."""
    return pickle.dumps(FakeRulesEngine())


@pytest.fixture
def artifact_files(tmp_path, tokenizer_bytes, rules_bytes):
    """Локальные файлы tokenizer.bin и rules.bin."""
    tokenizer_path = tmp_path / "tokenizer.bin"
    rules_path = tmp_path / "rules.bin"
    tokenizer_path.write_bytes(tokenizer_bytes)
    rules_path.write_bytes(rules_bytes)
    return tokenizer_path, rules_path


@pytest.fixture
def http_session(tokenizer_bytes, rules_bytes) -> Mock:
    """Сессия requests, отдающая gzip-артефакты для языка en."""
    return make_session({
        "en/tokenizer.bin.gz": gzip.compress(tokenizer_bytes),
        "en/rules.bin.gz": gzip.compress(rules_bytes),
    })


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")


@pytest.fixture(scope="session")
def sample_texts():
    """Простые наборы английских текстов для тестирования."""
    from fixtures.sample_texts import SAMPLE_CLEAN_TEXT, SAMPLE_TYPO_TEXT, SAMPLE_UNICODE_TEXT

    return {
        "clean": SAMPLE_CLEAN_TEXT,
        "typo": SAMPLE_TYPO_TEXT,
        "unicode": SAMPLE_UNICODE_TEXT,
    }
