"""Простые движки-заглушки для тестов фасада.

Классы объявлены на уровне модуля, чтобы их можно было сериализовать
через pickle и загружать как настоящие артефакты.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from nlprule_facade.models import BaseEngineBackend


WORD_RE = re.compile(r"\w+|[^\w\s]")

LEXICON: Dict[str, List[Tuple[str, str]]] = {
    "the": [("the", "DT")],
    "sky": [("sky", "NN")],
    "is": [("be", "VBZ")],
    "blue": [("blue", "JJ"), ("blue", "NN"), ("blue", "JJ")],
    "cats": [("cat", "NNS")],
    "sleeps": [("sleep", "VBZ")],
    "sleep": [("sleep", "VBP"), ("sleep", "NN")],
    "teh": [("", "")],
}

GROUPS: Dict[str, List[str]] = {
    "sleep": ["sleep", "sleeps", "slept", "sleeping"],
}


@dataclass
class FakeOptions:
    use_compound_split_heuristic: bool = False


@dataclass
class FakeTag:
    lemma: str
    pos: str


class FakeTagger:
    def __init__(self):
        self.calls = []

    def get_tags(self, word, add_lower, use_compound_split_heuristic):
        self.calls.append((word, add_lower, use_compound_split_heuristic))
        tags = [FakeTag(lemma, pos) for lemma, pos in LEXICON.get(word, [])]
        if add_lower and word.lower() != word:
            tags.extend(FakeTag(lemma, pos) for lemma, pos in LEXICON.get(word.lower(), []))
        return tags

    def get_group_members(self, word):
        return GROUPS.get(word, [])


@dataclass
class FakeToken:
    text: str
    char_span: Tuple[int, int]
    tags: List[Tuple[str, str]] = field(default_factory=list)
    chunks: List[str] = field(default_factory=list)


class FakeTokenizerEngine:
    """Токенизирует по словам и знакам препинания, теги берёт из LEXICON."""

    def __init__(self, use_compound_split_heuristic: bool = False):
        self.tagger = FakeTagger()
        self.options = FakeOptions(use_compound_split_heuristic)

    def tokenize(self, sentence: str):
        return [(m.group(), m.start(), m.end()) for m in WORD_RE.finditer(sentence)]

    def disambiguate(self, tokens):
        return tokens

    def finalize(self, tokens):
        output = []
        for text, start, end in tokens:
            tags = list(LEXICON.get(text.lower(), []))
            chunks = ["B-NP"] if tags and tags[0][1].startswith("NN") else []
            output.append(FakeToken(text, (start, end), tags, chunks))
        return output


@dataclass
class FakeSuggestion:
    start: int
    end: int
    text: List[str]


class FakeRulesEngine:
    """Заменяет слова из словаря опечаток, смещения в символах предложения."""

    def __init__(self, replacements: Dict[str, List[str]] = None):
        self.replacements = replacements or {
            "teh": ["the"],
            "recieve": ["receive", "recieves"],
            "bb": ["b"],
        }

    def apply(self, tokens: Sequence[FakeToken]):
        return [
            FakeSuggestion(t.char_span[0], t.char_span[1], list(self.replacements[t.text]))
            for t in tokens
            if t.text in self.replacements
        ]


class ScriptedRulesEngine:
    """Возвращает заранее заданные исправления для конкретных предложений."""

    def __init__(self, script: Dict[str, List[Tuple[int, int, List[str]]]]):
        self.script = script

    def apply(self, tokens: Sequence[FakeToken]):
        if not tokens:
            return []
        # Ключ: тексты токенов через пробел
        key = " ".join(t.text for t in tokens)
        return [FakeSuggestion(start, end, list(text)) for start, end, text in self.script.get(key, [])]


class FakeBackend(BaseEngineBackend):
    """Бэкенд без десериализации: всегда отдаёт новые заглушки."""

    def load_tokenizer(self, stream):
        stream.read()
        return FakeTokenizerEngine()

    def load_rules(self, stream):
        stream.read()
        return FakeRulesEngine()

    def get_backend_info(self):
        return {"name": "fake", "type": "import"}
