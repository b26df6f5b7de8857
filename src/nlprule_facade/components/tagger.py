"""
Компонент для запросов к морфологическому словарю движка.
"""

from typing import Any, List, Tuple

from ..models.base_model import WordData


class Tagger:
    """Обёртка над теггером токенизатора.

    Флаг эвристики разбиения составных слов берётся из опций токенизатора
    и передаётся движку без изменений.
    """

    def __init__(self, tagger: Any, options: Any):
        self._tagger = tagger
        self._options = options

    @property
    def use_compound_split_heuristic(self) -> bool:
        return getattr(self._options, "use_compound_split_heuristic", False)

    def get_tags(self, word: str, add_lower: bool = False) -> List[Tuple[str, str]]:
        """
        Возвращает морфологические теги слова.

        Args:
            word: Слово
            add_lower: Добавить теги формы в нижнем регистре

        Returns:
            Список пар (лемма, POS)
        """
        raw = self._tagger.get_tags(word, add_lower, self.use_compound_split_heuristic)
        return [tuple(WordData.from_raw(t)) for t in raw]

    def get_group_members(self, word: str) -> List[str]:
        """Возвращает словоформы, морфологически связанные со словом."""
        return [str(member) for member in self._tagger.get_group_members(word)]
