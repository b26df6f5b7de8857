"""
Тесты для диспетчеризации «строка или набор строк».
"""

import pytest

from nlprule_facade import ConfigurationError, InputTypeError, SplitOn
from nlprule_facade.components.dispatch import extract_strings, is_batch, sentence_guard, text_guard


class TestIsBatch:
    @pytest.mark.parametrize("value", [["a"], ("a",), iter(["a"]), {"a"}, (x for x in ["a"])])
    def test_iterables_are_batches(self, value):
        assert is_batch(value) is True

    @pytest.mark.parametrize("value", ["", "abc", 5, None])
    def test_strings_and_scalars_are_not_batches(self, value):
        assert is_batch(value) is False


class TestExtractStrings:
    def test_scalar(self):
        assert extract_strings("abc") == ["abc"]

    def test_generator(self):
        assert extract_strings(s for s in ["a", "b"]) == ["a", "b"]

    def test_non_string_element(self):
        with pytest.raises(InputTypeError) as exc_info:
            extract_strings(["a", 1])
        assert "1" in str(exc_info.value)

    def test_non_string_scalar(self):
        with pytest.raises(InputTypeError):
            extract_strings(42)

    def test_bytes_are_not_strings(self):
        """bytes итерируются как числа и поэтому отклоняются."""
        with pytest.raises(InputTypeError):
            extract_strings(b"abc")

    def test_input_type_error_is_type_error(self):
        with pytest.raises(TypeError):
            extract_strings([None])


class TestSentenceGuard:
    def test_scalar_in_scalar_out(self):
        assert sentence_guard("abc", str.upper) == "ABC"

    def test_batch_in_list_out(self):
        assert sentence_guard(("a", "b", "c"), str.upper) == ["A", "B", "C"]

    def test_empty_batch(self):
        assert sentence_guard([], str.upper) == []

    def test_empty_string_is_scalar(self):
        assert sentence_guard("", len) == 0


class TestTextGuard:
    def test_scalar_text(self):
        result = text_guard("a. b.", SplitOn(["."]), ".x_sentence", lambda sentences: sentences)
        assert result == ["a.", " b."]

    def test_batch_texts(self):
        result = text_guard(["a. b.", "c"], SplitOn(["."]), ".x_sentence", len)
        assert result == [2, 1]

    def test_missing_splitter_names_sentence_method(self):
        with pytest.raises(ConfigurationError) as exc_info:
            text_guard("a.", None, ".correct_sentence", len)
        assert ".correct_sentence" in str(exc_info.value)

    def test_input_checked_before_splitter(self):
        """Неверный тип входа обнаруживается даже без сплиттера."""
        with pytest.raises(InputTypeError):
            text_guard([1], None, ".x_sentence", len)
