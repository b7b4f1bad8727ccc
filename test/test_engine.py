"""
Unit tests для SubstitutionEngine та parse_rules.

Архітектура тестів:
- Організація: Arrange-Act-Assert pattern
- Ізоляція: Кожен тест незалежний; ліміти конфігу змінюються через patch

Запуск:
    pytest test/test_engine.py -v
"""

import pytest
from unittest.mock import patch

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.engine import SubstitutionEngine, SubstitutionResult, parse_rules
from core.config import config
from utils.occurrences import Occurrence


class TestSubstitutionEngine:
    """Тести для фасаду заміни."""

    @pytest.fixture
    def engine(self):
        """Фікстура: створює SubstitutionEngine для кожного тесту."""
        return SubstitutionEngine()

    # ============ ТЕСТИ ВАЛІДАЦІЇ ============

    def test_text_too_long_raises_error(self, engine):
        """Тест: занадто довгий текст викликає ValueError."""
        long_text = "A" * (config.MAX_TEXT_LENGTH + 1)

        with pytest.raises(ValueError, match="завеликий"):
            engine.substitute(long_text, [("A", "B")])

    def test_max_length_text_accepted(self, engine):
        max_text = "A" * config.MAX_TEXT_LENGTH

        result = engine.substitute(max_text, [("AA", "B")])

        assert result.occurrences_count == config.MAX_TEXT_LENGTH // 2

    def test_too_many_rules_raises_error(self, engine):
        with patch.object(config, "MAX_RULES", 2):
            with pytest.raises(ValueError, match="Забагато"):
                engine.substitute("text", [("a", "b")] * 3)

    def test_empty_text_is_valid(self, engine):
        """Тест: порожній текст - коректний ввід."""
        result = engine.substitute("", [("a", "b")])

        assert result.substituted_text == ""
        assert result.occurrences_count == 0

    # ============ ТЕСТИ ФУНКЦІОНАЛЬНОСТІ ============

    def test_basic_substitution(self, engine):
        result = engine.substitute(
            "Hana is cute",
            [("Hana", "Minami"), ("cute", "kawaii"), ("na", "no")]
        )

        assert isinstance(result, SubstitutionResult)
        assert result.substituted_text == "Minami is kawaii"
        assert result.original_text == "Hana is cute"
        assert result.occurrences_count == 2
        assert result.occurrences == [
            Occurrence(0, 4, "Minami", 0),
            Occurrence(8, 4, "kawaii", 1),
        ]

    def test_rules_are_materialized(self, engine):
        """Тест: генератор правил зберігається в результаті як список пар."""
        result = engine.substitute("ab", (pair for pair in [["a", "x"]]))

        assert result.rules == [("a", "x")]

    def test_substitute_text_rules(self, engine):
        result = engine.substitute_text_rules(
            "Bouh Aoi and Hana are kawaii",
            "Bouh => Both\nAoi => Minami\noi => io"
        )

        assert result.substituted_text == "Both Minami and Hana are kawaii"

    def test_exchange(self, engine):
        result = engine.exchange("Both Hina and Hinata are kawaii", "Hina", "Hinata")

        assert result.substituted_text == "Both Hinata and Hina are kawaii"
        assert result.occurrences_count == 2

    def test_replacements_by_rule(self, engine):
        result = engine.substitute("a b a", [("a", "b"), ("b", "a"), ("c", "d")])

        assert result.replacements_by_rule() == {0: 2, 1: 1}

    # ============ ТЕСТИ ФОРМАТУВАННЯ ============

    def test_format_occurrences_list(self, engine):
        result = engine.substitute("Hana is cute", [("cute", "kawaii")])

        formatted = result.format_occurrences_list()

        assert "'cute' → 'kawaii'" in formatted
        assert "позиція 8-12" in formatted
        assert "правило 1" in formatted

    def test_format_empty_occurrences(self, engine):
        result = engine.substitute("Hana", [("Rica", "Aoi")])

        assert result.format_occurrences_list() == "Входжень не знайдено"


class TestParseRules:
    """Тести розбору правил з тексту."""

    def test_basic_rules(self):
        assert parse_rules("Hana => Minami\ncute=>kawaii") == [
            ("Hana", "Minami"),
            ("cute", "kawaii"),
        ]

    def test_skips_blank_lines_and_comments(self):
        text = "# names\n\nHana => Minami\n   \n# end"

        assert parse_rules(text) == [("Hana", "Minami")]

    def test_splits_on_first_separator(self):
        assert parse_rules("a => b => c") == [("a", "b => c")]

    def test_empty_replacement(self):
        assert parse_rules("cute =>") == [("cute", "")]

    def test_empty_pattern_is_kept(self):
        """Тест: правило з порожнім шаблоном не є помилкою."""
        assert parse_rules("=> X") == [("", "X")]

    def test_missing_separator_raises_error(self):
        with pytest.raises(ValueError, match="рядку 2"):
            parse_rules("Hana => Minami\ncute kawaii")

    def test_custom_separator(self):
        assert parse_rules("Hana\tMinami", separator="\t") == [("Hana", "Minami")]
