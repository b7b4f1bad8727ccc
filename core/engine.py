"""
Фасад заміни шаблонів для інтерактивного шару (UI, файли).

Архітектурний патерн: Facade Pattern
Відповідальність: Валідація вводу, розбір правил, виклик
resolver + renderer та формування структурованого результату.

Чисті функції з core.substitution залишаються тотальними; всі
ліміти та ValueError живуть тільки тут.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from core.config import config
from core.renderer import render
from core.substitution import exchange_rules
from utils.conflict_resolution import resolve_occurrences
from utils.occurrences import Occurrence

logger = logging.getLogger(__name__)


@dataclass
class SubstitutionResult:
    """
    Структурований результат заміни.

    Design Principle: Immutable data objects для передачі між шарами.
    """
    occurrences: List[Occurrence]
    substituted_text: str
    original_text: str
    occurrences_count: int
    rules: List[Tuple[str, str]] = field(default_factory=list)

    def matched_text(self, occurrence: Occurrence) -> str:
        return self.original_text[occurrence.start:occurrence.end]

    def replacements_by_rule(self) -> Dict[int, int]:
        """Кількість застосованих замін для кожного правила (за індексом)."""
        return dict(Counter(o.rule_index for o in self.occurrences))

    def format_occurrences_list(self) -> str:
        """
        Форматує список замін для відображення.

        Returns:
            Текстове представлення входжень з позиціями та номерами правил
        """
        if not self.occurrences:
            return "Входжень не знайдено"

        lines = []
        for idx, occurrence in enumerate(self.occurrences, 1):
            lines.append(
                f"{idx}. '{self.matched_text(occurrence)}' → '{occurrence.replacement}' "
                f"(позиція {occurrence.start}-{occurrence.end}, "
                f"правило {occurrence.rule_index + 1})"
            )

        return "\n".join(lines)


def parse_rules(
    text: str,
    separator: Optional[str] = None
) -> List[Tuple[str, str]]:
    """
    Розбирає правила у форматі "pattern => replacement", по одному на рядок.

    Порожні рядки та коментарі (#) пропускаються. Пробіли навколо
    шаблону та заміни обрізаються. Правило з порожнім шаблоном
    зберігається: воно просто ніколи не збігається.

    Raises:
        ValueError: Рядок без роздільника
    """
    separator = separator or config.RULE_SEPARATOR
    rules: List[Tuple[str, str]] = []

    for line_number, line in enumerate(text.splitlines(), 1):
        stripped = line.strip()
        if not stripped or stripped.startswith(config.COMMENT_PREFIX):
            continue

        if separator not in line:
            raise ValueError(
                f"Некоректне правило в рядку {line_number}: '{stripped}'. "
                f"Очікується формат 'шаблон {separator} заміна'"
            )

        pattern, replacement = line.split(separator, 1)
        rules.append((pattern.strip(), replacement.strip()))

    return rules


class SubstitutionEngine:
    """
    Координує пошук, розв'язання конфліктів та рендеринг.

    Stateless: кожен виклик будує власну occurrence map і нічого не кешує,
    тому один екземпляр можна безпечно використовувати з кількох потоків.
    """

    def substitute(
        self,
        text: str,
        rules: Iterable[Sequence[str]]
    ) -> SubstitutionResult:
        """
        Виконує одночасну заміну всіх правил.

        Args:
            text: Текст для обробки (може бути порожнім)
            rules: Впорядковані пари (pattern, replacement)

        Returns:
            SubstitutionResult з результатами

        Raises:
            ValueError: Текст завеликий або забагато правил
        """
        rules = [(pattern, replacement) for pattern, replacement in rules]
        self._validate_input(text, rules)

        logger.info(f"Starting substitution: {len(rules)} rules, {len(text)} chars")

        occurrence_map = resolve_occurrences(text, rules)
        substituted = render(text, occurrence_map)

        logger.info(f"Applied {len(occurrence_map)} replacements")

        return SubstitutionResult(
            occurrences=occurrence_map.to_list(),
            substituted_text=substituted,
            original_text=text,
            occurrences_count=len(occurrence_map),
            rules=rules
        )

    def substitute_text_rules(self, text: str, rules_text: str) -> SubstitutionResult:
        """Те саме що substitute, але правила задані текстом."""
        return self.substitute(text, parse_rules(rules_text))

    def exchange(self, text: str, a: str, b: str) -> SubstitutionResult:
        """Міняє місцями a та b (див. core.substitution.exchange)."""
        return self.substitute(text, exchange_rules(a, b))

    def _validate_input(self, text: str, rules: List[Tuple[str, str]]) -> None:
        """
        Валідує інтерактивний ввід.

        Raises:
            ValueError: Якщо ввід перевищує ліміти
        """
        if len(text) > config.MAX_TEXT_LENGTH:
            raise ValueError(
                f"Текст завеликий: {len(text)} символів. "
                f"Максимум: {config.MAX_TEXT_LENGTH}"
            )

        if len(rules) > config.MAX_RULES:
            raise ValueError(
                f"Забагато правил: {len(rules)}. "
                f"Максимум: {config.MAX_RULES}"
            )

        empty = sum(1 for pattern, _ in rules if not pattern)
        if empty:
            logger.warning(f"{empty} rule(s) with empty pattern will never match")
