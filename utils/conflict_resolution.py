"""
Розв'язання конфліктів між перетинаючимися входженнями шаблонів.

Архітектурна стратегія: Пріоритет визначає порядок правил у списку,
а не порядок виявлення збігів. Кандидат зберігається тільки якщо
він не перетинається з жодним вже збереженим входженням.
"""

import logging
from typing import Iterable, Protocol, Sequence

from matchers.literal_matcher import LiteralMatcher
from utils.occurrences import Occurrence, OccurrenceMap

logger = logging.getLogger(__name__)


class ConflictResolutionStrategy(Protocol):
    """Протокол для стратегій розв'язання конфліктів."""

    def resolve(self, candidates: Iterable[Occurrence]) -> OccurrenceMap:
        """Вибирає неперетинну підмножину кандидатів."""
        ...


class PatternOrderResolver:
    """
    Розв'язування на основі порядку правил.

    Стратегія: Кандидати надходять правило за правилом. Перший кандидат,
    що займає діапазон, виграє; пізніші правила ніколи не перезаписують
    збережене входження на тому ж або перетинному діапазоні.
    """

    @staticmethod
    def resolve(candidates: Iterable[Occurrence]) -> OccurrenceMap:
        """
        Будує resolved occurrence map з потоку кандидатів.

        Args:
            candidates: Входження у порядку пріоритету

        Returns:
            OccurrenceMap без перетинів, впорядкована за start offset
        """
        resolved = OccurrenceMap()
        kept = resolved.add_all(candidates)

        logger.debug("Resolved %s non-overlapping occurrences", kept)
        return resolved


def resolve_occurrences(
    source: str,
    rules: Iterable[Sequence[str]],
    resolver: ConflictResolutionStrategy = PatternOrderResolver,
) -> OccurrenceMap:
    """
    Публічний API: знаходить та розв'язує всі входження правил у тексті.

    Args:
        source: Оригінальний текст (не змінюється)
        rules: Впорядковані пари (pattern, replacement)
        resolver: Стратегія розв'язання конфліктів

    Returns:
        OccurrenceMap з переможцями, впорядкована за start offset
    """
    matcher = LiteralMatcher(rules)
    return resolver.resolve(matcher.match(source))
