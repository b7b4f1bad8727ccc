"""
Literal matcher: пошук точних (не regex) входжень шаблонів.

Архітектурна стратегія: Кожен шаблон шукається в *оригінальному* тексті,
тому текст заміни ніколи не сканується повторно.
"""

import logging
from typing import Iterable, Iterator, List, Sequence, Tuple

from utils.occurrences import Occurrence

logger = logging.getLogger(__name__)

Rule = Tuple[str, str]


def find_literal(source: str, pattern: str) -> Iterator[int]:
    """
    Повертає start offsets усіх неперетинних входжень pattern у source.

    Сканування зліва направо: після збігу пошук продовжується з його кінця,
    як у str.replace. Порожній шаблон ніколи не збігається.
    """
    if not pattern:
        return

    step = len(pattern)
    position = source.find(pattern)

    while position != -1:
        yield position
        position = source.find(pattern, position + step)


class LiteralMatcher:
    """
    Збирач кандидатів для впорядкованого списку правил.

    Порядок кандидатів: правило за правилом (у порядку списку),
    всередині правила - за зростанням offset. Саме цей порядок
    визначає пріоритет при розв'язанні конфліктів.
    """

    def __init__(self, rules: Iterable[Sequence[str]]):
        self.rules: List[Rule] = [(pattern, replacement) for pattern, replacement in rules]

    def match(self, source: str) -> Iterator[Occurrence]:
        """Генерує Occurrence для кожного збігу кожного правила."""
        for rule_index, (pattern, replacement) in enumerate(self.rules):
            if not pattern:
                logger.debug("Skipping empty pattern at rule %s", rule_index)
                continue

            for start in find_literal(source, pattern):
                yield Occurrence(
                    start=start,
                    length=len(pattern),
                    replacement=replacement,
                    rule_index=rule_index,
                )
