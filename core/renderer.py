"""
Рендеринг результату заміни з resolved occurrence map.
"""

import logging
from typing import Iterable, List

from utils.occurrences import Occurrence

logger = logging.getLogger(__name__)


def render(source: str, occurrences: Iterable[Occurrence]) -> str:
    """
    Збирає новий текст за один прохід по входженнях.

    Незмінені ділянки копіюються з source, текст заміни вставляється
    як є і більше ніколи не сканується.

    Args:
        source: Оригінальний текст
        occurrences: Входження за зростанням start, без перетинів
            (гарантує PatternOrderResolver)

    Returns:
        Текст після заміни
    """
    parts: List[str] = []
    cursor = 0

    for occurrence in occurrences:
        assert occurrence.start >= cursor, "occurrences must be ordered and non-overlapping"

        parts.append(source[cursor:occurrence.start])
        parts.append(occurrence.replacement)
        cursor = occurrence.end

    if not parts:
        return source

    parts.append(source[cursor:])
    return "".join(parts)
