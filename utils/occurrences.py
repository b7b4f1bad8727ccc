"""
Модель входжень: знайдені збіги шаблонів та впорядкована карта вибраних.

Архітектурна стратегія: OccurrenceMap - це ordered map за start offset,
яка гарантує, що збережені входження попарно не перетинаються.
Перевірка перетину дивиться тільки на сусідів (predecessor/successor),
тому кожна спроба вставки коштує O(log n) на пошук.
"""

from bisect import bisect_right, insort
from dataclasses import dataclass
from heapq import merge
from typing import Dict, Iterable, Iterator, List


@dataclass(frozen=True)
class Occurrence:
    """
    Одне входження шаблону в оригінальному тексті.

    Offsets - це індекси Python str (code points), тому межі завжди
    припадають на цілі символи.
    """
    start: int
    length: int
    replacement: str
    rule_index: int = 0

    @property
    def end(self) -> int:
        return self.start + self.length

    def overlaps(self, other: "Occurrence") -> bool:
        """Чи перетинаються напіввідкриті діапазони [start, end)."""
        return not (self.end <= other.start or self.start >= other.end)


class OccurrenceMap:
    """
    Впорядкована за start offset колекція входжень без перетинів.

    Invariant: для сусідніх o1, o2 (o1.start < o2.start) виконується
    o1.end <= o2.start. Вставка ніколи не перезаписує існуючий запис.
    """

    def __init__(self):
        self._starts: List[int] = []
        self._by_start: Dict[int, Occurrence] = {}

    def overlaps(self, start: int, length: int) -> bool:
        """
        Перевіряє, чи перетинає діапазон [start, start + length)
        будь-яке вже збережене входження.

        Достатньо перевірити predecessor (найбільший start <= start)
        та successor (найменший start > start).
        """
        idx = bisect_right(self._starts, start)

        if idx > 0:
            predecessor = self._by_start[self._starts[idx - 1]]
            if predecessor.end > start:
                return True

        if idx < len(self._starts):
            if start + length > self._starts[idx]:
                return True

        return False

    def add(self, occurrence: Occurrence) -> bool:
        """
        Додає входження, якщо воно ні з чим не перетинається.

        Returns:
            True якщо входження збережено, False якщо відхилено
        """
        if self.overlaps(occurrence.start, occurrence.length):
            return False

        insort(self._starts, occurrence.start)
        self._by_start[occurrence.start] = occurrence
        return True

    def add_all(self, occurrences: Iterable[Occurrence]) -> int:
        """
        Додає входження по черзі з тією ж семантикою, що й add (перший виграє).

        Зростаючі серії без перетинів (так виглядає вивід одного правила)
        зливаються з картою за один прохід замість вставки по одному.

        Returns:
            Кількість збережених входжень
        """
        pending: List[Occurrence] = []
        kept = 0

        for occurrence in occurrences:
            if pending and occurrence.start < pending[-1].end:
                if occurrence.start >= pending[-1].start:
                    continue
                # серія закінчилась: кандидат іде назад
                kept += self._merge(pending)
                pending = []

            if not self.overlaps(occurrence.start, occurrence.length):
                pending.append(occurrence)

        kept += self._merge(pending)
        return kept

    def _merge(self, run: List[Occurrence]) -> int:
        """Зливає зростаючу серію, яка не перетинається з картою."""
        if not run:
            return 0

        self._starts = list(merge(self._starts, (o.start for o in run)))
        for occurrence in run:
            self._by_start[occurrence.start] = occurrence
        return len(run)

    def starts(self) -> List[int]:
        return list(self._starts)

    def to_list(self) -> List[Occurrence]:
        return list(self)

    def __iter__(self) -> Iterator[Occurrence]:
        for start in self._starts:
            yield self._by_start[start]

    def __len__(self) -> int:
        return len(self._starts)

    def __contains__(self, start: int) -> bool:
        return start in self._by_start

    def __repr__(self) -> str:
        return f"OccurrenceMap({self.to_list()!r})"
