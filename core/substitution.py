"""
Одночасна заміна кількох шаблонів та обмін двох шаблонів місцями.

Public API бібліотеки: дві чисті функції без побічних ефектів.
Жоден вхід (порожній текст, порожній список, порожній шаблон)
не викликає винятків.
"""

from typing import Iterable, List, Sequence, Tuple

from core.renderer import render
from utils.conflict_resolution import resolve_occurrences


def multi_replace(source: str, patterns: Iterable[Sequence[str]]) -> str:
    """
    Замінює всі входження всіх шаблонів одночасно.

    Пріоритет має порядок у patterns: якщо збіги перетинаються,
    залишається збіг раннього правила. Текст заміни не сканується
    повторно, тому пізніші правила його не зачіпають.

    >>> multi_replace("Hana is cute", [("Hana", "Minami"), ("cute", "kawaii")])
    'Minami is kawaii'
    >>> multi_replace("Hana is cute", [("Hana", "Minami"), ("cute", "kawaii"), ("kawaii", "hot")])
    'Minami is kawaii'
    """
    return render(source, resolve_occurrences(source, patterns))


def exchange_rules(a: str, b: str) -> List[Tuple[str, str]]:
    """
    Будує два правила для обміну a <-> b.

    Довший шаблон шукається першим, щоб коротший (можливо, його підрядок)
    не збігся всередині довшого. При однаковій довжині порядок
    визначається порівнянням рядків, тому результат не залежить від
    порядку аргументів.
    """
    if (len(a), a) > (len(b), b):
        return [(a, b), (b, a)]
    return [(b, a), (a, b)]


def exchange(source: str, a: str, b: str) -> str:
    """
    Міняє місцями всі входження a та b за один прохід.

    >>> exchange("bar foo", "foo", "bar")
    'foo bar'
    >>> exchange("Both Hina and Hinata are kawaii", "Hina", "Hinata")
    'Both Hinata and Hina are kawaii'
    """
    return multi_replace(source, exchange_rules(a, b))
