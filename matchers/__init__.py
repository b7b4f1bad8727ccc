# ========================================
# matchers/__init__.py
# ========================================
"""
Matchers: пошук літеральних входжень шаблонів.
"""
from matchers.literal_matcher import LiteralMatcher, find_literal

__all__ = [
    "LiteralMatcher",
    "find_literal"
]
