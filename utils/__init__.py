# ========================================
# utils/__init__.py
# ========================================
"""
Utilities: модель входжень та розв'язання конфліктів.

Design Pattern: Stateless utility functions для переважування.
"""
from utils.occurrences import Occurrence, OccurrenceMap
from utils.conflict_resolution import (
    resolve_occurrences,
    PatternOrderResolver
)

__all__ = [
    "Occurrence",
    "OccurrenceMap",
    "resolve_occurrences",
    "PatternOrderResolver"
]
