# ========================================
# core/__init__.py
# ========================================
"""
Core functionality: заміна шаблонів, обмін та конфігурація.

Public API для імпорту з інших модулів.
"""
from core.config import config, AppConfig
from core.substitution import multi_replace, exchange, exchange_rules
from core.engine import SubstitutionEngine, SubstitutionResult, parse_rules

__all__ = [
    "config",
    "AppConfig",
    "multi_replace",
    "exchange",
    "exchange_rules",
    "SubstitutionEngine",
    "SubstitutionResult",
    "parse_rules"
]
