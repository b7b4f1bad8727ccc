"""
Централізована конфігурація системи заміни шаблонів.

Архітектурний принцип: Single Source of Truth для всіх налаштувань.
Ліміти стосуються тільки інтерактивного шару (engine/UI); чисті функції
multi_replace та exchange не мають обмежень.
"""

import tempfile
from dataclasses import dataclass, field
from typing import List


@dataclass
class AppConfig:
    """Глобальна конфігурація додатку."""

    # Обмеження
    MAX_TEXT_LENGTH: int = 100_000
    MAX_RULES: int = 200
    MAX_FILE_SIZE_MB: int = 50

    # Формат правил: "pattern => replacement"
    RULE_SEPARATOR: str = "=>"
    COMMENT_PREFIX: str = "#"

    # Запуск UI
    SERVER_NAME: str = "127.0.0.1"
    SERVER_PORT: int = 7860

    # Куди зберігати файли для завантаження
    EXPORT_DIR: str = field(default_factory=tempfile.gettempdir)

    # Приклади для вкладки заміни: (rules, text)
    EXAMPLES: List[List[str]] = field(default_factory=lambda: [
        [
            "Hana => Minami\ncute => kawaii\nna => no",
            "Hana is cute",
        ],
        [
            "Bouh => Both\nAoi => Minami\noi => io",
            "Bouh Aoi and Hana are kawaii",
        ],
        [
            "Hana => Minami\ncute => kawaii\nkawaii => hot",
            "Hana is cute",
        ],
    ])

    @property
    def max_file_size_bytes(self) -> int:
        return self.MAX_FILE_SIZE_MB * 1024 * 1024


# Глобальний екземпляр конфігурації
config = AppConfig()
