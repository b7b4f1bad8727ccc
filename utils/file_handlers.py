"""
Файлові обробники: читання TXT/DOCX як вхідного тексту для заміни.

Архітектурна стратегія: Adapter Pattern для уніфікації файлових джерел.
Текст не "чиститься": заміна має бачити оригінал, тому нормалізуються
лише line endings.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import chardet
from docx import Document

from core.config import config

logger = logging.getLogger(__name__)


@dataclass
class FileReadResult:
    """
    Структурований результат читання файлу.

    Design Pattern: Value Object для передачі даних між шарами.
    """
    text: str
    filename: str
    file_type: str
    encoding: Optional[str] = None
    char_count: int = 0

    def __post_init__(self):
        if self.char_count == 0:
            self.char_count = len(self.text)


class FileHandler:
    """
    Читає підтримувані формати у звичайний текст.

    Strategy Pattern: новий формат = новий _read_* метод + розширення.
    """

    SUPPORTED_EXTENSIONS = {'.txt', '.docx'}

    @classmethod
    def read_file(cls, file_path) -> FileReadResult:
        """
        Читає файл, визначаючи формат за розширенням.

        Args:
            file_path: Шлях до файлу або file-like object від Gradio

        Returns:
            FileReadResult з текстом та метаданими

        Raises:
            ValueError: Непідтримуваний формат або файл завеликий
            RuntimeError: Помилка читання
        """
        path = Path(file_path) if isinstance(file_path, (str, Path)) else Path(file_path.name)

        cls._validate_file_size(path)

        extension = path.suffix.lower()

        if extension == '.txt':
            return cls._read_txt(path)
        elif extension == '.docx':
            return cls._read_docx(path)
        else:
            raise ValueError(
                f"Непідтримуваний формат файлу: {extension}\n"
                f"Підтримуються: {', '.join(sorted(cls.SUPPORTED_EXTENSIONS))}"
            )

    @classmethod
    def _validate_file_size(cls, path: Path) -> None:
        try:
            file_size = path.stat().st_size
        except OSError:
            # Gradio вже обмежує розмір file-like objects
            return

        if file_size > config.max_file_size_bytes:
            raise ValueError(
                f"Файл завеликий: {file_size / 1024 / 1024:.1f} MB. "
                f"Максимум: {config.MAX_FILE_SIZE_MB} MB"
            )

        logger.info(f"File size: {file_size / 1024:.1f} KB")

    @classmethod
    def _read_txt(cls, path: Path) -> FileReadResult:
        """
        Читання TXT файлу з визначенням кодування.

        Порядок спроб: UTF-8 → chardet → cp1251.
        """
        raw_data = path.read_bytes()

        try:
            text = raw_data.decode('utf-8')
            logger.info(f"Read TXT file as UTF-8: {path.name}")
            return FileReadResult(text=text, filename=path.name, file_type='txt', encoding='utf-8')
        except UnicodeDecodeError:
            logger.warning("UTF-8 failed, trying auto-detection")

        detected = chardet.detect(raw_data)
        encoding = detected.get('encoding')

        if encoding:
            try:
                text = raw_data.decode(encoding)
                logger.info(
                    f"Auto-detected encoding: {encoding} "
                    f"(confidence: {detected['confidence']:.0%})"
                )
                return FileReadResult(text=text, filename=path.name, file_type='txt', encoding=encoding)
            except (UnicodeDecodeError, LookupError) as e:
                logger.warning(f"Auto-detection failed: {e}")

        try:
            text = raw_data.decode('cp1251')
        except UnicodeDecodeError as e:
            raise RuntimeError(f"Не вдалося прочитати файл з жодним кодуванням: {e}") from e

        logger.info("Fallback to cp1251 successful")
        return FileReadResult(text=text, filename=path.name, file_type='txt', encoding='cp1251')

    @classmethod
    def _read_docx(cls, path: Path) -> FileReadResult:
        """Читання DOCX: параграфи через порожній рядок, без форматування."""
        try:
            doc = Document(path)
        except Exception as e:
            raise RuntimeError(f"Помилка читання DOCX файлу: {e}") from e

        paragraphs = [p.text for p in doc.paragraphs if p.text.strip()]
        text = "\n\n".join(paragraphs)

        logger.info(f"Read DOCX: {path.name}, {len(doc.paragraphs)} paragraphs")

        return FileReadResult(text=text, filename=path.name, file_type='docx')


def normalize_line_endings(text: str) -> str:
    """Windows/Mac line endings → Unix. Інший вміст не змінюється."""
    return text.replace('\r\n', '\n').replace('\r', '\n')
