"""
Експорт результатів заміни в різні формати.

Архітектурна стратегія: Strategy Pattern для підтримки множини форматів.
"""

import csv
import json
import logging
from datetime import datetime
from io import BytesIO, StringIO
from typing import Dict

from docx import Document
from docx.enum.text import WD_PARAGRAPH_ALIGNMENT
from docx.shared import Pt

from core.engine import SubstitutionResult

logger = logging.getLogger(__name__)


class ExportFormat:
    """Константи підтримуваних форматів експорту."""
    TXT = 'txt'
    DOCX = 'docx'
    JSON = 'json'
    CSV = 'csv'
    MARKDOWN = 'md'


class FileExporter:
    """
    Конвертація SubstitutionResult → байти файлу для завантаження.

    Design Pattern: Facade + Strategy для різних форматів.
    """

    @staticmethod
    def export_substituted_text(
        result: SubstitutionResult,
        format: str = ExportFormat.TXT,
        include_metadata: bool = False
    ) -> bytes:
        """
        Експортує текст після заміни.

        Args:
            result: Результат заміни
            format: Формат експорту (txt/docx/md)
            include_metadata: Чи додавати метадані на початок

        Returns:
            Байти файлу
        """
        if format == ExportFormat.TXT:
            return FileExporter._export_txt(result, include_metadata)
        elif format == ExportFormat.DOCX:
            return FileExporter._export_docx(result, include_metadata)
        elif format == ExportFormat.MARKDOWN:
            return FileExporter._export_markdown(result, include_metadata)
        else:
            raise ValueError(f"Непідтримуваний формат: {format}")

    @staticmethod
    def export_occurrences_report(
        result: SubstitutionResult,
        format: str = ExportFormat.JSON
    ) -> bytes:
        """
        Експортує звіт про виконані заміни (json/csv/txt).
        """
        if format == ExportFormat.JSON:
            return FileExporter._export_occurrences_json(result)
        elif format == ExportFormat.CSV:
            return FileExporter._export_occurrences_csv(result)
        elif format == ExportFormat.TXT:
            return FileExporter._export_occurrences_txt(result)
        else:
            raise ValueError(f"Непідтримуваний формат: {format}")

    # ============ TEXT EXPORTERS ============

    @staticmethod
    def _export_txt(result: SubstitutionResult, include_metadata: bool) -> bytes:
        parts = []

        if include_metadata:
            parts.append(FileExporter._generate_metadata_header(result))
            parts.append("=" * 60)
            parts.append("")

        parts.append(result.substituted_text)
        return "\n".join(parts).encode('utf-8')

    @staticmethod
    def _export_markdown(result: SubstitutionResult, include_metadata: bool) -> bytes:
        lines = []

        if include_metadata:
            lines.extend([
                "# Результат заміни",
                "",
                "```",
                FileExporter._generate_metadata_header(result),
                "```",
                "",
                "---",
                ""
            ])

        lines.append(result.substituted_text)
        return "\n".join(lines).encode('utf-8')

    @staticmethod
    def _export_docx(result: SubstitutionResult, include_metadata: bool) -> bytes:
        doc = Document()

        style = doc.styles['Normal']
        style.font.name = 'Arial'
        style.font.size = Pt(11)

        if include_metadata:
            title = doc.add_heading('Результат заміни', level=1)
            title.alignment = WD_PARAGRAPH_ALIGNMENT.CENTER

            metadata_para = doc.add_paragraph()
            metadata_para.add_run(FileExporter._generate_metadata_header(result)).font.size = Pt(9)

        # Параграфи розділені порожнім рядком, як при читанні DOCX
        for paragraph in result.substituted_text.split("\n\n"):
            doc.add_paragraph(paragraph)

        buffer = BytesIO()
        doc.save(buffer)
        return buffer.getvalue()

    # ============ REPORT EXPORTERS ============

    @staticmethod
    def _export_occurrences_json(result: SubstitutionResult) -> bytes:
        """Машинно-читабельний звіт."""
        data = {
            "metadata": {
                "timestamp": datetime.now().isoformat(),
                "total_replacements": result.occurrences_count,
                "original_text_length": len(result.original_text),
                "substituted_text_length": len(result.substituted_text)
            },
            "rules": [
                {"pattern": pattern, "replacement": replacement}
                for pattern, replacement in result.rules
            ],
            "occurrences": [
                {
                    "rule": occurrence.rule_index + 1,
                    "text": result.matched_text(occurrence),
                    "replacement": occurrence.replacement,
                    "start": occurrence.start,
                    "end": occurrence.end
                }
                for occurrence in result.occurrences
            ],
            "statistics": FileExporter._calculate_statistics(result)
        }

        return json.dumps(data, ensure_ascii=False, indent=2).encode('utf-8')

    @staticmethod
    def _export_occurrences_csv(result: SubstitutionResult) -> bytes:
        """CSV для аналізу в Excel."""
        output = StringIO()
        writer = csv.writer(output)

        writer.writerow(["Правило", "Текст", "Заміна", "Початок", "Кінець"])

        for occurrence in result.occurrences:
            writer.writerow([
                occurrence.rule_index + 1,
                result.matched_text(occurrence),
                occurrence.replacement,
                occurrence.start,
                occurrence.end
            ])

        return output.getvalue().encode('utf-8-sig')  # BOM for Excel

    @staticmethod
    def _export_occurrences_txt(result: SubstitutionResult) -> bytes:
        lines = [
            "ЗВІТ ПРО ЗАМІНИ",
            "=" * 60,
            "",
            FileExporter._generate_metadata_header(result),
            "",
            "=" * 60,
            "",
            result.format_occurrences_list()
        ]
        return "\n".join(lines).encode('utf-8')

    # ============ HELPER METHODS ============

    @staticmethod
    def _generate_metadata_header(result: SubstitutionResult) -> str:
        return (
            f"Дата обробки: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n"
            f"Правил: {len(result.rules)}\n"
            f"Виконано замін: {result.occurrences_count}\n"
            f"Довжина оригінального тексту: {len(result.original_text)} символів\n"
            f"Довжина результату: {len(result.substituted_text)} символів"
        )

    @staticmethod
    def _calculate_statistics(result: SubstitutionResult) -> Dict[str, int]:
        by_rule = result.replacements_by_rule()

        return {
            f"{idx + 1}. {pattern} => {replacement}": by_rule.get(idx, 0)
            for idx, (pattern, replacement) in enumerate(result.rules)
        }


def generate_filename(
    base_name: str = "substituted",
    format: str = ExportFormat.TXT,
    include_timestamp: bool = True
) -> str:
    """Генерує ім'я файлу для експорту."""
    if include_timestamp:
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        return f"{base_name}_{timestamp}.{format}"
    return f"{base_name}.{format}"
