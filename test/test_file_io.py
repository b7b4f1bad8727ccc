"""
Tests для файлового I/O функціоналу.

Test Strategy:
- Unit tests для handlers та exporters
- Integration test для повного pipeline файл → заміна → експорт
- Edge case coverage (encoding, unsupported formats)

Запуск: pytest test/test_file_io.py -v
"""

import json
from io import BytesIO
from unittest.mock import patch

import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import config
from core.engine import SubstitutionEngine
from utils.file_handlers import FileHandler, FileReadResult, normalize_line_endings
from utils.file_exporters import FileExporter, ExportFormat, generate_filename


# ============ FIXTURES ============

@pytest.fixture
def sample_txt_content():
    """Sample text with multibyte content."""
    return "Ханна любить сакуру.\nBoth Hina and Hinata are kawaii"


@pytest.fixture
def sample_txt_file(tmp_path, sample_txt_content):
    txt_file = tmp_path / "test.txt"
    txt_file.write_text(sample_txt_content, encoding='utf-8')
    return txt_file


@pytest.fixture
def sample_docx_file(tmp_path):
    from docx import Document

    docx_file = tmp_path / "test.docx"
    doc = Document()
    doc.add_paragraph("Hana is cute")
    doc.add_paragraph("")
    doc.add_paragraph("Both Hina and Hinata are kawaii")
    doc.save(docx_file)

    return docx_file


@pytest.fixture
def sample_result():
    return SubstitutionEngine().substitute(
        "Hana is cute",
        [("Hana", "Minami"), ("cute", "kawaii"), ("na", "no")]
    )


# ============ FILE HANDLERS TESTS ============

class TestFileHandler:
    """Tests для FileHandler класу."""

    def test_read_txt_utf8(self, sample_txt_file, sample_txt_content):
        result = FileHandler.read_file(str(sample_txt_file))

        assert isinstance(result, FileReadResult)
        assert result.file_type == 'txt'
        assert result.encoding == 'utf-8'
        assert result.text == sample_txt_content
        assert result.char_count == len(sample_txt_content)

    def test_read_txt_accepts_path_object(self, sample_txt_file):
        result = FileHandler.read_file(sample_txt_file)

        assert result.filename == "test.txt"

    def test_read_txt_cp1251(self, tmp_path):
        """Test: читання CP1251 файлу (auto-detection або fallback)."""
        cp1251_file = tmp_path / "test_cp1251.txt"
        cp1251_file.write_bytes("Привіт світ, Ханна любить сакуру".encode('cp1251'))

        result = FileHandler.read_file(str(cp1251_file))

        assert result.encoding is not None
        assert result.encoding.lower() != 'utf-8'
        assert len(result.text) > 0

    def test_read_docx(self, sample_docx_file):
        """Test: параграфи DOCX розділені порожнім рядком, порожні пропущені."""
        result = FileHandler.read_file(str(sample_docx_file))

        assert result.file_type == 'docx'
        assert result.encoding is None
        assert result.text == "Hana is cute\n\nBoth Hina and Hinata are kawaii"

    def test_unsupported_format_raises_error(self, tmp_path):
        pdf_file = tmp_path / "test.pdf"
        pdf_file.write_bytes(b"fake pdf content")

        with pytest.raises(ValueError, match="Непідтримуваний формат"):
            FileHandler.read_file(str(pdf_file))

    def test_file_too_large_raises_error(self, tmp_path):
        large_file = tmp_path / "large.txt"
        large_file.write_text("A" * (2 * 1024 * 1024))

        with patch.object(config, "MAX_FILE_SIZE_MB", 1):
            with pytest.raises(ValueError, match="завеликий"):
                FileHandler.read_file(str(large_file))

    def test_corrupted_docx_raises_runtime_error(self, tmp_path):
        broken = tmp_path / "broken.docx"
        broken.write_bytes(b"not a zip archive")

        with pytest.raises(RuntimeError, match="DOCX"):
            FileHandler.read_file(str(broken))


class TestNormalizeLineEndings:

    def test_windows_and_mac_line_endings(self):
        assert normalize_line_endings("a\r\nb\rc\n") == "a\nb\nc\n"

    def test_other_content_untouched(self):
        text = "  trailing   \n\n\n\nspaces  "

        assert normalize_line_endings(text) == text


# ============ FILE EXPORTERS TESTS ============

class TestFileExporter:
    """Tests для FileExporter класу."""

    def test_export_txt_without_metadata(self, sample_result):
        content = FileExporter.export_substituted_text(sample_result, format=ExportFormat.TXT)

        assert content.decode('utf-8') == "Minami is kawaii"

    def test_export_txt_with_metadata(self, sample_result):
        content = FileExporter.export_substituted_text(
            sample_result,
            format=ExportFormat.TXT,
            include_metadata=True
        ).decode('utf-8')

        assert "Виконано замін: 2" in content
        assert content.endswith("Minami is kawaii")

    def test_export_markdown(self, sample_result):
        content = FileExporter.export_substituted_text(
            sample_result,
            format=ExportFormat.MARKDOWN,
            include_metadata=True
        ).decode('utf-8')

        assert "# Результат заміни" in content
        assert "```" in content

    def test_export_docx(self, sample_result):
        from docx import Document

        result_bytes = FileExporter.export_substituted_text(sample_result, format=ExportFormat.DOCX)

        assert result_bytes[:2] == b'PK'  # ZIP signature
        doc = Document(BytesIO(result_bytes))
        assert [p.text for p in doc.paragraphs] == ["Minami is kawaii"]

    def test_export_unknown_format_raises_error(self, sample_result):
        with pytest.raises(ValueError, match="Непідтримуваний формат"):
            FileExporter.export_substituted_text(sample_result, format="pdf")

    def test_export_report_json(self, sample_result):
        data = json.loads(
            FileExporter.export_occurrences_report(sample_result, format=ExportFormat.JSON)
        )

        assert data['metadata']['total_replacements'] == 2
        assert data['occurrences'][0] == {
            "rule": 1,
            "text": "Hana",
            "replacement": "Minami",
            "start": 0,
            "end": 4
        }
        assert len(data['rules']) == 3
        assert data['statistics']["3. na => no"] == 0

    def test_export_report_csv(self, sample_result):
        content = FileExporter.export_occurrences_report(
            sample_result,
            format=ExportFormat.CSV
        ).decode('utf-8-sig')

        lines = content.strip().splitlines()
        assert lines[0] == "Правило,Текст,Заміна,Початок,Кінець"
        assert lines[1] == "1,Hana,Minami,0,4"
        assert len(lines) == 3

    def test_export_report_txt(self, sample_result):
        content = FileExporter.export_occurrences_report(
            sample_result,
            format=ExportFormat.TXT
        ).decode('utf-8')

        assert "ЗВІТ ПРО ЗАМІНИ" in content
        assert "'cute' → 'kawaii'" in content


class TestGenerateFilename:

    def test_basic_filename(self):
        assert generate_filename("test", ExportFormat.TXT, include_timestamp=False) == "test.txt"

    def test_filename_with_timestamp(self):
        filename = generate_filename("report", ExportFormat.DOCX)

        assert filename.startswith("report_")
        assert filename.endswith(".docx")
        assert len(filename) > len("report_.docx")


# ============ INTEGRATION TESTS ============

@pytest.mark.integration
class TestFileIOIntegration:
    """Інтеграційні тести повного pipeline."""

    def test_full_pipeline_txt(self, sample_txt_file):
        """Test: TXT → exchange → експорт."""
        read_result = FileHandler.read_file(str(sample_txt_file))

        result = SubstitutionEngine().exchange(read_result.text, "Hina", "Hinata")
        exported = FileExporter.export_substituted_text(result, format=ExportFormat.TXT)

        assert exported.decode('utf-8') == (
            "Ханна любить сакуру.\nBoth Hinata and Hina are kawaii"
        )
