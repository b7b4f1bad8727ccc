"""
Gradio інтерфейс для одночасної заміни шаблонів.

Архітектурна стратегія: Відокремлення UI від бізнес-логіки.
UI шар тільки відповідає за взаємодію з користувачем та
делегує всю обробку до core.engine.

Design Principles:
- Мінімальна логіка в UI (тільки форматування та валідація)
- User-friendly error handling
- File I/O isolation (handlers/exporters)
"""

import logging
import os
from pathlib import Path
from typing import Optional, Tuple

import gradio as gr

from core.config import config
from core.engine import SubstitutionEngine, SubstitutionResult
from utils.file_handlers import FileHandler, FileReadResult, normalize_line_endings
from utils.file_exporters import FileExporter, ExportFormat, generate_filename

logger = logging.getLogger(__name__)


class GradioInterface:
    """
    Stateless UI wrapper над SubstitutionEngine.

    Результат останньої заміни зберігається в gr.State, а не в об'єкті,
    тому один екземпляр обслуговує всі сесії.
    """

    def __init__(self, engine: Optional[SubstitutionEngine] = None):
        self.engine = engine or SubstitutionEngine()
        self.config = config

        logger.info("GradioInterface initialized")

    def _format_error(self, error: Exception) -> str:
        """
        Форматує помилку для відображення користувачу.

        User Experience: Приховує технічні деталі, показує зрозумілі повідомлення.
        """
        message = str(error)
        error_message = f"❌ Помилка: {message}"

        if "завеликий" in message.lower():
            error_message += f"\n\n💡 Максимальний розмір: {config.MAX_TEXT_LENGTH} символів"
        elif "забагато" in message.lower():
            error_message += f"\n\n💡 Максимум правил: {config.MAX_RULES}"
        elif "некоректне правило" in message.lower():
            error_message += f"\n\n💡 Кожен рядок: шаблон {config.RULE_SEPARATOR} заміна"

        return error_message

    # ============================================================
    # SUBSTITUTION
    # ============================================================

    def substitute_text(
        self,
        rules_text: str,
        text: str
    ) -> Tuple[str, str, Optional[SubstitutionResult]]:
        """
        Виконує заміну за правилами з текстового поля.

        Returns:
            Tuple: (substituted_text, occurrences_display, result_for_state)
        """
        try:
            result = self.engine.substitute_text_rules(text or "", rules_text or "")
        except Exception as e:
            logger.error(f"Substitution failed: {e}", exc_info=True)
            return "", self._format_error(e), None

        return result.substituted_text, self._format_occurrences_display(result), result

    def exchange_text(self, text: str, a: str, b: str) -> Tuple[str, str]:
        """
        Міняє місцями два шаблони.

        Returns:
            Tuple: (exchanged_text, occurrences_display)
        """
        try:
            result = self.engine.exchange(text or "", a or "", b or "")
        except Exception as e:
            logger.error(f"Exchange failed: {e}", exc_info=True)
            return "", self._format_error(e)

        return result.substituted_text, self._format_occurrences_display(result)

    def _format_occurrences_display(self, result: SubstitutionResult) -> str:
        if result.occurrences_count == 0:
            return "✅ Входжень не знайдено\n\nТекст залишився без змін."

        header = (
            f"🔍 Виконано замін: {result.occurrences_count}\n"
            f"{'=' * 60}\n\n"
        )
        return header + result.format_occurrences_list()

    # ============================================================
    # FILE I/O
    # ============================================================

    def process_file_upload(self, file_obj) -> Tuple[str, str]:
        """
        Витягує текст із завантаженого файлу.

        Returns:
            Tuple: (extracted_text, status_message)
        """
        if file_obj is None:
            return "", "⚠️ Файл не вибрано"

        try:
            result: FileReadResult = FileHandler.read_file(file_obj)
        except Exception as e:
            logger.error(f"File upload failed: {e}", exc_info=True)
            return "", (
                f"❌ Помилка завантаження файлу\n\n"
                f"Деталі: {e}\n\n"
                f"💡 Підтримуються: TXT, DOCX (макс. {config.MAX_FILE_SIZE_MB} MB)"
            )

        status = (
            f"✅ Файл завантажено\n\n"
            f"📄 Назва: {result.filename}\n"
            f"📊 Тип: {result.file_type.upper()}\n"
            f"📏 Символів: {result.char_count:,}\n"
        )
        if result.encoding:
            status += f"🔤 Кодування: {result.encoding}\n"

        return normalize_line_endings(result.text), status

    def export_substituted_text(
        self,
        result_state: Optional[SubstitutionResult],
        export_format: str
    ) -> Optional[str]:
        """Зберігає текст після заміни у файл для завантаження."""
        if result_state is None:
            gr.Warning("⚠️ Спочатку виконайте заміну")
            return None

        return self._write_export(
            lambda: FileExporter.export_substituted_text(result_state, format=export_format),
            generate_filename("substituted", format=export_format)
        )

    def export_occurrences_report(
        self,
        result_state: Optional[SubstitutionResult],
        export_format: str
    ) -> Optional[str]:
        """Зберігає звіт про заміни у файл для завантаження."""
        if result_state is None:
            gr.Warning("⚠️ Спочатку виконайте заміну")
            return None

        return self._write_export(
            lambda: FileExporter.export_occurrences_report(result_state, format=export_format),
            generate_filename("replacements_report", format=export_format)
        )

    def _write_export(self, build, filename: str) -> Optional[str]:
        try:
            file_bytes = build()
            path = Path(self.config.EXPORT_DIR) / filename
            path.write_bytes(file_bytes)
        except Exception as e:
            logger.error(f"Export failed: {e}", exc_info=True)
            gr.Warning(f"❌ Помилка експорту: {e}")
            return None

        logger.info(f"Exported {filename}")
        return str(path)

    # ============================================================
    # UI CONSTRUCTION
    # ============================================================

    def build_interface(self) -> gr.Blocks:
        """
        Створює Gradio інтерфейс.

        - Tab 1: Заміна за списком правил (+ файли та експорт)
        - Tab 2: Обмін двох шаблонів
        """
        with gr.Blocks(title="Multirep: одночасна заміна шаблонів") as interface:

            gr.Markdown(
                """
                # 🔁 Одночасна заміна шаблонів

                Всі правила застосовуються за один прохід: текст заміни ніколи
                не обробляється повторно, а при перетині збігів виграє правило,
                яке стоїть вище у списку.
                """
            )

            result_state = gr.State(value=None)

            # ============ ВКЛАДКА 1: ЗАМІНА ============
            with gr.Tab("🔁 Заміна"):
                with gr.Row():
                    file_upload = gr.File(
                        label="Файл (TXT/DOCX, опціонально)",
                        file_types=[".txt", ".docx"],
                        type="filepath"
                    )
                    file_status = gr.Textbox(
                        label="Статус завантаження",
                        interactive=False,
                        lines=5
                    )

                with gr.Row(equal_height=True):
                    with gr.Column(scale=1):
                        rules_input = gr.Textbox(
                            label=f"Правила (шаблон {config.RULE_SEPARATOR} заміна)",
                            placeholder=f"Hana {config.RULE_SEPARATOR} Minami\ncute {config.RULE_SEPARATOR} kawaii",
                            lines=8
                        )
                        text_input = gr.Textbox(
                            label="Вхідний текст",
                            lines=10
                        )
                        substitute_btn = gr.Button("🚀 Замінити", variant="primary")

                    with gr.Column(scale=1):
                        substituted_output = gr.Textbox(
                            label="Результат",
                            lines=10,
                            interactive=False
                        )
                        occurrences_output = gr.Textbox(
                            label="📋 Виконані заміни",
                            lines=8,
                            interactive=False
                        )

                with gr.Row():
                    with gr.Column():
                        text_format = gr.Radio(
                            choices=[ExportFormat.TXT, ExportFormat.DOCX, ExportFormat.MARKDOWN],
                            value=ExportFormat.TXT,
                            label="Формат тексту"
                        )
                        export_text_btn = gr.Button("⬇️ Згенерувати файл", size="sm")
                        export_text_output = gr.File(label="Текст", interactive=False)

                    with gr.Column():
                        report_format = gr.Radio(
                            choices=[ExportFormat.JSON, ExportFormat.CSV, ExportFormat.TXT],
                            value=ExportFormat.JSON,
                            label="Формат звіту"
                        )
                        export_report_btn = gr.Button("⬇️ Згенерувати звіт", size="sm")
                        export_report_output = gr.File(label="Звіт", interactive=False)

                gr.Examples(
                    examples=self.config.EXAMPLES,
                    inputs=[rules_input, text_input],
                    label="📌 Приклади",
                    cache_examples=False,
                )

                file_upload.change(
                    fn=self.process_file_upload,
                    inputs=[file_upload],
                    outputs=[text_input, file_status]
                )
                substitute_btn.click(
                    fn=self.substitute_text,
                    inputs=[rules_input, text_input],
                    outputs=[substituted_output, occurrences_output, result_state]
                )
                export_text_btn.click(
                    fn=self.export_substituted_text,
                    inputs=[result_state, text_format],
                    outputs=[export_text_output]
                )
                export_report_btn.click(
                    fn=self.export_occurrences_report,
                    inputs=[result_state, report_format],
                    outputs=[export_report_output]
                )

            # ============ ВКЛАДКА 2: ОБМІН ============
            with gr.Tab("🔀 Обмін"):
                with gr.Row():
                    pattern_a = gr.Textbox(label="Шаблон A")
                    pattern_b = gr.Textbox(label="Шаблон B")

                exchange_input = gr.Textbox(label="Вхідний текст", lines=8)
                exchange_btn = gr.Button("🔀 Поміняти місцями", variant="primary")
                exchange_output = gr.Textbox(label="Результат", lines=8, interactive=False)
                exchange_occurrences = gr.Textbox(label="📋 Виконані заміни", lines=6, interactive=False)

                gr.Examples(
                    examples=[
                        ["Both Hina and Hinata are kawaii", "Hina", "Hinata"],
                        ["Both Hana and Minami are kawaii", "Hana", "Minami"],
                    ],
                    inputs=[exchange_input, pattern_a, pattern_b],
                    cache_examples=False,
                )

                exchange_btn.click(
                    fn=self.exchange_text,
                    inputs=[exchange_input, pattern_a, pattern_b],
                    outputs=[exchange_output, exchange_occurrences]
                )

        return interface

    # ============================================================
    # LAUNCH
    # ============================================================

    def launch(self, **kwargs) -> None:
        """
        Запускає Gradio інтерфейс.

        Args:
            **kwargs: Параметри для demo.launch()
        """
        launch_config = {
            "share": False,
            "server_name": self.config.SERVER_NAME,
            "server_port": self._resolve_server_port(),
            "show_error": True
        }
        launch_config.update(kwargs)

        logger.info(
            "Launching Gradio interface on %s:%s",
            launch_config["server_name"],
            launch_config["server_port"]
        )
        self.build_interface().launch(**launch_config)

    def _resolve_server_port(self) -> int:
        """GRADIO_SERVER_PORT має пріоритет над конфігом."""
        env_port = os.getenv("GRADIO_SERVER_PORT")
        if env_port:
            try:
                return int(env_port)
            except ValueError:
                logger.warning(
                    "GRADIO_SERVER_PORT=%s не є числом, ігноруємо значення",
                    env_port
                )
        return self.config.SERVER_PORT


def create_interface() -> GradioInterface:
    """Factory function для створення інтерфейсу."""
    return GradioInterface()
