"""
Entry point: Gradio demo для одночасної заміни шаблонів.

Запуск:
    python app.py
    GRADIO_SERVER_PORT=8080 python app.py
"""

import logging
import sys

from ui.gradio_interface import create_interface


def setup_logging():
    """Logging configuration для всього додатку."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    # Suppress noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("gradio").setLevel(logging.WARNING)


def main():
    setup_logging()
    logger = logging.getLogger(__name__)

    logger.info("=" * 60)
    logger.info("Multirep UI - Starting")
    logger.info("=" * 60)

    try:
        create_interface().launch()
    except KeyboardInterrupt:
        logger.info("Shutting down gracefully...")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
