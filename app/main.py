"""
Main application entry point for the BMI Calculator.
"""

import logging

from app.config import DEBUG, LOG_FILE, LOG_LEVEL, PORT, SERVER_NAME, SHARE
from app.pages.calculator import calculator_view
from app.theme import setup_theme

logger = logging.getLogger(__name__)


def setup_logging(level=LOG_LEVEL, log_file=LOG_FILE):
    """Configure the root logger with a console and an optional file handler."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    handler_types = [type(h) for h in root_logger.handlers]

    # Console handler
    if logging.StreamHandler not in handler_types:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(
            logging.Formatter("%(levelname)s:%(name)s:%(message)s")
        )
        root_logger.addHandler(console_handler)

    # File handler
    if log_file and logging.FileHandler not in handler_types:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s:%(name)s:%(message)s")
        )
        root_logger.addHandler(file_handler)

    return root_logger


def create_app():
    """Create and configure the Gradio application."""
    try:
        demo = setup_theme()
        with demo:
            calculator_view()
        logger.info("Calculator view configured")
        return demo

    except Exception as e:
        logger.error(f"Failed to create application: {str(e)}", exc_info=True)
        raise


demo = create_app()


def main():
    """Main entry point for the application."""
    setup_logging()
    try:
        demo.launch(
            server_name=SERVER_NAME,
            server_port=PORT,
            share=SHARE,
            debug=DEBUG,
        )
    except Exception as e:
        logger.error(f"Application failed to start: {str(e)}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
