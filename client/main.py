"""
Dice roller entry point.

Usage:
    python -m client.main
"""

import sys
import logging

from PyQt6.QtWidgets import QApplication

from client.config import settings
from client.gui import MainWindow


def setup_logging() -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def main() -> int:
    """Main entry point."""
    setup_logging()

    app = QApplication(sys.argv)
    app.setApplicationName("Dice Roller")
    app.setOrganizationName("Dice Roller")

    window = MainWindow()
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
