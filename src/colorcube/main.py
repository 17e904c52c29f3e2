"""
Application Initialization
==========================
Parses the command line, configures logging, builds the main window and
starts the Qt event loop.

Usage:
    $ colorcube [IMAGE] [--log-level debug] [--log-file colorcube.log]
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from colorcube.app.application import create_app
from colorcube.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="colorcube",
        description="Plot the pixel colors of an image inside the RGB cube.",
    )
    parser.add_argument("image", nargs="?", help="image file to open instead of the first preset")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=("debug", "info", "warning", "error"),
        help="console and file log level (default: info)",
    )
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=args.log_level, log_file=args.log_file)

    # 2. Create the Qt Application
    app = create_app([sys.argv[0]])

    # 3. Initialize the Main Window. Imported late so Qt widgets are only
    #    touched after the QApplication exists.
    from colorcube.view.main_window import MainWindow

    window = MainWindow(initial_path=args.image)
    window.show()
    logger.info("Main window shown.")

    # 4. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
