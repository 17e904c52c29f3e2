"""
Logging Configuration
Sets up the 'colorcube' logger and routes Qt's own warnings into it.
"""
import logging
import sys
from typing import Optional, Union

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def _qt_message_handler(msg_type: QtMsgType, context, message: str) -> None:
    logging.getLogger("colorcube.qt").log(_QT_LEVELS.get(msg_type, logging.WARNING), message)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    capture_qt: bool = True,
) -> logging.Logger:
    """
    Configures the logger for the 'colorcube' namespace.

    Args:
        level: Logging level, either numeric (logging.DEBUG) or a name ("debug").
        log_file: Optional path to save logs to a file.
        capture_qt: Forward qDebug/qWarning output from Qt into 'colorcube.qt'.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {name}")

    logger = logging.getLogger("colorcube")
    logger.setLevel(level)

    # Re-running setup (e.g. from tests) must not stack duplicate handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if capture_qt:
        qInstallMessageHandler(_qt_message_handler)

    logger.info("Logging initialized (level=%s).", logging.getLevelName(level))
    return logger
