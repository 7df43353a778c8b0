import json
import logging
import sys
import time
import traceback
from contextlib import contextmanager
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path


class JSONFormatter(logging.Formatter):
    """
    Formatter that writes one JSON object per log record.
    """
    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if record.exc_info and record.exc_info[0] is not None:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        if hasattr(record, 'extra_data'):
            log_entry['data'] = record.extra_data

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class AppLogger:
    """
    Root logging setup: readable console output plus rotating JSON files.
    """
    def __init__(self,
                 log_directory: str | Path | None = "logs",
                 console_level: str = "INFO",
                 file_level: str = "DEBUG",
                 max_file_size: int = 10 * 1024 * 1024,
                 backup_count: int = 5):
        self.log_directory = Path(log_directory) if log_directory else None
        self.console_level = getattr(logging, console_level.upper(), logging.INFO)
        self.file_level = getattr(logging, file_level.upper(), logging.DEBUG)
        self.max_file_size = max_file_size
        self.backup_count = backup_count

        self._setup_logging()

    def _setup_logging(self) -> None:
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(logging.DEBUG)

        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)

        self._setup_console_handler(root_logger)
        if self.log_directory is not None:
            self.log_directory.mkdir(parents=True, exist_ok=True)
            self._setup_file_handler(root_logger, "app.log", self.file_level)
            self._setup_file_handler(root_logger, "errors.log", logging.WARNING)

    def _setup_console_handler(self, logger: logging.Logger) -> None:
        console_format = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'
        console_formatter = logging.Formatter(console_format, datefmt='%H:%M:%S')

        # Warnings and errors go to stderr only
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(self.console_level)
        console_handler.addFilter(lambda record: record.levelno < logging.WARNING)
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

        error_handler = logging.StreamHandler(sys.stderr)
        error_handler.setLevel(max(self.console_level, logging.WARNING))
        error_handler.setFormatter(console_formatter)
        logger.addHandler(error_handler)

    def _setup_file_handler(self, logger: logging.Logger, filename: str, level: int) -> None:
        file_handler = RotatingFileHandler(
            self.log_directory / filename,
            maxBytes=self.max_file_size,
            backupCount=self.backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)


@contextmanager
def time_operation(operation_name: str, logger: logging.Logger | None = None):
    logger = logger or logging.getLogger(__name__)
    start_time = time.perf_counter()
    try:
        yield
    finally:
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(f"{operation_name} took {duration_ms:.2f}ms")


def setup_logging(console_level: str = "INFO",
                  log_directory: str | Path | None = "logs",
                  file_level: str = "DEBUG") -> AppLogger:
    return AppLogger(log_directory=log_directory, console_level=console_level, file_level=file_level)
