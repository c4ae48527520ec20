"""
Logging Configuration
Provides console and rotating-file logging with text or JSON output
"""
import logging
import logging.handlers
import json
from pathlib import Path
from typing import List, Optional, Union
from datetime import datetime


# LogRecord attributes that are never copied into JSON output as extras
_RESERVED_ATTRS = frozenset([
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'pathname', 'process', 'processName', 'relativeCreated',
    'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
    'getMessage', 'message', 'taskName',
])


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging

    Outputs logs in JSON format for easy parsing and analysis
    """

    def __init__(self, include_fields: Optional[List[str]] = None):
        """
        Initialize JSON formatter

        Args:
            include_fields: Additional fields to include in JSON output
        """
        super().__init__()
        self.include_fields = include_fields or []

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data['stack'] = record.stack_info

        for field in self.include_fields:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        # Extra fields passed with logger.info(..., extra={...})
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """
    TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    @staticmethod
    def setup_logger(
        name: str = 'redwood',
        level: Union[int, str, None] = None,
        format_type: Optional[str] = None,
        file_name: Union[str, Path, None] = None,
        max_bytes: int = None,
        backup_count: int = None,
        console: bool = True,
    ) -> logging.Logger:
        """
        Setup a logger with console output and optional file rotation

        Args:
            name: Logger name
            level: Explicit level; derived from the app environment when omitted
            format_type: Format type ('json' or 'text')
            file_name: Log file path; no file handler when omitted
            max_bytes: Max bytes before rotation (default: 10MB)
            backup_count: Number of backup files to keep
            console: Attach a stderr handler

        Returns:
            Configured logger

        Example:
            logger = LoggerConfig.setup_logger('redwood', level='DEBUG', format_type='json')
        """
        from redwood.defaults import (
            DEFAULT_APP_ENV, DEFAULT_LOG_FORMAT, DEFAULT_LOG_MAX_BYTES, DEFAULT_LOG_BACKUP_COUNT
        )
        from redwood.support.config import Config

        if max_bytes is None:
            max_bytes = DEFAULT_LOG_MAX_BYTES
        if backup_count is None:
            backup_count = DEFAULT_LOG_BACKUP_COUNT
        if format_type is None:
            format_type = Config.get('logging.format', DEFAULT_LOG_FORMAT)

        if level is None:
            level = Config.get('logging.level')
        if level is None:
            level = LoggerConfig.get_level_by_environment(Config.get('app.env', DEFAULT_APP_ENV))
        elif isinstance(level, str):
            level = logging.getLevelName(level.upper())

        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Clear existing handlers
        logger.handlers.clear()

        if format_type == 'json':
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(LoggerConfig.TEXT_FORMAT)

        if file_name:
            log_file = Path(file_name)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        if console:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

        return logger

    @staticmethod
    def get_level_by_environment(environment: str) -> int:
        """
        Get logging level based on environment

        Args:
            environment: Environment name ('production', 'development', 'testing', 'local')

        Returns:
            Logging level
        """
        levels = {
            'production': logging.WARNING,
            'staging': logging.INFO,
            'development': logging.DEBUG,
            'local': logging.INFO,
            'testing': logging.ERROR,
        }
        return levels.get(str(environment).lower(), logging.INFO)
