"""
Logging Configuration
Provides structured logging for the renderer
"""
import logging
import logging.handlers
import json
from pathlib import Path
from typing import Optional
from datetime import datetime


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record

    Fields passed through ``extra`` (template name, directory, error
    text) are emitted next to the standard ones.
    """

    # LogRecord attributes that are not user-supplied extras
    RECORD_ATTRS = frozenset(
        logging.LogRecord('', 0, '', 0, '', None, None).__dict__
    ) | {'message', 'asctime', 'taskName'}

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f'{record.module}:{record.lineno}',
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        log_data.update(
            (key, value) for key, value in record.__dict__.items()
            if key not in self.RECORD_ATTRS
        )

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """
    TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    @staticmethod
    def setup_logger(
        name: str,
        format_type: str = 'json',
        max_bytes: int = None,
        backup_count: int = None,
        file_name: Optional[str] = None,
        console: bool = True
    ) -> logging.Logger:
        """
        Setup a logger with an optional rotating log file

        Args:
            name: Logger name
            format_type: Format type ('json' or 'text')
            max_bytes: Max bytes before rotation (default: 10MB)
            backup_count: Number of backup files to keep
            file_name: Log file path; no file handler when omitted
            console: Attach a stream handler

        Returns:
            Configured logger

        Example:
            logger = LoggerConfig.setup_logger(
                'sanic_render',
                format_type='text',
                file_name='logs/render.log'
            )
        """
        from sanic_render.defaults import (
            APP_ENV_KEY,
            DEFAULT_APP_ENV,
            DEFAULT_LOG_BACKUP_COUNT,
            DEFAULT_LOG_MAX_BYTES,
        )
        from sanic_render.support.env_helper import EnvHelper

        if max_bytes is None:
            max_bytes = DEFAULT_LOG_MAX_BYTES
        if backup_count is None:
            backup_count = DEFAULT_LOG_BACKUP_COUNT

        app_env = EnvHelper.get(APP_ENV_KEY) or DEFAULT_APP_ENV
        level = LoggerConfig.get_level_by_environment(app_env)

        logger = logging.getLogger(name)
        logger.setLevel(level)
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
            environment: Environment name ('production', 'development', 'testing')

        Returns:
            Logging level
        """
        levels = {
            'production': logging.WARNING,
            'staging': logging.INFO,
            'development': logging.DEBUG,
            'testing': logging.ERROR,
        }
        return levels.get(environment.lower(), logging.INFO)
