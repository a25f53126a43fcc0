"""
Custom logging configuration to suppress command polling logs
"""

import logging
import logging.config
from typing import Dict, Any


class CommandPollFilter(logging.Filter):
    """Filter to suppress the periodic command listing requests."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter out command polls from httpx request logs."""
        # httpx logs every request at INFO level
        if record.name == "httpx":
            message = record.getMessage()
            if "/commands" in message and "GET" in message:
                return False  # Suppress polling logs
        return True  # Allow all other logs


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with command polling suppression."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "command_poll_filter": {
                "()": CommandPollFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout"
            },
            "http": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
                "filters": ["command_poll_filter"]  # Apply filter to request logs
            }
        },
        "loggers": {
            "httpx": {
                "handlers": ["http"],
                "level": "INFO",
                "propagate": False
            },
            "hubagent": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            }
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"]
        }
    }
