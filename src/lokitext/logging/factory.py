from __future__ import annotations

import logging
import os
from typing import Optional, TextIO

from lokitext.constants import ENV_LOG_JSON, ENV_LOG_LEVEL
from lokitext.logging.helpers import get_logger, setup_base_logger


class DefaultLoggerFactory:
    """Hand out lokitext-scoped loggers, configuring the base logger on first use.

    Use `from_env` to let LOKITEXT_LOG_LEVEL / LOKITEXT_LOG_JSON drive the
    configuration instead of constructor arguments.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self.json_logs = bool(json_logs)
        self.level = int(level)
        self._stream: Optional[TextIO] = stream
        self._configured = False

    @classmethod
    def from_env(cls, *, stream: Optional[TextIO] = None) -> 'DefaultLoggerFactory':
        """Build a factory from environment variables.

        Unknown level names fall back to INFO; LOKITEXT_LOG_JSON accepts
        ``1``, ``true`` or ``yes`` (any case).
        """
        level_name = os.getenv(ENV_LOG_LEVEL, 'INFO').strip().upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.INFO
        json_logs = os.getenv(ENV_LOG_JSON, '').strip().lower() in {'1', 'true', 'yes'}
        return cls(json_logs=json_logs, level=level, stream=stream)

    def get_logger(self, name: str) -> logging.Logger:
        if not self._configured:
            setup_base_logger(json_logs=self.json_logs, level=self.level, stream=self._stream)
            self._configured = True
        return get_logger(name)
