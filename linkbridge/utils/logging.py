"""Application-wide logging initialization

IMPORTANT: linkbridge never configures logging on import. Applications embedding
the library call `initialize_logging()` once at startup, before any other
logging is done.

Logging format (one JSON object per line):
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "linkbridge.redirector",
    "message": "Wrote redirect page.",
    "shortName": "uZHcMJG"
}

Records logged with a LinkBridgeError in `exc_info` also carry its
`errorCode` next to the formatted `exception`.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from linkbridge.exceptions import LinkBridgeError
from linkbridge.utils.constants import LOG_LEVEL_ENV


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(
        {
            'args',
            'asctime',
            'created',
            'exc_info',
            'exc_text',
            'filename',
            'funcName',
            'levelname',
            'levelno',
            'lineno',
            'module',
            'msecs',
            'msg',
            'name',
            'pathname',
            'process',
            'processName',
            'relativeCreated',
            'stack_info',
            'thread',
            'threadName',
            'taskName',
        }
    )

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec="milliseconds") \
                            .replace("+00:00", "Z")
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        # Attach `extra` fields
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        if record.exc_info:
            error = record.exc_info[1]
            if isinstance(error, LinkBridgeError):
                log['errorCode'] = error.error_code
            log['exception'] = self.formatException(record.exc_info)

        # Paths and datetimes end up in `extra`; render them as strings
        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None) -> None:
    """Configure the root logger to emit JSON lines on stdout

    Args:
        level (str | None):
            Logging level name. Defaults to `LINKBRIDGE_LOG_LEVEL`, then 'INFO'.
    """
    log_level = (level or os.getenv(LOG_LEVEL_ENV, 'INFO')).upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
