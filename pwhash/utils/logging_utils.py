"""
Logging utilities that keep secret material out of log output.

Example:
    from pwhash.utils.logging_utils import redact_sensitive_data
    safe = redact_sensitive_data({'password': 'abc', 'memory_cost': 65536})
    # safe == {'password': '***REDACTED***', 'memory_cost': 65536}
"""

import logging
import json
from datetime import datetime, timezone
from typing import Optional, Union

from pwhash.utils.config import get_settings

SENSITIVE_KEYS = {'password', 'salt', 'digest', 'hash', 'encoded', 'secret', 'key'}

REDACTED = '***REDACTED***'

def redact_sensitive_data(obj):
    """
    Recursively redacts sensitive fields in dicts/lists.
    Keys matched (case-insensitive): password, salt, digest, hash, encoded, secret, key
    """
    if isinstance(obj, dict):
        return {
            k: (REDACTED if k.lower() in SENSITIVE_KEYS else redact_sensitive_data(v))
            for k, v in obj.items()
        }
    elif isinstance(obj, list):
        return [redact_sensitive_data(i) for i in obj]
    else:
        return obj

def log_extra(**fields) -> dict:
    """Build an ``extra`` mapping for logger calls, redacting sensitive fields."""
    return {"extra": redact_sensitive_data(fields)}

class JSONFormatter(logging.Formatter):
    """
    Formats log records as JSON with standard fields.
    """
    def format(self, record):
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        if hasattr(record, "extra") and isinstance(record.extra, dict):
            log_record.update(redact_sensitive_data(record.extra))
        return json.dumps(log_record)

def setup_json_logging(level: Optional[Union[int, str]] = None, output='stdout', file_path=None):
    """
    Set up structured JSON logging for the ``pwhash`` loggers.
    Args:
        level: Logging level (default: ``log_level`` from settings)
        output: 'stdout' or 'file'
        file_path: Path to log file if output is 'file'
    """
    if level is None:
        level = get_settings().log_level
    logger = logging.getLogger("pwhash")
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    if output == 'file' and file_path:
        handler = logging.FileHandler(file_path)
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    return logger
