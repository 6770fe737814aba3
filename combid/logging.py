import json
import sys
import threading
from enum import IntEnum

from combid.timestamp import format_timestamp


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20

_logger = None
_logger_lock = threading.Lock()

class StructuredLogger:
    """JSON-lines records on stderr. Only generator lifecycle is logged."""

    def __init__(self, level=LogLevel.INFO, stream=None):
        self.level = level
        self.stream = stream

    def debug(self, message, **kwargs):
        if LogLevel.DEBUG < self.level:
            return
        try:
            record = {"timestamp": format_timestamp(), "level": LogLevel.DEBUG.name, "msg": message, **kwargs}
            print(json.dumps(record, default=str), file=self.stream or sys.stderr, flush=True)
        except Exception:
            pass

    @classmethod
    def configure(cls, min_level=LogLevel.INFO):
        global _logger
        with _logger_lock:
            _logger = cls(min_level)

def get_logger():
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger
