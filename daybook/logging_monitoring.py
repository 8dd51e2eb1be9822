"""
Logging and Request Monitoring
==============================

Logging setup for the Daybook API:
- Plain console logging
- Optional JSON log file with rotation
- Per-request access logging middleware

Author: jetgause
Created: 2025-12-10
Version: 1.0.0
"""

import json
import logging
import logging.handlers
import sys
import time
import traceback
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_NAME = "daybook.json.log"

_installed_handlers: List[logging.Handler] = []


@dataclass
class LogEntry:
    """Structured log entry."""
    timestamp: str
    level: str
    message: str
    logger_name: str
    module: str
    function: str
    line_number: int
    thread_id: int
    process_id: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(asdict(self), default=str)


class JSONFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = LogEntry(
            timestamp=datetime.now(timezone.utc).isoformat(),
            level=record.levelname,
            message=record.getMessage(),
            logger_name=record.name,
            module=record.module,
            function=record.funcName,
            line_number=record.lineno,
            thread_id=record.thread,
            process_id=record.process,
            extra=dict(getattr(record, 'extra', {}))
        )

        # Add exception info if present
        if record.exc_info:
            log_entry.extra['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        return log_entry.to_json()


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_dir: Optional[str] = None
) -> None:
    """
    Configure root logging.

    Args:
        level: Root log level (name or number)
        log_dir: If given, also write JSON logs to a rotating file there
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Only replace handlers installed by a previous call
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        json_handler = logging.handlers.RotatingFileHandler(
            path / LOG_FILE_NAME,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8"
        )
        json_handler.setFormatter(JSONFormatter())
        root.addHandler(json_handler)
        _installed_handlers.append(json_handler)


class RequestLogger:
    """HTTP request/response logging."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("daybook.access")

    def log_request(
        self,
        method: str,
        path: str,
        status_code: int,
        duration: float,
        ip_address: Optional[str] = None
    ):
        """Log HTTP request."""
        level = logging.WARNING if status_code >= 500 else logging.INFO
        self.logger.log(
            level,
            f"{method} {path} - {status_code} ({duration * 1000:.1f}ms)",
            extra={'extra': {
                'method': method,
                'path': path,
                'status_code': status_code,
                'duration_ms': duration * 1000,
                'ip_address': ip_address,
            }}
        )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request with its status code and duration."""

    def __init__(self, app, request_logger: Optional[RequestLogger] = None):
        super().__init__(app)
        self.request_logger = request_logger or RequestLogger()

    async def dispatch(self, request: Request, call_next):
        start = time.time()
        try:
            response = await call_next(request)
        except Exception:
            self.request_logger.logger.exception(
                f"{request.method} {request.url.path} failed"
            )
            raise

        self.request_logger.log_request(
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration=time.time() - start,
            ip_address=request.client.host if request.client else None,
        )
        return response
