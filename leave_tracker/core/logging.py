import logging
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Union

from pythonjsonlogger import jsonlogger

from leave_tracker.core.config import settings

# Set by CorrelationIdMiddleware for the lifetime of a request
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

_QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")


class LeaveTrackerJsonFormatter(jsonlogger.JsonFormatter):
    """JSON lines tagged with the environment, build and current request id."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        req_id = request_id_var.get()
        if req_id:
            log_record["request_id"] = req_id

        if not log_record.get("timestamp"):
            log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = (log_record.get("level") or record.levelname).upper()
        log_record["environment"] = settings.environment
        log_record["build"] = settings.build_id


def setup_logging(level: Union[int, str, None] = None) -> None:
    """Install the JSON handler on the root logger once. Level defaults to LOG_LEVEL."""
    root = logging.getLogger()
    root.setLevel(level if level is not None else settings.log_level)
    if any(isinstance(h.formatter, LeaveTrackerJsonFormatter) for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(LeaveTrackerJsonFormatter("%(timestamp) %(level) %(name) %(message)"))
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
