from __future__ import annotations

import datetime as dt
import json
import logging
import logging.config
from pathlib import Path
from typing_extensions import override


LOG_RECORD_BUILTIN_ATTRS = {
    "args",
    "asctime",
    "created",
    "exc_info",
    "exc_text",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "message",
    "msg",
    "name",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "stack_info",
    "taskName",
    "thread",
    "threadName",
}


def _utc_iso(created: float) -> str:
    ts = dt.datetime.fromtimestamp(created, tz=dt.timezone.utc)
    return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class UTCISOFormatter(logging.Formatter):
    """%(asctime)s as ISO-8601 with timezone (UTC, 'Z')."""

    @override
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return _utc_iso(record.created)


class JSONLinesFormatter(logging.Formatter):
    """
    One JSON object per record: timestamp, level, logger, message, where it
    came from, plus anything passed through extra={...} (e.g. database=...).
    """

    @override
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": _utc_iso(record.created),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "where": f"{record.module}:{record.lineno}",
        }
        if record.exc_info is not None:
            entry["exc_info"] = self.formatException(record.exc_info)

        for key, val in record.__dict__.items():
            if key not in LOG_RECORD_BUILTIN_ATTRS:
                entry[key] = val

        return json.dumps(entry, ensure_ascii=False, default=str)


def default_config_path() -> Path:
    return Path(__file__).resolve().parent / "config.json"


def setup_logging(config_path: str | Path | None = None) -> None:
    """Load a dictConfig from JSON. Falls back to the packaged config.json."""
    path = Path(config_path) if config_path else default_config_path()
    config = json.loads(path.read_text(encoding="utf-8"))
    logging.config.dictConfig(config)
