from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from user_service.settings import Settings, settings as default_settings


_CONFIGURED = False
_HANDLER: Optional[logging.Handler] = None


class JsonFormatter(logging.Formatter):
    _RESERVED_KEYS = {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - override
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key in self._RESERVED_KEYS or key in payload:
                continue
            payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(config: Optional[Settings] = None, force: bool = False) -> None:
    """Install the stdout handler on the root logger.

    Later calls are no-ops unless ``force`` is set, in which case only the
    handler installed here is replaced.
    """
    global _CONFIGURED, _HANDLER
    if _CONFIGURED and not force:
        return

    config = config or default_settings
    root_logger = logging.getLogger()
    root_logger.setLevel(config.log_level.upper())

    handler = logging.StreamHandler(sys.stdout)
    if config.log_format.lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s")
        )

    if _CONFIGURED:
        root_logger.removeHandler(_HANDLER)
    else:
        root_logger.handlers.clear()
    root_logger.addHandler(handler)
    _HANDLER = handler
    _CONFIGURED = True
