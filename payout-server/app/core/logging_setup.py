"""Logging setup applied once at application startup."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from app.core.config import Settings

_EXTRA_FIELDS = ("user_id", "task_id", "checkout_id", "amount_cents")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            value = record.__dict__.get(key)
            if value is not None:
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(settings: Settings) -> None:
    root = logging.getLogger()
    if getattr(root, "_payout_configured", False):
        return

    handler = logging.StreamHandler()
    if settings.logging.format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(getattr(logging, settings.logging.level.upper(), logging.INFO))
    root._payout_configured = True  # type: ignore[attr-defined]
