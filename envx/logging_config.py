"""
envx/logging_config.py
Logging setup for the envx CLI.
Human-readable by default; JSON lines when structured output is requested.
"""

from __future__ import annotations
import json
import logging
import os
import time

LOG_FORMAT_ENV = "ENVX_LOG_FORMAT"


# ── Structured JSON Formatter ─────────────────────────────────────────────

class StructuredFormatter(logging.Formatter):
    """
    JSON log formatter for machine-parseable logs.
    Fields: ts, level, logger, msg, extra
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if hasattr(record, "extra_data"):
            entry["extra"] = record.extra_data

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


# ── Setup ─────────────────────────────────────────────────────────────────

def setup_logging(level: str = "WARNING", structured: bool | None = None):
    """
    Configure the root logger with a single stderr handler.
    Args:
        level: log level (DEBUG/INFO/WARNING/ERROR)
        structured: JSON output if True; None reads ENVX_LOG_FORMAT=json
    """
    if structured is None:
        structured = os.environ.get(LOG_FORMAT_ENV, "").lower() == "json"

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Remove existing handlers
    for h in root.handlers[:]:
        root.removeHandler(h)

    if structured:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            "[%(asctime)s][%(name)s][%(levelname)s] %(message)s",
            datefmt="%H:%M:%S",
        )

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    return root
