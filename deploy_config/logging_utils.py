# --------------------------------------------------
# logging_utils.py
# --------------------------------------------------
# This file sets up structured JSON logging for the
# deploy-config command line.
#
# Key Features:
#   - Every log entry is a valid JSON object, one line per record
#   - Includes timestamp, log level and logger name
#   - dict messages are merged into the record as-is
#
# Logs go to stderr so `deploy-config get ...` output on
# stdout stays clean for shell substitution.
# --------------------------------------------------

import logging
import sys
import json
from datetime import datetime, timezone


class JSONRequestFormatter(logging.Formatter):
    """
    Formats each log record as one JSON line.
    If record.msg is already a dict, it is embedded directly.
    Otherwise record.getMessage() is stored under "msg".
    """

    def format(self, record):
        if isinstance(record.msg, dict):
            payload = record.msg
        else:
            payload = {"msg": record.getMessage()}

        base = {
            "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
        }
        base.update(payload)

        return json.dumps(base, default=str)


def setup_logging(level: str = "INFO", stream=None):
    """
    Configure the root logger with a single JSON handler.
    Unknown level names fall back to INFO.
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JSONRequestFormatter())

    root = logging.getLogger()
    root.handlers = []       # avoid duplicate handlers on repeated setup
    root.addHandler(handler)

    level = str(level).upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    root.setLevel(level)
