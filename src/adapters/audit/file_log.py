"""
File audit log adapter - Implements AuditLog protocol.

Appends one line per event to a plain text file:

    2026-10-18 12:00:00 {"event": "registered", "email": "ann@acme.com"}

Audit failures never interrupt registration; they are reported through
the standard logger instead.
"""

import json
import logging
import threading
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class FileAuditLog:
    """
    Implements AuditLog protocol by appending JSON lines to a file.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def record(self, event: Mapping[str, Any]) -> None:
        """
        Append a timestamped event line.

        Args:
            event: JSON-serializable mapping; non-serializable values are
                rendered with str()
        """
        line = f"{datetime.now().strftime(TIMESTAMP_FORMAT)} {json.dumps(dict(event), default=str)}\n"
        try:
            with self._lock, self._path.open("a", encoding="utf-8") as fh:
                fh.write(line)
        except OSError as exc:
            logger.warning("Can't write audit log %s: %s", self._path, exc)
