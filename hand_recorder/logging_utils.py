"""
NDJSON event stream for recorded hands.

Each command the recorder accepts becomes one JSON record per line, so a hand
can be audited or rebuilt from its log.
"""

from __future__ import annotations

import json
import pathlib
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


class NDJSONLogger:
    """
    Writes hand events to a file, one JSON object per line.

    Every record carries an ISO timestamp, a running sequence number and the
    event type; keys are sorted so logs diff cleanly.
    """

    def __init__(self, path: str | pathlib.Path, append: bool = False) -> None:
        path = pathlib.Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self._path = path
        self._file = path.open("a" if append else "w", encoding="utf-8")
        self._seq = 0

    @property
    def path(self) -> pathlib.Path:
        return self._path

    def log(self, event_type: str, payload: Optional[Dict[str, Any]] = None) -> None:
        self._seq += 1
        record = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "seq": self._seq,
            "type": event_type,
            "payload": payload or {},
        }
        self._file.write(json.dumps(record, sort_keys=True, default=str) + "\n")
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> "NDJSONLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def read_events(path: str | pathlib.Path) -> List[Dict[str, Any]]:
    text = pathlib.Path(path).read_text(encoding="utf-8")
    return [json.loads(line) for line in text.splitlines() if line.strip()]
