"""Immutable chained audit log.

Each entry contains a SHA-256 hash of the previous entry so that
tampering is detectable.  Entries record which shares a request used,
never the recovered secret.
"""

from __future__ import annotations

import hashlib
import json
import time
from dataclasses import dataclass
from typing import Any, Dict, List

GENESIS_HASH = "0" * 64


@dataclass
class AuditEntry:
    timestamp: float
    event: str
    data: Dict[str, Any]
    prev_hash: str
    entry_hash: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "event": self.event,
            "data": self.data,
            "prev_hash": self.prev_hash,
            "entry_hash": self.entry_hash,
        }


def _entry_hash(timestamp: float, event: str, data: Dict[str, Any], prev_hash: str) -> str:
    payload = json.dumps(
        {"timestamp": timestamp, "event": event, "data": data, "prev_hash": prev_hash},
        sort_keys=True,
        separators=(",", ":"),
    )
    return hashlib.sha256(payload.encode()).hexdigest()


class AuditLog:
    """Append-only hash-chained audit log."""

    def __init__(self) -> None:
        self._entries: List[AuditEntry] = []
        self._prev_hash: str = GENESIS_HASH

    def append(self, event: str, data: Dict[str, Any]) -> AuditEntry:
        ts = time.time()
        entry = AuditEntry(
            timestamp=ts,
            event=event,
            data=data,
            prev_hash=self._prev_hash,
            entry_hash=_entry_hash(ts, event, data, self._prev_hash),
        )
        self._entries.append(entry)
        self._prev_hash = entry.entry_hash
        return entry

    def entries(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def verify_chain(self) -> bool:
        """Verify the integrity of the full chain."""
        prev = GENESIS_HASH
        for e in self._entries:
            if e.prev_hash != prev:
                return False
            if e.entry_hash != _entry_hash(e.timestamp, e.event, e.data, e.prev_hash):
                return False
            prev = e.entry_hash
        return True
