import copy
import logging
import threading
from collections import deque
from datetime import datetime, timezone
from typing import Any, Deque, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

WEBHOOK_CAPACITY = 100
TIMESTAMP_FIELD = "received_at"


def current_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class WebhookRecord:
    """One received delivery: the ``received_at`` stamp plus the rest of the payload."""

    __slots__ = ("received_at", "_body")

    def __init__(self, received_at: Any, body: Dict[str, Any]):
        self.received_at = received_at
        self._body = body

    @property
    def body(self) -> Dict[str, Any]:
        return copy.deepcopy(self._body)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "WebhookRecord":
        body = copy.deepcopy(payload)
        if TIMESTAMP_FIELD in body:
            received_at = body.pop(TIMESTAMP_FIELD)
        else:
            received_at = current_timestamp()
        return cls(received_at, body)

    def to_dict(self) -> Dict[str, Any]:
        data = {TIMESTAMP_FIELD: copy.deepcopy(self.received_at)}
        data.update(self.body)
        return data

    def __repr__(self) -> str:
        return f"WebhookRecord(received_at={self.received_at!r}, keys={sorted(self._body)})"


class WebhookStore:
    """Bounded, thread-safe FIFO of received webhooks.

    Every read and write goes through a single lock around the whole deque.
    Payload copying happens before the lock is taken, so the critical
    section is only the append/evict or the shallow copy of the deque.
    """

    def __init__(self, capacity: int = WEBHOOK_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._records: Deque[WebhookRecord] = deque()
        self._lock = threading.Lock()

    def ingest(self, payload: Dict[str, Any]) -> WebhookRecord:
        record = WebhookRecord.from_payload(payload)
        evicted: Optional[WebhookRecord] = None
        with self._lock:
            if len(self._records) >= self.capacity:
                evicted = self._records.popleft()
            self._records.append(record)
        if evicted is not None:
            logger.debug(f"Store at capacity ({self.capacity}), evicted webhook received at {evicted.received_at}")
        return record

    def snapshot(self) -> Tuple[WebhookRecord, ...]:
        with self._lock:
            return tuple(self._records)

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def __len__(self) -> int:
        return self.count()
