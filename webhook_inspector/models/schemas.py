import json
from typing import Any, Literal

from pydantic import BaseModel

from webhook_inspector.core.store import WebhookRecord


class WebhookView(BaseModel):
    received_at: Any
    json_text: str

    @classmethod
    def from_record(cls, record: WebhookRecord) -> "WebhookView":
        return cls(
            received_at=record.received_at,
            json_text=json.dumps(record.to_dict(), indent=2, ensure_ascii=False),
        )


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
