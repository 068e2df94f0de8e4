import json
import logging
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse

from webhook_inspector.api.deps import get_store, require_secret
from webhook_inspector.core.store import WebhookStore
from webhook_inspector.services.rendering import RenderError, render_webhooks_page

logger = logging.getLogger(__name__)

router = APIRouter()


def _reject_constant(name: str):
    # NaN and +/-Infinity are not JSON and cannot be serialized back out
    raise ValueError(f"Non-standard JSON constant: {name}")


@router.post("/", status_code=status.HTTP_200_OK)
async def receive_webhook(request: Request, store: WebhookStore = Depends(get_store)):
    """
    Store any JSON object delivered to the endpoint.
    """
    raw = await request.body()
    try:
        payload = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.warning(f"Rejected webhook with invalid JSON body ({len(raw)} bytes): {type(e).__name__}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid JSON body")

    if not isinstance(payload, dict):
        logger.warning(f"Rejected webhook with non-object JSON body: {type(payload).__name__}")
        raise HTTPException(
            status_code=422,
            detail="Webhook payload must be a JSON object",
        )

    record = store.ingest(payload)
    logger.info(f"Received a webhook! ({store.count()}/{store.capacity} stored, received_at={record.received_at})")
    return Response(status_code=status.HTTP_200_OK)


@router.get("/", responses={401: {"content": {"text/plain": {}}}})
async def list_webhooks(
    request: Request,
    output_format: Literal["html", "json"] = Query("html", alias="format", description="Listing presentation"),
    _: str = Depends(require_secret),
    store: WebhookStore = Depends(get_store),
):
    """
    Return every stored webhook, oldest first, as an HTML page or a JSON array.
    """
    records = store.snapshot()

    if output_format == "json":
        return JSONResponse(content=[record.to_dict() for record in records])

    try:
        html = render_webhooks_page(records, endpoint=str(request.base_url))
    except RenderError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTMLResponse(html)
