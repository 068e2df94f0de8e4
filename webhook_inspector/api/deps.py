import logging
from typing import Optional

from fastapi import Depends, Query, Request

from webhook_inspector.core.config import Settings
from webhook_inspector.core.security import NO_SECRET_MESSAGE, WRONG_SECRET_MESSAGE, SecretError, secrets_match
from webhook_inspector.core.store import WebhookStore

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> WebhookStore:
    return request.app.state.store


async def require_secret(
    secret: Optional[str] = Query(None, description="Shared secret guarding the webhook listing"),
    settings: Settings = Depends(get_settings),
) -> str:
    if secret is None:
        logger.warning("Webhook listing requested without a secret")
        raise SecretError(NO_SECRET_MESSAGE)
    if not secrets_match(secret, settings.secret):
        logger.warning("Webhook listing requested with a wrong secret")
        raise SecretError(WRONG_SECRET_MESSAGE)
    return secret
