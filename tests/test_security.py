import inspect

import pytest

from webhook_inspector.api.deps import require_secret
from webhook_inspector.core import security
from webhook_inspector.core.config import Settings
from webhook_inspector.core.security import NO_SECRET_MESSAGE, WRONG_SECRET_MESSAGE, SecretError, secrets_match


def test_secrets_match():
    assert secrets_match("right", "right")
    assert not secrets_match("wrong", "right")
    assert not secrets_match("", "right")
    assert not secrets_match("rïght", "right")


@pytest.mark.asyncio
async def test_require_secret_accepts_matching_secret():
    assert await require_secret(secret="right", settings=Settings(secret="right")) == "right"


@pytest.mark.asyncio
@pytest.mark.parametrize("provided, message", [(None, NO_SECRET_MESSAGE), ("nope", WRONG_SECRET_MESSAGE)])
async def test_require_secret_rejects(provided, message):
    with pytest.raises(SecretError) as exc_info:
        await require_secret(secret=provided, settings=Settings(secret="right"))
    assert exc_info.value.message == message


def test_core_security_does_not_depend_on_api_layer():
    assert "webhook_inspector.api" not in inspect.getsource(security)
