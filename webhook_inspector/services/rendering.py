import logging
from typing import List, Sequence

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from webhook_inspector.core.store import WebhookRecord
from webhook_inspector.models.schemas import WebhookView

logger = logging.getLogger(__name__)

_env = Environment(
    loader=PackageLoader("webhook_inspector", "templates"),
    autoescape=select_autoescape(["html"]),
)


class RenderError(Exception):
    pass


def build_views(records: Sequence[WebhookRecord]) -> List[WebhookView]:
    return [WebhookView.from_record(record) for record in records]


def render_webhooks_page(records: Sequence[WebhookRecord], endpoint: str) -> str:
    """Render the viewer page for ``records``, oldest first."""
    views = build_views(records)
    try:
        template = _env.get_template("webhooks.html")
        return template.render(endpoint=endpoint, webhooks=views, webhooks_count=len(views))
    except TemplateError as e:
        logger.error(f"Rendering webhooks page failed: {e}", exc_info=True)
        raise RenderError("Template rendering failed") from e
