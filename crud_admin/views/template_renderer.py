"""Template rendering utilities for admin views."""

from pathlib import Path
from typing import Any

import jinja2
from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from markupsafe import Markup

from crud_admin.exceptions import ErrorCode, TemplateRenderException
from crud_admin.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


class TemplateRenderer:
    """Renders admin templates by id, e.g. ``property-types/default/list``.

    One instance is created per admin app and injected into every property
    type, so tests can swap it for a stub.
    """

    def __init__(self, directory: Path | str = TEMPLATES_DIR):
        self.templates = Jinja2Templates(directory=directory)

    @staticmethod
    def template_name(template_id: str) -> str:
        return template_id if template_id.endswith(".html") else f"{template_id}.html"

    def render(self, template_id: str, context: dict[str, Any]) -> Markup:
        """Render a template fragment to markup.

        Args:
            template_id: Template path relative to the templates directory, without ".html"
            context: Variables available inside the template

        Returns:
            Rendered markup, safe to embed in other templates

        Raises:
            TemplateRenderException: If the template is missing or fails to render
        """
        name = self.template_name(template_id)
        try:
            template = self.templates.get_template(name)
            return Markup(template.render(context))
        except jinja2.TemplateNotFound as e:
            log_with_context(
                logger,
                "error",
                "Template not found",
                template=name,
                event_type="template_not_found",
            )
            raise TemplateRenderException(
                f"Template not found: {name}",
                code=ErrorCode.TEMPLATE_NOT_FOUND,
                details={"template": name},
            ) from e
        except jinja2.TemplateError as e:
            log_with_context(
                logger,
                "error",
                "Template rendering failed",
                template=name,
                error=str(e),
                error_type=type(e).__name__,
                event_type="template_error",
            )
            raise TemplateRenderException(
                f"Failed to render template {name}: {e}",
                details={"template": name},
            ) from e

    def render_page(self, request: Request, template_id: str, context: dict[str, Any]) -> HTMLResponse:
        """Render a full page as an HTML response.

        Args:
            request: FastAPI request object
            template_id: Template id without ".html"
            context: Template variables

        Returns:
            HTMLResponse with the rendered page
        """
        return self.templates.TemplateResponse(request, self.template_name(template_id), context)
