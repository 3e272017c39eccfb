"""
Template renderer implementation using Jinja2.

Slide templates live as HTML files with Jinja2 syntax in a views directory.
Jinja2 keeps parsed templates cached and reloads them when the file changes,
so repeated renders do not re-read unchanged templates.
"""

from pathlib import Path
from typing import Any, Mapping, Union

from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound, select_autoescape

from presto_slide.application.ports import TemplateRendererPort
from presto_slide.domain.exceptions import TemplateNotFoundError, TemplateRenderError
from presto_slide.infra.config.logging_config import get_logger


class JinjaTemplateRenderer(TemplateRendererPort):
    """Renders slide contexts against templates in a views directory."""

    def __init__(self, views_path: Union[str, Path]):
        """
        Initialize template renderer.

        Args:
            views_path: Path to directory containing template files
        """
        self.views_path = Path(views_path)
        self._log = get_logger("infra.template_service")

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.views_path)),
            autoescape=select_autoescape(["html"]),
            keep_trailing_newline=True,
        )

    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of the template file to use
            context: Values exposed to the template

        Returns:
            str: Rendered HTML content

        Raises:
            TemplateNotFoundError: If the template file does not exist
            TemplateRenderError: If loading or rendering fails
        """
        try:
            template = self.jinja_env.get_template(template_name)
            rendered = template.render(**context)
        except TemplateNotFound as e:
            self._log.error(
                "template.not_found",
                template=template_name,
                views_path=str(self.views_path),
            )
            raise TemplateNotFoundError(template_name, str(self.views_path)) from e
        except TemplateError as e:
            self._log.error("template.render_failed", template=template_name, error=str(e))
            raise TemplateRenderError(template_name, str(e)) from e

        self._log.debug("template.rendered", template=template_name)
        return rendered
