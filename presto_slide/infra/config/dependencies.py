"""
Default collaborators and a slide factory that wires them in.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from presto_slide.domain.entities.slide import Slide
from presto_slide.infra.config.settings import get_settings
from presto_slide.infra.markdown.renderer import PythonMarkdownRenderer
from presto_slide.infra.templates.template_service import JinjaTemplateRenderer

# presto_slide/views
DEFAULT_VIEWS_PATH = Path(__file__).resolve().parents[2] / "views"

_markdown_renderer: Optional[PythonMarkdownRenderer] = None
_template_renderers: Dict[Path, JinjaTemplateRenderer] = {}


def get_views_path() -> Path:
    """Views directory from settings, or the one shipped with the package."""
    settings = get_settings()
    if settings.views_path:
        return Path(settings.views_path)
    return DEFAULT_VIEWS_PATH


def get_markdown_renderer() -> PythonMarkdownRenderer:
    global _markdown_renderer
    if _markdown_renderer is None:
        _markdown_renderer = PythonMarkdownRenderer()
    return _markdown_renderer


def get_template_renderer(views_path: Optional[Path] = None) -> JinjaTemplateRenderer:
    """Template renderer for a views directory, one per directory."""
    path = Path(views_path) if views_path is not None else get_views_path()
    renderer = _template_renderers.get(path)
    if renderer is None:
        renderer = JinjaTemplateRenderer(path)
        _template_renderers[path] = renderer
    return renderer


def build_slide(*args: Any, **kwargs: Any) -> Slide:
    """Slide wired with the default renderers and the configured template."""
    return Slide(*args, **_with_defaults(kwargs))


def build_slide_from_params(
    params: Mapping[str, Any], strict: Optional[bool] = None, **kwargs: Any
) -> Slide:
    """``Slide.from_params`` with defaults; ``strict`` falls back to settings."""
    if strict is None:
        strict = get_settings().strict_slide_params
    return Slide.from_params(params, strict=strict, **_with_defaults(kwargs))


def _with_defaults(kwargs: Dict[str, Any]) -> Dict[str, Any]:
    kwargs.setdefault("markdown_renderer", get_markdown_renderer())
    kwargs.setdefault("template_renderer", get_template_renderer())
    kwargs.setdefault("template_name", get_settings().slide_template)
    return kwargs
