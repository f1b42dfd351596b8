"""Template rendering with an automatically built partial registry."""

from .partials import inbuilt_partials
from .template_renderer import TemplateRenderer

__all__ = ["TemplateRenderer", "inbuilt_partials"]
