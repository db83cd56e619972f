"""Prompt templates and prompt composition."""

from .composer import PromptComposer
from .templates import TemplateNotFoundError, TemplateRenderError, render_template

__all__ = ["PromptComposer", "TemplateNotFoundError", "TemplateRenderError", "render_template"]
