"""Named-parameter template rendering backed by Jinja2."""

from __future__ import annotations

from typing import Mapping

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError, UndefinedError, meta

_ENV = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


class TemplateRenderError(RuntimeError):
    """Raised when a template cannot be rendered with the given parameters."""


class TemplateNotFoundError(FileNotFoundError):
    """Raised when a named prompt template does not exist on disk."""


def render_template(text: str, params: Mapping[str, object], *, name: str = "<template>") -> str:
    """Render ``text`` with ``params``.

    Every parameter must be referenced by the template and every name the
    template references must be supplied; either mismatch raises
    :class:`TemplateRenderError` instead of leaving the text unchanged.
    """
    try:
        parsed = _ENV.parse(text)
    except TemplateSyntaxError as exc:
        raise TemplateRenderError(f"Invalid template {name}: {exc.message}") from exc

    referenced = meta.find_undeclared_variables(parsed)
    unused = sorted(set(params) - referenced)
    if unused:
        raise TemplateRenderError(
            f"Template {name} does not reference {', '.join(unused)}"
        )

    try:
        return _ENV.from_string(text).render(**params)
    except UndefinedError as exc:
        raise TemplateRenderError(f"Template {name}: {exc.message}") from exc


__all__ = ["TemplateNotFoundError", "TemplateRenderError", "render_template"]
