"""Jinja2 answer formatters built from template strings."""

from __future__ import annotations

from typing import Any, Callable

import jinja2


def make_template_formatter(template: str) -> Callable[[Any], str]:
    """Compile *template* into a formatter.

    The answer is available as ``value``, e.g. ``{{ value.isoformat() }}`` for
    a date or ``{{ value.index }}: {{ value.value }}`` for a list option.

    Raises:
        ValueError: If the template does not parse.
    """
    env = jinja2.Environment(undefined=jinja2.StrictUndefined)
    try:
        tmpl = env.from_string(template)
    except jinja2.TemplateSyntaxError as exc:
        raise ValueError(f"Invalid format template: {exc}") from exc

    def render(value: Any) -> str:
        return tmpl.render(value=value)

    return render
