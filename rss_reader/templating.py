"""Console templates for the menu and the feed listing."""

from __future__ import annotations

import functools
from importlib import resources

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .sanitizer import sanitize

SEPARATOR = "-" * 80


@functools.lru_cache(maxsize=None)
def get_environment() -> Environment:
    """Return the shared environment for the bundled plain-text templates.

    Output goes to a terminal, so nothing is HTML-escaped; a missing template
    variable is an error rather than an empty string.
    """
    template_dir = resources.files(__package__) / "templates"
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["sanitize"] = sanitize
    env.globals["separator"] = SEPARATOR
    return env


def render(template_name: str, **context) -> str:
    """Render one of the bundled templates."""
    return get_environment().get_template(template_name).render(**context)
