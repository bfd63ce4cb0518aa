"""Pure rendering functions: UI state -> HTML strings.

All renderers follow the same pattern:
  - Input: a UI state variant or ``Amphibian`` records
  - Output: str (HTML fragment, except ``build_page_html``)
  - No side effects, no I/O; the only action a screen emits is the retry form

Used by ``server.py`` (live app) and ``flows/build.py`` (static snapshot).

Public API:
  - screens: build_loading_html, build_error_html, build_amphibian_card_html,
    build_amphibian_list_html, build_screen_html, build_page_html
  - strings: user-facing text

Templates live in ``templates/`` and produce fragments, except
``base.html.j2`` which wraps a screen in the page chrome (top app bar, CSS).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
