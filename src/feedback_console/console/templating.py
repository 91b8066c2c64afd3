from __future__ import annotations

from pathlib import Path

from fastapi.templating import Jinja2Templates
from markupsafe import Markup

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_fragment(name: str, **context: object) -> Markup:
    """Render a partial template to markup that can be embedded in a page."""
    return Markup(templates.get_template(name).render(**context))
