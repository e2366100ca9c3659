"""
Shared Jinja2 templates (autoescaped)

Patient fields are free text, so every page and the PDF source go through here
"""
import re

from fastapi.templating import Jinja2Templates
from markupsafe import Markup, escape

from patient_intake.core.config import TEMPLATES_DIR

# A space at line start or after another space would be collapsed by HTML
_COLLAPSIBLE_SPACE = re.compile(r"^ |(?<= ) ")


def preserve_whitespace(value: str) -> Markup:
    """
    Escape text and keep its spaces and line breaks when rendered as HTML
    """
    lines = []
    for line in str(value).splitlines():
        escaped = str(escape(line))
        lines.append(_COLLAPSIBLE_SPACE.sub("&nbsp;", escaped))
    return Markup("<br/>".join(lines))


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["preserve_whitespace"] = preserve_whitespace


def render_template(name: str, **context) -> str:
    """
    Render a template to a string outside of a request
    """
    return templates.get_template(name).render(**context)
