"""
Template rendering: placeholder substitution and HTML -> PDF conversion
"""

import html
import logging
import re
from typing import Any, Dict, Iterable, Optional

import httpx

from docforms.core.config import settings
from docforms.core.exceptions import RenderingFailedError

logger = logging.getLogger(__name__)

PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="ru">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <style>
    @page {{
      size: A4;
      margin: 2cm;
    }}
    body {{
      font-family: 'Times New Roman', serif;
      font-size: 14pt;
      line-height: 1.5;
      color: #000;
      max-width: 21cm;
      margin: 0 auto;
      padding: 1cm;
    }}
  </style>
</head>
<body>
{body}
</body>
</html>
"""


def _format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render(body: str, field_names: Iterable[str], answers: Dict[str, Any], escape: bool = True) -> str:
    """
    Substitute answers into a template body

    Every {{name}} whose name is one of the template's fields is replaced
    (globally) with the answer, or an empty string when unanswered. Other
    placeholders are left as they are.
    """
    known = set(field_names)

    def substitute(match: re.Match) -> str:
        name = match.group(1)
        if name not in known:
            return match.group(0)
        value = _format_value(answers.get(name))
        return html.escape(value) if escape else value

    return PLACEHOLDER.sub(substitute, body or "")


def render_document_html(title: str, body: str) -> str:
    """Wrap a rendered body into a printable A4 page"""
    return PAGE_TEMPLATE.format(title=html.escape(title), body=body)


def render_template_document(template, answers: Dict[str, Any]) -> str:
    """Full printable page for a template ORM object and an answer map"""
    field_names = [f.field_name for f in template.form_fields]
    return render_document_html(template.title, render(template.content_html, field_names, answers))


class PdfRenderer:
    """Client for a headless-Chromium HTML to PDF service (Gotenberg API)"""

    CONVERT_PATH = "/forms/chromium/convert/html"

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None, retries: int = 1):
        self.base_url = (base_url if base_url is not None else settings.PDF_RENDERER_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.PDF_RENDER_TIMEOUT
        self.retries = retries

    async def render_pdf(self, page_html: str) -> bytes:
        if not self.base_url:
            raise RenderingFailedError("PDF renderer is not configured")

        files = {"files": ("index.html", page_html.encode("utf-8"), "text/html")}
        data = {
            "paperWidth": "8.27",
            "paperHeight": "11.7",
            "marginTop": "0.79",
            "marginBottom": "0.79",
            "marginLeft": "0.79",
            "marginRight": "0.79",
            "printBackground": "true",
        }

        last_error: Optional[Exception] = None
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            for attempt in range(self.retries + 1):
                try:
                    response = await client.post(f"{self.base_url}{self.CONVERT_PATH}", files=files, data=data)
                except httpx.HTTPError as e:
                    last_error = e
                    logger.warning(f"PDF rendering attempt {attempt + 1} failed: {e}")
                    continue

                if response.status_code >= 500:
                    last_error = RenderingFailedError(f"renderer returned {response.status_code}")
                    logger.warning(f"PDF rendering attempt {attempt + 1} failed with HTTP {response.status_code}")
                    continue
                if response.status_code != 200:
                    raise RenderingFailedError(f"renderer rejected the document: HTTP {response.status_code}")
                return response.content

        logger.error(f"PDF rendering failed after {self.retries + 1} attempts: {last_error}")
        raise RenderingFailedError("PDF rendering failed") from last_error
