"""Tests for placeholder substitution and the PDF renderer client"""
import pytest
import httpx
from unittest.mock import AsyncMock, MagicMock, patch

from docforms.core.exceptions import RenderingFailedError
from docforms.services.renderer import PdfRenderer, render, render_document_html
from docforms.templates.catalog import TEMPLATES


class TestRender:
    def test_known_placeholders_replaced_globally(self):
        body = "<p>{{fullName}}</p><p>Подпись: {{fullName}}</p>"
        assert render(body, ["fullName"], {"fullName": "Иванов"}) == "<p>Иванов</p><p>Подпись: Иванов</p>"

    def test_unknown_placeholders_untouched(self):
        body = "{{fullName}} {{signature}}"
        assert render(body, ["fullName"], {"fullName": "Иванов", "signature": "x"}) == "Иванов {{signature}}"

    def test_missing_answer_becomes_empty(self):
        assert render("от {{fullName}}", ["fullName"], {}) == "от "

    def test_values_are_html_escaped(self):
        result = render("{{companyName}}", ["companyName"], {"companyName": "<b>ООО & Ко</b>"})
        assert result == "&lt;b&gt;ООО &amp; Ко&lt;/b&gt;"

    def test_escaping_can_be_disabled(self):
        result = render("{{companyName}}", ["companyName"], {"companyName": "<b>ООО</b>"}, escape=False)
        assert result == "<b>ООО</b>"

    def test_integral_numbers_render_without_fraction(self):
        assert render("{{days}} дней", ["days"], {"days": 14.0}) == "14 дней"

    @pytest.mark.parametrize("spec", TEMPLATES, ids=lambda spec: spec.title)
    def test_catalog_templates_leave_no_field_placeholders(self, spec):
        names = [f.field_name for f in spec.fields]
        answers = {name: "значение" for name in names}

        output = render(spec.html, names, answers)

        assert "{{" not in output

    def test_page_wraps_body(self):
        page = render_document_html("Заявление <1>", "<p>текст</p>")
        assert page.startswith("<!DOCTYPE html>")
        assert "<title>Заявление &lt;1&gt;</title>" in page
        assert "<p>текст</p>" in page
        assert "size: A4" in page


def mock_response(status_code, content=b""):
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    return response


class TestPdfRenderer:
    @pytest.fixture
    def client(self):
        with patch("docforms.services.renderer.httpx.AsyncClient") as client_class:
            client = AsyncMock()
            client_class.return_value.__aenter__.return_value = client
            yield client

    @pytest.mark.asyncio
    async def test_returns_pdf_bytes(self, client):
        client.post.return_value = mock_response(200, b"%PDF-1.7")

        pdf = await PdfRenderer(base_url="http://renderer:3000").render_pdf("<html></html>")

        assert pdf == b"%PDF-1.7"
        url = client.post.call_args.args[0]
        assert url == "http://renderer:3000/forms/chromium/convert/html"

    @pytest.mark.asyncio
    async def test_retries_once_after_server_error(self, client):
        client.post.side_effect = [mock_response(502), mock_response(200, b"%PDF")]

        assert await PdfRenderer(base_url="http://renderer:3000").render_pdf("<html></html>") == b"%PDF"
        assert client.post.call_count == 2

    @pytest.mark.asyncio
    async def test_gives_up_after_retry(self, client):
        client.post.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(RenderingFailedError):
            await PdfRenderer(base_url="http://renderer:3000").render_pdf("<html></html>")
        assert client.post.call_count == 2

    @pytest.mark.asyncio
    async def test_client_error_not_retried(self, client):
        client.post.return_value = mock_response(400)

        with pytest.raises(RenderingFailedError):
            await PdfRenderer(base_url="http://renderer:3000").render_pdf("<html></html>")
        assert client.post.call_count == 1

    @pytest.mark.asyncio
    async def test_unconfigured_renderer_fails_fast(self):
        with pytest.raises(RenderingFailedError):
            await PdfRenderer(base_url="").render_pdf("<html></html>")
