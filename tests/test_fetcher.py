import asyncio
import httpx
import pytest
from summary_cli.config import SummaryConfig
from summary_cli.fetcher import FetchError, fetch_page_text
from summary_cli.parser import extract_text

PAGE = """
<html><head><title>t</title><style>p {color: red}</style></head>
<body><script>var x = 1;</script>
<article><p>First point here.</p><p>Second point.</p></article>
<footer>Footer text.</footer></body></html>
"""


def _client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_extract_text_drops_scripts():
    text = extract_text(PAGE)
    assert "First point here." in text
    assert "var x" not in text
    assert "color" not in text


def test_extract_text_with_selector():
    assert extract_text(PAGE, "article") == "First point here. Second point."


def test_fetch_page_text_sends_user_agent():
    seen = {}

    def handler(request):
        seen["ua"] = request.headers["User-Agent"]
        return httpx.Response(200, text=PAGE, headers={"Content-Type": "text/html; charset=utf-8"})

    async def run():
        async with _client(handler) as client:
            return await fetch_page_text("https://example.com/a", SummaryConfig(content_selector="article"), client)

    assert asyncio.run(run()) == "First point here. Second point."
    assert seen["ua"] == "SummaryCLI/0.1"


def test_fetch_error_status():
    async def run():
        async with _client(lambda request: httpx.Response(404)) as client:
            await fetch_page_text("https://example.com/missing", SummaryConfig(), client)

    with pytest.raises(FetchError):
        asyncio.run(run())


def test_fetch_rejects_binary_content():
    def handler(request):
        return httpx.Response(200, content=b"\x00\x01", headers={"Content-Type": "application/pdf"})

    async def run():
        async with _client(handler) as client:
            await fetch_page_text("https://example.com/doc.pdf", SummaryConfig(), client)

    with pytest.raises(FetchError):
        asyncio.run(run())
