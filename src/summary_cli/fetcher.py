from __future__ import annotations
import asyncio
import logging
from typing import Optional
import httpx
from .config import SummaryConfig
from .parser import extract_text

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    pass


async def fetch_html(url: str, cfg: SummaryConfig, client: Optional[httpx.AsyncClient] = None) -> str:
    headers = {"User-Agent": cfg.user_agent}
    timeout = httpx.Timeout(10.0, read=cfg.timeout_s)
    own_client = client is None
    if own_client:
        client = httpx.AsyncClient()
    try:
        r = await client.get(url, headers=headers, timeout=timeout, follow_redirects=True)
    except httpx.HTTPError as ex:
        raise FetchError(f"{url}: {ex!r}") from ex
    finally:
        if own_client:
            await client.aclose()
    if not (200 <= r.status_code < 300):
        raise FetchError(f"{url}: HTTP {r.status_code}")
    # basic content-type check
    ct = r.headers.get("Content-Type", "")
    if ct and "html" not in ct and not ct.startswith("text/"):
        raise FetchError(f"{url}: unsupported content type {ct}")
    logger.debug("fetched %s (%d bytes)", url, len(r.content))
    return r.text


async def fetch_page_text(url: str, cfg: SummaryConfig, client: Optional[httpx.AsyncClient] = None) -> str:
    html = await fetch_html(url, cfg, client)
    return extract_text(html, cfg.content_selector)


def fetch_text(url: str, cfg: SummaryConfig) -> str:
    return asyncio.run(fetch_page_text(url, cfg))
