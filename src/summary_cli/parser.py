from __future__ import annotations
from typing import Optional
from bs4 import BeautifulSoup
from bs4.builder import builder_registry


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml") if builder_registry.lookup("lxml") else BeautifulSoup(html, "html.parser")


def extract_text(html: str, selector: Optional[str] = None) -> str:
    """Visible text of a page (or of the nodes matching `selector`), one block per line."""
    soup = _soup(html)
    for el in soup(["script", "style", "noscript"]):
        el.decompose()
    nodes = soup.select(selector) if selector else [soup.body or soup]
    return "\n".join(n.get_text(" ", strip=True) for n in nodes).strip()
