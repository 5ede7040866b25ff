# tests/conftest.py
import json
from typing import Iterable, Optional

import pytest
from fastapi.testclient import TestClient

from services.html_parser import parse_html


def words(n: int) -> str:
    return " ".join(f"word{i}" for i in range(n))


def build_html(
    *,
    title: Optional[str] = None,
    meta_description: Optional[str] = None,
    schemas: Iterable[object] = (),
    raw_blocks: Iterable[str] = (),
    h1s: Iterable[str] = (),
    h2s: Iterable[str] = (),
    h3s: Iterable[str] = (),
    word_count: int = 0,
    external_links: int = 0,
    body_extra: str = "",
) -> str:
    """Assemble a minimal HTML document from the given parts."""
    head = []
    if title is not None:
        head.append(f"<title>{title}</title>")
    if meta_description is not None:
        head.append(f'<meta name="description" content="{meta_description}">')
    for schema in schemas:
        head.append(f'<script type="application/ld+json">{json.dumps(schema)}</script>')
    for block in raw_blocks:
        head.append(f'<script type="application/ld+json">{block}</script>')

    body = []
    body.extend(f"<h1>{h}</h1>" for h in h1s)
    body.extend(f"<h2>{h}</h2>" for h in h2s)
    body.extend(f"<h3>{h}</h3>" for h in h3s)
    if word_count:
        body.append(f"<p>{words(word_count)}</p>")
    body.extend(f'<a href="https://ref{i}.example.org/">r</a>' for i in range(external_links))
    body.append(body_extra)

    body_html = "\n".join(body)
    return f"<html><head>{''.join(head)}</head><body>\n{body_html}\n</body></html>"


@pytest.fixture()
def html_builder():
    return build_html


@pytest.fixture()
def soup_builder():
    def _build(**kwargs):
        return parse_html(build_html(**kwargs))
    return _build


@pytest.fixture()
def client() -> TestClient:
    from app.main import app
    return TestClient(app, raise_server_exceptions=False)
