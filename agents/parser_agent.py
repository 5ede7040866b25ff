# agents/parser_agent.py

from __future__ import annotations

import re
import logging
from typing import List, Optional

from bs4 import BeautifulSoup

from agents.schema_agent import read_structured_data
from models.site_models import ContentSignals, StructuredDataResult
from services.html_parser import body_text

logger = logging.getLogger(__name__)

PERCENT_PATTERN = re.compile(r"\d+%")


def _heading_texts(soup: BeautifulSoup, level: int) -> List[str]:
    return [h.get_text().strip() for h in soup.find_all(f"h{level}")]


def _meta_description(soup: BeautifulSoup) -> str:
    tag = soup.find("meta", attrs={"name": "description"})
    if tag is None:
        return ""
    return tag.get("content") or ""


def extract_signals(
    soup: BeautifulSoup,
    structured: Optional[StructuredDataResult] = None,
) -> ContentSignals:
    """
    パース済みの HTML から ContentSignals を生成する。
    structured を省略した場合はここで JSON-LD も読み取る。

    同じ soup に対して何度呼んでも同じ結果になる（soup は変更しない）。
    """
    if structured is None:
        structured = read_structured_data(soup)

    title_tag = soup.find("title")
    title = title_tag.get_text() if title_tag else ""

    text = body_text(soup)

    signals = ContentSignals(
        schema_types=tuple(structured.schema_types),
        has_faq=structured.has_faq,
        has_how_to=structured.has_how_to,
        has_article=structured.has_article,
        title=title.strip(),
        meta_description=_meta_description(soup),
        h1s=tuple(_heading_texts(soup, 1)),
        h2s=tuple(_heading_texts(soup, 2)),
        h3s=tuple(_heading_texts(soup, 3)),
        word_count=len(text.split()),
        external_link_count=len(soup.select('a[href^="http"]')),
        has_table=soup.find("table") is not None,
        has_percent_data=PERCENT_PATTERN.search(text) is not None,
    )

    logger.info(
        "[parser_agent] Parsed signals: title=%s words=%s h1=%s links=%s",
        signals.title,
        signals.word_count,
        len(signals.h1s),
        signals.external_link_count,
    )
    return signals
