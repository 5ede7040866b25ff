# services/html_parser.py

from __future__ import annotations

from bs4 import BeautifulSoup


def parse_html(html: str) -> BeautifulSoup:
    """
    HTML文字列をクエリ可能なツリーに変換する。
    ※ ここではネットワークアクセスは行わない（fetch_html で取得済み前提）
    """
    return BeautifulSoup(html or "", "html.parser")


def body_text(soup: BeautifulSoup) -> str:
    """
    <body> のテキストを返す。body が無い断片 HTML の場合は文書全体を使う。
    script/style もそのまま含める（word count の互換性のため decompose しない）。
    """
    root = soup.body if soup.body is not None else soup
    return root.get_text()
