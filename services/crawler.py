# services/crawler.py

from __future__ import annotations

import logging
from typing import Optional

import requests

from app.config import settings

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """
    ページ取得の失敗を 1 種類の例外にまとめたもの。

    - kind: "timeout" / "network" / "http"
    - status_code: 上流の HTTP ステータス（HTTP 起因の場合のみ）
    """

    def __init__(self, kind: str, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code

    @property
    def details(self) -> str:
        if self.status_code is not None:
            return f"HTTP {self.status_code}"
        return "Network error"


def resolve_url(domain: str) -> str:
    """スキームが無ければ https:// を付ける。"""
    domain = domain.strip()
    return domain if domain.startswith("http") else f"https://{domain}"


def fetch_html(url: str, timeout: Optional[float] = None) -> str:
    """
    単純な GET だけのクロール。リトライは入れていない。
    失敗はすべて FetchError に変換して投げる。
    """
    headers = {
        "User-Agent": settings.user_agent,
    }
    timeout = settings.fetch_timeout if timeout is None else timeout

    with requests.Session() as session:
        session.max_redirects = settings.max_redirects
        try:
            resp = session.get(url, headers=headers, timeout=timeout)
            resp.raise_for_status()
        except requests.Timeout as e:
            logger.warning("[crawler] timeout url=%s", url)
            raise FetchError("timeout", f"timeout of {timeout}s exceeded") from e
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.warning("[crawler] http error url=%s status=%s", url, status)
            raise FetchError("http", str(e), status_code=status) from e
        except requests.RequestException as e:
            logger.warning("[crawler] network error url=%s error=%s", url, e)
            raise FetchError("network", str(e)) from e

    logger.info("[crawler] fetched url=%s status=%s length=%s", url, resp.status_code, len(resp.text))
    return resp.text
