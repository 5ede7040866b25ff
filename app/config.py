# app/config.py

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    アプリ全体で使う設定クラス。
    .env から環境変数を読み込み、属性として参照できるようにする。
    """

    # ---------- ページ取得 ----------
    # USER_AGENT=... を .env に書けば上書きされる
    user_agent: str = "Mozilla/5.0 (compatible; AEO-GEO-Analyzer/1.0)"

    # 1 リクエストあたりのタイムアウト（秒）
    fetch_timeout: float = 10.0

    # リダイレクトの最大回数
    max_redirects: int = 5

    # ---------- API ----------
    # CORS_ALLOW_ORIGINS='["https://example.com"]' のように JSON で指定
    cors_allow_origins: List[str] = ["*"]

    # ---------- ログ ----------
    log_level: str = "INFO"

    # ---------- Pydantic Settings 設定 ----------
    model_config = SettingsConfigDict(
        env_file=".env",            # .env を読む
        env_file_encoding="utf-8",
        extra="ignore",             # 定義外の環境変数があっても無視（エラーにしない）
    )


@lru_cache
def get_settings() -> Settings:
    """Settings をシングルトン的に使うためのヘルパ。"""
    return Settings()


# 他のモジュールからは `from app.config import settings` で利用
settings = get_settings()
