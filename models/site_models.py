# models/site_models.py

from __future__ import annotations

from typing import Any, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class StructuredDataRecord(BaseModel):
    """
    JSON-LD ブロック 1 つ分のパース結果。
    - type_name: "@type" の値（文字列で無い・存在しない場合は None）
    - raw: json.loads した生データ
    """
    type_name: Optional[str] = None
    raw: Any = None


class SkippedBlock(BaseModel):
    """パースに失敗して読み飛ばしたブロックの診断情報。"""
    index: int
    reason: str


class StructuredDataResult(BaseModel):
    """
    Structured-Data Reader の出力。
    成功したレコードと、スキップしたブロックを区別して保持する。
    """

    records: List[StructuredDataRecord] = Field(default_factory=list)
    skipped: List[SkippedBlock] = Field(default_factory=list)

    @property
    def schema_types(self) -> List[str]:
        """重複を除いた type 名（出現順）。"""
        names = [r.type_name for r in self.records if r.type_name]
        return list(dict.fromkeys(names))

    @property
    def has_faq(self) -> bool:
        return "FAQPage" in self.schema_types

    @property
    def has_how_to(self) -> bool:
        return "HowTo" in self.schema_types

    @property
    def has_article(self) -> bool:
        types = self.schema_types
        return "Article" in types or "BlogPosting" in types


class ContentSignals(BaseModel):
    """
    1ページ分のシグナル。
    スコアリングと findings 生成の共通入力で、生成後は変更しない。
    """
    model_config = ConfigDict(frozen=True)

    # 構造化データ
    schema_types: Tuple[str, ...] = ()
    has_faq: bool = False
    has_how_to: bool = False
    has_article: bool = False

    # メタ情報
    title: str = ""
    meta_description: str = ""

    # 見出し（文書順）
    h1s: Tuple[str, ...] = ()
    h2s: Tuple[str, ...] = ()
    h3s: Tuple[str, ...] = ()

    # 本文の統計値
    word_count: int = 0
    external_link_count: int = 0
    has_table: bool = False
    has_percent_data: bool = False
