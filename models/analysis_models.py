# models/analysis_models.py

from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON 出力を camelCase にそろえるための共通ベース。"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScoreFactor(CamelModel):
    name: str
    score: int = Field(..., ge=0, le=10)
    weight: int = Field(..., ge=0, le=100)


# -----------------------------------------
# findings の example レコード
# -----------------------------------------
class SchemaExample(CamelModel):
    type: str
    location: str
    code: Optional[str] = None
    issue: str
    recommendation: Optional[str] = None


class MetaExample(CamelModel):
    type: str
    current: str
    issue: str
    recommendation: str
    impact: str


class HeadingExample(CamelModel):
    tag: str
    text: str
    issue: str
    recommendation: str


class FindingExample(CamelModel):
    """GEO 側の findings で使う汎用 example。"""
    type: str
    detail: str
    code: Optional[str] = None
    issue: Optional[str] = None
    recommendation: Optional[str] = None


# -----------------------------------------
# AEO findings
# -----------------------------------------
class SchemaMarkupFindings(CamelModel):
    found: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)
    examples: List[SchemaExample] = Field(default_factory=list)


class MetaTagFindings(CamelModel):
    examples: List[MetaExample] = Field(default_factory=list)


class HeadingStructureFindings(CamelModel):
    h1_count: int = 0
    h2_count: int = 0
    h3_count: int = 0
    examples: List[HeadingExample] = Field(default_factory=list)


class AEOFindings(CamelModel):
    schema_markup: SchemaMarkupFindings
    meta_tags: MetaTagFindings
    heading_structure: HeadingStructureFindings


# -----------------------------------------
# GEO findings
# -----------------------------------------
class AuthorCredentialFindings(CamelModel):
    found: bool = False
    examples: List[FindingExample] = Field(default_factory=list)


class CitationFindings(CamelModel):
    external_references: int = 0
    has_citation_section: bool = False
    examples: List[FindingExample] = Field(default_factory=list)


class ContentStructureFindings(CamelModel):
    word_count: int = 0
    has_data: bool = False
    has_tables: bool = False
    examples: List[FindingExample] = Field(default_factory=list)


class GEOFindings(CamelModel):
    author_credentials: AuthorCredentialFindings
    citations: CitationFindings
    content_structure: ContentStructureFindings


# -----------------------------------------
# 強み・弱み・機会・脅威・アクション
# -----------------------------------------
class Strength(CamelModel):
    title: str
    detail: str
    code: str
    impact: str


class Weakness(CamelModel):
    title: str
    detail: str
    code: str
    impact: str
    fix: str


class Opportunity(CamelModel):
    title: str
    detail: str
    code: str
    impact: str


class Threat(CamelModel):
    title: str
    detail: str
    impact: str
    mitigation: str


class Action(CamelModel):
    priority: str
    title: str
    detail: str
    code: str
    effort: str
    impact: str


class CompositeScore(CamelModel):
    """
    0〜10 の合成スコアと、その説明用データ一式。
    score は factors の加重平均ではなく、別ロジックで計算される。
    """

    score: float = Field(..., ge=0.0, le=10.0)
    factors: List[ScoreFactor] = Field(default_factory=list)
    strengths: List[Strength] = Field(default_factory=list)
    weaknesses: List[Weakness] = Field(default_factory=list)
    opportunities: List[Opportunity] = Field(default_factory=list)
    threats: List[Threat] = Field(default_factory=list)
    actions: List[Action] = Field(default_factory=list)


class AEOScore(CompositeScore):
    findings: AEOFindings


class GEOScore(CompositeScore):
    findings: GEOFindings
