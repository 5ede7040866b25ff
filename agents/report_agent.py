# agents/report_agent.py

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from agents import findings_agent, strategist_agent
from agents.analyzer_agent import aeo_factors, geo_factors, score_aeo, score_geo
from models.analysis_models import (
    AEOFindings,
    AEOScore,
    AuthorCredentialFindings,
    CitationFindings,
    ContentStructureFindings,
    GEOFindings,
    GEOScore,
    HeadingStructureFindings,
    MetaTagFindings,
    SchemaMarkupFindings,
)
from models.report_models import AnalysisReport
from models.site_models import ContentSignals, StructuredDataResult

logger = logging.getLogger(__name__)


def build_aeo(domain: str, signals: ContentSignals, structured: StructuredDataResult) -> AEOScore:
    findings = AEOFindings(
        schema_markup=SchemaMarkupFindings(
            found=list(signals.schema_types),
            missing=findings_agent.build_missing_schema(signals),
            examples=findings_agent.build_schema_examples(structured.records, domain, signals.has_faq),
        ),
        meta_tags=MetaTagFindings(
            examples=findings_agent.build_meta_examples(signals.title, signals.meta_description, domain),
        ),
        heading_structure=HeadingStructureFindings(
            h1_count=len(signals.h1s),
            h2_count=len(signals.h2s),
            h3_count=len(signals.h3s),
            examples=findings_agent.build_heading_examples(signals.h1s, signals.h2s),
        ),
    )

    return AEOScore(
        score=score_aeo(signals),
        factors=aeo_factors(signals),
        findings=findings,
        strengths=strategist_agent.build_aeo_strengths(signals),
        weaknesses=strategist_agent.build_aeo_weaknesses(signals),
        opportunities=strategist_agent.build_aeo_opportunities(signals),
        threats=strategist_agent.build_aeo_threats(signals),
        actions=strategist_agent.build_aeo_actions(domain),
    )


def build_geo(domain: str, signals: ContentSignals) -> GEOScore:
    findings = GEOFindings(
        author_credentials=AuthorCredentialFindings(
            found=False,
            examples=findings_agent.build_author_examples(domain),
        ),
        citations=CitationFindings(
            external_references=signals.external_link_count,
            has_citation_section=False,
            examples=findings_agent.build_citation_examples(signals.external_link_count),
        ),
        content_structure=ContentStructureFindings(
            word_count=signals.word_count,
            has_data=signals.has_percent_data,
            has_tables=signals.has_table,
            examples=findings_agent.build_content_examples(
                signals.word_count,
                has_table=signals.has_table,
                has_percent_data=signals.has_percent_data,
            ),
        ),
    )

    return GEOScore(
        score=score_geo(signals),
        factors=geo_factors(signals),
        findings=findings,
        strengths=strategist_agent.build_geo_strengths(signals),
        weaknesses=strategist_agent.build_geo_weaknesses(signals),
        opportunities=strategist_agent.build_geo_opportunities(signals),
        threats=strategist_agent.build_geo_threats(signals),
        actions=strategist_agent.build_geo_actions(domain),
    )


def build_report(
    domain: str,
    signals: ContentSignals,
    structured: StructuredDataResult,
    crawled_at: Optional[datetime] = None,
) -> AnalysisReport:
    """
    signals と JSON-LD の読み取り結果から最終レポートを組み立てる。
    domain はテンプレート文言の埋め込みにだけ使い、スコアには影響しない。
    """
    report = AnalysisReport(
        domain=domain,
        crawled_at=crawled_at or datetime.now(timezone.utc),
        aeo=build_aeo(domain, signals, structured),
        geo=build_geo(domain, signals),
    )

    logger.info(
        "[report_agent] domain=%s aeo=%s geo=%s",
        domain,
        report.aeo.score,
        report.geo.score,
    )
    return report
