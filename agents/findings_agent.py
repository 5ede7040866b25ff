# agents/findings_agent.py

from __future__ import annotations

import json
from typing import List, Sequence

from models.analysis_models import (
    FindingExample,
    HeadingExample,
    MetaExample,
    SchemaExample,
)
from models.site_models import ContentSignals, StructuredDataRecord

# ============================================================
# しきい値
# ============================================================

TITLE_MIN_LEN: int = 30
TITLE_MAX_LEN: int = 60
META_MIN_LEN: int = 50

# 見つかった JSON-LD をプレビューするときの最大文字数
SCHEMA_PREVIEW_CHARS: int = 300

# 常に「追加候補」として挙げる schema type
ALWAYS_SUGGESTED_SCHEMAS = ["BreadcrumbList", "VideoObject", "Product"]

FAQ_SCHEMA_TEMPLATE = """<script type="application/ld+json">
{{
  "@context": "https://schema.org",
  "@type": "FAQPage",
  "mainEntity": [{{
    "@type": "Question",
    "name": "What is {domain}?",
    "acceptedAnswer": {{
      "@type": "Answer",
      "text": "Direct answer here"
    }}
  }}]
}}
</script>"""

AUTHOR_SCHEMA_TEMPLATE = """<script type="application/ld+json">
{{
  "@context": "https://schema.org",
  "@type": "Person",
  "name": "[Author Name]",
  "jobTitle": "[Role]",
  "worksFor": {{ "@type": "Organization", "name": "{domain}" }},
  "sameAs": ["https://www.linkedin.com/in/[author]"]
}}
</script>"""


# ============================================================
# AEO: schema
# ============================================================

def build_missing_schema(signals: ContentSignals) -> List[str]:
    """まだページに無い（追加を推奨する）schema type の一覧。"""
    missing: List[str] = []
    if not signals.has_faq:
        missing.extend(["FAQ", "Question"])
    if not signals.has_how_to:
        missing.append("HowTo")
    if not signals.has_article:
        missing.extend(["Article", "BlogPosting"])
    missing.extend(ALWAYS_SUGGESTED_SCHEMAS)
    return missing


def _preview(raw: object) -> str:
    text = json.dumps(raw, indent=2)
    return text[:SCHEMA_PREVIEW_CHARS] + "..."


def build_schema_examples(
    records: Sequence[StructuredDataRecord],
    domain: str,
    has_faq: bool,
) -> List[SchemaExample]:
    """
    - 最初に見つかった JSON-LD のプレビュー
    - FAQ が無い場合は FAQPage のテンプレート（domain 埋め込み）
    """
    examples: List[SchemaExample] = []

    if records:
        first = records[0]
        examples.append(
            SchemaExample(
                type=f"Schema Found: {first.type_name or 'Unknown'}",
                location="<head> section",
                code=_preview(first.raw),
                issue="Only basic schema - expand coverage" if len(records) == 1 else "Multiple schemas found",
            )
        )

    if not has_faq:
        examples.append(
            SchemaExample(
                type="Missing FAQ Schema",
                location="FAQ/Help pages",
                code=None,
                recommendation=FAQ_SCHEMA_TEMPLATE.format(domain=domain),
                issue="No FAQ schema detected - missing featured snippet opportunities",
            )
        )

    return examples


# ============================================================
# AEO: meta / heading
# ============================================================

def _title_issue(title: str) -> str:
    if not title:
        return "Missing title"
    if len(title) < TITLE_MIN_LEN:
        return "Too short"
    if len(title) > TITLE_MAX_LEN:
        return "Too long"
    return "Could be more specific"


def _meta_issue(meta_description: str) -> str:
    if not meta_description:
        return "Missing meta description"
    if len(meta_description) < META_MIN_LEN:
        return "Too short"
    return "Optimize for direct answers"


def build_meta_examples(title: str, meta_description: str, domain: str) -> List[MetaExample]:
    return [
        MetaExample(
            type="Title Tag Analysis",
            current=f"<title>{title or 'No title'}</title>",
            issue=_title_issue(title),
            recommendation=f"<title>How to [Solve Problem] | {domain} - Expert Guide</title>",
            impact="Title should directly answer user intent",
        ),
        MetaExample(
            type="Meta Description",
            current=f'<meta name="description" content="{meta_description or "Missing"}">',
            issue=_meta_issue(meta_description),
            recommendation=(
                '<meta name="description" content="Learn how to [topic] with our step-by-step guide. '
                'Includes [benefit 1], [benefit 2], and expert tips. Get started now.">'
            ),
            impact="Direct answers improve featured snippet chances",
        ),
    ]


def build_heading_examples(h1s: Sequence[str], h2s: Sequence[str]) -> List[HeadingExample]:
    """先頭の H1 が質問形式か、先頭の H2 が汎用的すぎないかを見る。"""
    examples: List[HeadingExample] = []

    if h1s:
        h1 = h1s[0]
        is_question = "?" in h1
        examples.append(
            HeadingExample(
                tag="H1",
                text=h1,
                issue="Good - question format ✓" if is_question else "Not in question format",
                recommendation=(
                    "Maintain question format"
                    if is_question
                    else f'Change to: "How Does {h1} Work?" or "What is {h1}?"'
                ),
            )
        )

    if h2s:
        examples.append(
            HeadingExample(
                tag="H2",
                text=h2s[0],
                issue="Generic heading",
                recommendation='Make it specific: "Why [Benefit]?" or "How to [Action]?"',
            )
        )

    return examples


# ============================================================
# GEO findings
# ============================================================

def build_author_examples(domain: str) -> List[FindingExample]:
    return [
        FindingExample(
            type="Missing Author Schema",
            detail="No author attribution found for content",
            code=None,
            issue="AI summarizers favour content with verifiable authorship",
            recommendation=AUTHOR_SCHEMA_TEMPLATE.format(domain=domain),
        ),
        FindingExample(
            type="Author Bio Section",
            detail="Add a visible byline and short bio to every article",
            code='<div class="author-bio">Written by [Name], [Credentials]</div>',
            recommendation="Link the bio to an author page listing qualifications",
        ),
    ]


def build_citation_examples(external_links: int = 0) -> List[FindingExample]:
    examples = [
        FindingExample(
            type="External References",
            detail=f"{external_links} external link(s) found",
            code=None,
            issue=(
                "Few outbound references to authoritative sources"
                if external_links <= 5
                else "References present - make them explicit citations"
            ),
            recommendation="Cite primary sources (studies, official data) inline",
        ),
        FindingExample(
            type="Missing Citation Section",
            detail="No dedicated sources or references section detected",
            code='<section id="sources"><h2>Sources</h2><ol><li><a href="...">...</a></li></ol></section>',
            recommendation="Add a numbered Sources section at the end of long-form content",
        ),
    ]
    return examples


def build_content_examples(
    word_count: int,
    has_table: bool = False,
    has_percent_data: bool = False,
) -> List[FindingExample]:
    if word_count > 2000:
        depth_issue = "Comprehensive depth - keep content updated"
    elif word_count > 1000:
        depth_issue = "Moderate depth - expand key sections"
    else:
        depth_issue = "Thin content - AI engines prefer in-depth coverage"

    examples = [
        FindingExample(
            type="Content Depth",
            detail=f"{word_count} words on page",
            issue=depth_issue,
            recommendation="Aim for 1500-2500 words on core topic pages",
        ),
    ]

    if not has_percent_data:
        examples.append(
            FindingExample(
                type="Missing Statistics",
                detail="No percentage-based data points detected",
                issue="Quantified claims are more likely to be quoted by AI summaries",
                recommendation="Add concrete statistics, e.g. \"73% of users ...\" with a source",
            )
        )

    if not has_table:
        examples.append(
            FindingExample(
                type="Missing Data Tables",
                detail="No <table> elements found",
                code="<table><thead><tr><th>Option</th><th>Cost</th></tr></thead>...</table>",
                recommendation="Use comparison tables for structured facts",
            )
        )

    return examples
