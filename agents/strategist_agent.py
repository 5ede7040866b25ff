# agents/strategist_agent.py

from __future__ import annotations

from typing import List

from models.analysis_models import Action, Opportunity, Strength, Threat, Weakness
from models.site_models import ContentSignals

# 固定カタログのテキスト生成。
# 文言は signals の真偽値で分岐するだけで、スコアには影響しない。


# ============================================================
# AEO
# ============================================================

def build_aeo_strengths(signals: ContentSignals) -> List[Strength]:
    types = list(signals.schema_types)
    h1_count = len(signals.h1s)

    return [
        Strength(
            title="Schema markup implemented" if types else "HTML structure present",
            detail=f"Found {len(types)} schema type(s): {', '.join(types)}" if types else "Basic HTML structure detected",
            code='<script type="application/ld+json">' if types else "<html> <head> <body>",
            impact="Search engines can understand content structure" if types else "Standard HTML parsing available",
        ),
        Strength(
            title="Proper H1 hierarchy" if h1_count == 1 else "Heading structure exists",
            detail=f"{h1_count} H1 tag(s) found",
            code="H1 → H2 → H3 structure",
            impact="Optimal for content extraction" if h1_count == 1 else "Basic content organization",
        ),
        Strength(
            title="Mobile-responsive design likely",
            detail="Modern HTML5 structure detected",
            code='<meta name="viewport">',
            impact="Compatible with mobile answer engines",
        ),
    ]


def build_aeo_weaknesses(signals: ContentSignals) -> List[Weakness]:
    meta = signals.meta_description
    weaknesses: List[Weakness] = []

    if not signals.has_faq:
        weaknesses.append(
            Weakness(
                title="Missing FAQ schema",
                detail="No structured Q&A markup detected",
                code="No FAQPage schema found in <head>",
                impact="Losing 60% of featured snippet opportunities for question queries",
                fix="Add FAQPage schema to all Q&A content with Question/Answer pairs",
            )
        )
    else:
        weaknesses.append(
            Weakness(
                title="FAQ coverage limited to one page",
                detail="FAQPage schema found on the analysed page only",
                code='"@type": "FAQPage"',
                impact="Other question-driven pages are not eligible for rich results",
                fix="Roll out FAQPage schema to support, pricing and product pages",
            )
        )

    weaknesses.append(
        Weakness(
            title="Meta description needs optimization" if meta else "Missing meta description",
            detail=f"Current length: {len(meta)} chars" if meta else "No meta description tag found",
            code='<meta name="description" content="...">' if meta else 'Missing: <meta name="description">',
            impact="Reduced answer extraction by search engines",
            fix="Write 120-155 character descriptions providing direct answers",
        )
    )

    weaknesses.append(
        Weakness(
            title="Missing speakable schema",
            detail="No voice assistant optimization",
            code="No speakable markup detected",
            impact="Voice assistants won't know which content to read aloud",
            fix="Add speakable schema to key content sections",
        )
    )
    return weaknesses


def build_aeo_opportunities(signals: ContentSignals) -> List[Opportunity]:
    opportunities: List[Opportunity] = [
        Opportunity(
            title="Implement comprehensive FAQ schema" if not signals.has_faq else "Expand FAQ schema coverage",
            detail="Add structured Q&A to help and support pages",
            code='"@type": "FAQPage"',
            impact="Eligible for FAQ rich results and People Also Ask boxes",
        ),
    ]

    if not signals.has_how_to:
        opportunities.append(
            Opportunity(
                title="Add HowTo schema to tutorials",
                detail="Mark up step-by-step guides with HowTo and HowToStep",
                code='"@type": "HowTo", "step": [{"@type": "HowToStep", ...}]',
                impact="Step-based answers for voice and featured snippets",
            )
        )

    opportunities.append(
        Opportunity(
            title="Target question-based queries",
            detail="Rewrite headings as the questions users actually ask",
            code="<h2>How does [topic] work?</h2>",
            impact="Higher match rate for conversational and voice queries",
        )
    )
    return opportunities


def build_aeo_threats(signals: ContentSignals) -> List[Threat]:
    return [
        Threat(
            title="Competitors capturing featured snippets",
            detail=(
                "Competing pages with FAQ markup are preferred for question queries"
                if not signals.has_faq
                else "Competitors may expand FAQ coverage faster"
            ),
            impact="Loss of position-zero visibility",
            mitigation="Audit top question queries and publish concise answers",
        ),
        Threat(
            title="Zero-click search growth",
            detail="Answer engines increasingly resolve queries on the results page",
            impact="Fewer click-throughs even when ranking well",
            mitigation="Brand answers clearly so attribution drives recall",
        ),
        Threat(
            title="Voice assistant answer consolidation",
            detail="Voice assistants read out a single answer per query",
            impact="Only the top extracted answer receives traffic",
            mitigation="Keep answers under 40 words directly below question headings",
        ),
    ]


def build_aeo_actions(domain: str) -> List[Action]:
    return [
        Action(
            priority="High",
            title="Add FAQPage schema",
            detail=f"Publish FAQ markup on the main help pages of {domain}",
            code='<script type="application/ld+json">{"@type": "FAQPage", ...}</script>',
            effort="Low",
            impact="High",
        ),
        Action(
            priority="High",
            title="Rewrite meta descriptions as direct answers",
            detail=f"Give every key page on {domain} a 120-155 character answer-first description",
            code='<meta name="description" content="[Direct answer]. [Benefit].">',
            effort="Low",
            impact="Medium",
        ),
        Action(
            priority="Medium",
            title="Convert headings to questions",
            detail="Phrase H1/H2 headings as the queries users type or speak",
            code="<h1>What is [topic]?</h1>",
            effort="Medium",
            impact="Medium",
        ),
        Action(
            priority="Medium",
            title="Add speakable markup",
            detail=f"Mark the summary sections of {domain} with speakable schema",
            code='"speakable": {"@type": "SpeakableSpecification", "cssSelector": [".summary"]}',
            effort="Medium",
            impact="Medium",
        ),
    ]


# ============================================================
# GEO
# ============================================================

def build_geo_strengths(signals: ContentSignals) -> List[Strength]:
    words = signals.word_count
    links = signals.external_link_count

    strengths: List[Strength] = [
        Strength(
            title="Substantial content depth" if words > 1500 else "Content present",
            detail=f"{words} words of content",
            code="<article>...</article>",
            impact=(
                "Enough context for AI engines to summarise accurately"
                if words > 1500
                else "Basic content available for AI summarisation"
            ),
        ),
        Strength(
            title="External references present" if links > 5 else "Link structure exists",
            detail=f"{links} external link(s) found",
            code='<a href="https://...">',
            impact="Supports credibility with cited sources" if links > 5 else "Basic link context available",
        ),
    ]

    if signals.has_percent_data or signals.has_table:
        strengths.append(
            Strength(
                title="Data-driven content",
                detail="Statistics or tabular data detected",
                code="<table> / 42%",
                impact="Quantified facts are easy for AI engines to quote",
            )
        )
    return strengths


def build_geo_weaknesses(signals: ContentSignals) -> List[Weakness]:
    weaknesses: List[Weakness] = [
        Weakness(
            title="No author credentials",
            detail="No author schema or byline detected",
            code='No "@type": "Person" author markup found',
            impact="AI engines weigh expertise signals when choosing sources",
            fix="Add author bylines, bios and Person schema",
        ),
        Weakness(
            title="Missing citation section",
            detail="No dedicated references or sources section",
            code='No <section id="sources"> found',
            impact="Claims are harder to verify and less likely to be cited",
            fix="Add a sources section linking to primary research",
        ),
    ]

    if signals.word_count <= 1500:
        weaknesses.append(
            Weakness(
                title="Limited content depth",
                detail=f"Only {signals.word_count} words on page",
                code="Word count below 1500",
                impact="Thin pages are rarely used as generative answer sources",
                fix="Expand with definitions, examples and FAQs",
            )
        )
    return weaknesses


def build_geo_opportunities(signals: ContentSignals) -> List[Opportunity]:
    opportunities: List[Opportunity] = [
        Opportunity(
            title="Publish original research",
            detail="Share proprietary data, surveys or benchmarks",
            code="<figure><table>...</table><figcaption>Source: ...</figcaption></figure>",
            impact="Original statistics are frequently cited by AI summarizers",
        ),
        Opportunity(
            title="Build topical authority clusters",
            detail="Link pillar pages to detailed supporting articles",
            code='<a href="/guide/[subtopic]">',
            impact="Clear topical context improves AI understanding",
        ),
    ]

    if not signals.has_article:
        opportunities.append(
            Opportunity(
                title="Add Article schema",
                detail="Mark up editorial content with Article or BlogPosting",
                code='"@type": "Article", "author": {...}, "datePublished": "..."',
                impact="Publication dates and authorship become machine-readable",
            )
        )
    return opportunities


def build_geo_threats(signals: ContentSignals) -> List[Threat]:
    return [
        Threat(
            title="AI summaries without attribution",
            detail="Generative engines may paraphrase content without linking",
            impact="Traffic loss from AI overviews",
            mitigation="Include unique data and quotable statements tied to your brand",
        ),
        Threat(
            title="Authoritative competitors preferred",
            detail=(
                "Sources with stronger citations and authorship are favoured"
                if signals.external_link_count <= 5
                else "Competitors with author credentials may outrank cited content"
            ),
            impact="Lower inclusion rate in generated answers",
            mitigation="Strengthen E-E-A-T signals across the site",
        ),
    ]


def build_geo_actions(domain: str) -> List[Action]:
    return [
        Action(
            priority="High",
            title="Add author bios with credentials",
            detail=f"Attribute every article on {domain} to a named expert",
            code='"author": {"@type": "Person", "name": "[Name]", "jobTitle": "[Role]"}',
            effort="Low",
            impact="High",
        ),
        Action(
            priority="High",
            title="Cite authoritative sources",
            detail="Link claims to studies, official statistics and primary data",
            code='<a href="https://[source]" rel="noopener">[Study name]</a>',
            effort="Medium",
            impact="High",
        ),
        Action(
            priority="Medium",
            title="Add statistics and comparison tables",
            detail=f"Quantify key claims on {domain} and present them in tables",
            code="<table>...</table>",
            effort="Medium",
            impact="Medium",
        ),
        Action(
            priority="Medium",
            title="Add summary sections",
            detail="Open long pages with a TL;DR that answers the main question",
            code='<section class="summary"><p>[2-3 sentence answer]</p></section>',
            effort="Low",
            impact="Medium",
        ),
    ]
