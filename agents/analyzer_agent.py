# agents/analyzer_agent.py

from __future__ import annotations

from typing import List

from models.analysis_models import ScoreFactor
from models.site_models import ContentSignals

# ============================================================
# スコア用パラメータ
# ============================================================

MAX_SCORE: float = 10.0

AEO_BASE: float = 5.0
GEO_BASE: float = 4.5

# meta description がこの範囲（両端は含まない）なら加点
META_DESCRIPTION_MIN: int = 50
META_DESCRIPTION_MAX: int = 160

# GEO の word count 段階
DEEP_CONTENT_WORDS: int = 1500
LONG_FORM_WORDS: int = 2500

# 外部リンク数がこれを超えたら加点
CITATION_LINKS: int = 5

# factor ごとの重み（合計 100）
AEO_WEIGHTS = {
    "structuredData": 30,
    "schemaImplementation": 25,
    "faqOptimization": 20,
    "voiceSearchReady": 15,
    "featuredSnippetPotential": 10,
}

GEO_WEIGHTS = {
    "contentDepth": 25,
    "citability": 25,
    "authoritySignals": 20,
    "contextClarity": 15,
    "aiReadability": 15,
}


# ============================================================
# ユーティリティ
# ============================================================

def _finalize(score: float) -> float:
    """0〜10 にクランプして小数 1 桁に丸める。"""
    return round(min(max(score, 0.0), MAX_SCORE), 1)


# ============================================================
# 合成スコア
# ============================================================

def score_aeo(signals: ContentSignals) -> float:
    """
    AEO（Answer Engine Optimization）スコア。
    base 5.0 に条件ごとの加点を足していく。
    """
    score = AEO_BASE
    if signals.schema_types:
        score += 1.5
    if signals.has_faq:
        score += 1.5
    if signals.has_how_to:
        score += 1.0
    if len(signals.h1s) == 1:
        score += 0.5
    if META_DESCRIPTION_MIN < len(signals.meta_description) < META_DESCRIPTION_MAX:
        score += 0.5
    return _finalize(score)


def score_geo(signals: ContentSignals) -> float:
    """
    GEO（Generative Engine Optimization）スコア。
    word count の 2 段階は重ねて加点される。
    """
    score = GEO_BASE
    if signals.word_count > DEEP_CONTENT_WORDS:
        score += 1.5
    if signals.word_count > LONG_FORM_WORDS:
        score += 1.0
    if signals.external_link_count > CITATION_LINKS:
        score += 0.5
    return _finalize(score)


# ============================================================
# factor 内訳
# ============================================================
# 内訳は合成スコアとは独立に計算する表示用メタデータ。
# 加重平均しても score と一致するとは限らない。

def _factors(weights: dict, scores: dict) -> List[ScoreFactor]:
    return [ScoreFactor(name=name, score=scores[name], weight=w) for name, w in weights.items()]


def aeo_factors(signals: ContentSignals) -> List[ScoreFactor]:
    scores = {
        "structuredData": 7 if signals.schema_types else 3,
        "schemaImplementation": 6 if signals.meta_description else 3,
        "faqOptimization": 8 if signals.has_faq else 3,
        "voiceSearchReady": 7 if len(signals.h1s) == 1 else 4,
        "featuredSnippetPotential": 6,
    }
    return _factors(AEO_WEIGHTS, scores)


def geo_factors(signals: ContentSignals) -> List[ScoreFactor]:
    if signals.word_count > 2000:
        depth = 8
    elif signals.word_count > 1000:
        depth = 6
    else:
        depth = 4

    scores = {
        "contentDepth": depth,
        "citability": 6 if signals.external_link_count > 10 else 3,
        "authoritySignals": 5,
        "contextClarity": 5,
        "aiReadability": 6,
    }
    return _factors(GEO_WEIGHTS, scores)
