# models/report_models.py

from __future__ import annotations

from datetime import datetime

from models.analysis_models import AEOScore, CamelModel, GEOScore


class AnalysisReport(CamelModel):
    """
    1リクエスト分の最終レポート。
    永続化はしないので ID は持たない。
    """

    domain: str
    crawled_at: datetime
    aeo: AEOScore
    geo: GEOScore
