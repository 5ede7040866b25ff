# app/api/routes.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from app.errors import InputError
from app.graph.lg_workflow import run_workflow
from models.report_models import AnalysisReport

logger = logging.getLogger(__name__)

router = APIRouter()


# --------- Request / Response モデル ---------


class AnalyzeRequest(BaseModel):
    domain: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "ok"


# --------- エンドポイント ---------


@router.get("/health", response_model=HealthResponse)
def api_health() -> HealthResponse:
    return HealthResponse()


@router.post("/analyze", response_model=AnalysisReport)
def api_analyze(payload: AnalyzeRequest) -> AnalysisReport:
    """
    1ページ分の AEO / GEO レポートを返すメインAPI。

    1) domain → URL 解決
    2) HTML 取得
    3) パース → signals
    4) スコア + findings

    取得エラーは FetchError のまま投げ、main.py の例外ハンドラで JSON に変換する。
    """
    domain = payload.domain
    if not domain or not domain.strip():
        raise InputError()

    logger.info("[api.analyze] start domain=%s", domain)

    state = run_workflow(domain=domain)

    logger.info(
        "[api.analyze] done domain=%s nodes=%s",
        domain,
        state.get("current_node"),
    )
    return state["report"]
