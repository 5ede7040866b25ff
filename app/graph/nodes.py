# app/graph/nodes.py
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from app.graph.lg_state import GraphState
from agents.parser_agent import extract_signals
from agents.report_agent import build_report
from agents.schema_agent import read_structured_data
from services.crawler import fetch_html, resolve_url
from services.html_parser import parse_html

from models.report_models import AnalysisReport
from models.site_models import ContentSignals, StructuredDataResult

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], str]


def _log_progress(state: GraphState, node: str, message: str) -> GraphState:
    """
    進捗ログを state に積むユーティリティ。
    state は dict (GraphState) として扱う。
    """
    line = f"[{node}] {message}"

    messages: List[str] = list(state.get("progress_messages", []))
    messages.append(line)

    state["progress_messages"] = messages
    state["current_node"] = node

    logger.info(line)
    return state


# ---------- Fetch ノード ----------


def fetch_node(state: GraphState, fetcher: Optional[Fetcher] = None) -> GraphState:
    """
    domain から URL を解決して HTML を取得する。
    FetchError はここでは握りつぶさず、そのまま呼び出し元へ伝播させる。
    """
    url = resolve_url(state["domain"])
    state["url"] = url
    state = _log_progress(state, "fetch", f"start: {url}")

    state["html"] = (fetcher or fetch_html)(url)

    state = _log_progress(state, "fetch", f"done: {len(state['html'])} chars")
    return state


# ---------- Parser ノード ----------


def parser_node(state: GraphState) -> GraphState:
    """HTML をパースし、JSON-LD と signals を抽出する。"""
    state = _log_progress(state, "parser", "start: parsing HTML")

    soup = parse_html(state.get("html", ""))

    structured: StructuredDataResult = read_structured_data(soup)
    signals: ContentSignals = extract_signals(soup, structured)

    state["structured_data"] = structured
    state["signals"] = signals

    # soup はこのノードの中だけで使い捨てる
    state = _log_progress(
        state,
        "parser",
        f"done: schema_types={len(signals.schema_types)} skipped={len(structured.skipped)} words={signals.word_count}",
    )
    return state


# ---------- Report ノード ----------


def report_node(state: GraphState) -> GraphState:
    """スコアと findings をまとめて AnalysisReport を作る。"""
    state = _log_progress(state, "report", "start: scoring")

    report: AnalysisReport = build_report(
        domain=state["domain"],
        signals=state["signals"],
        structured=state["structured_data"],
    )
    state["report"] = report

    state = _log_progress(state, "report", f"done: aeo={report.aeo.score} geo={report.geo.score}")
    return state
