# app/graph/lg_workflow.py
from __future__ import annotations

import logging
from typing import Optional

from app.graph.lg_state import GraphState, create_initial_state
from app.graph import nodes

logger = logging.getLogger(__name__)


def run_workflow(domain: str, fetcher: Optional[nodes.Fetcher] = None) -> GraphState:
    """
    /api/analyze 用のシンプルな直列ワークフロー。

    fetch → parser → report

    fetch が FetchError を投げた場合は途中で打ち切り、レポートは作らない。
    """
    logger.info("[lg_workflow] run_workflow start domain=%s", domain)

    state = create_initial_state(domain=domain)

    # 1) ページ取得（唯一の I/O）
    state = nodes.fetch_node(state, fetcher=fetcher)

    # 2) HTML パース → signals
    state = nodes.parser_node(state)

    # 3) スコア + findings
    state = nodes.report_node(state)

    logger.info(
        "[lg_workflow] run_workflow done domain=%s current_node=%s",
        domain,
        state.get("current_node"),
    )
    return state


def analyze_html(domain: str, html: str) -> GraphState:
    """
    取得済みの HTML に対してパース以降だけを実行する。
    オフライン解析やテストで使う。
    """
    state = create_initial_state(domain=domain)
    state["html"] = html
    state = nodes.parser_node(state)
    state = nodes.report_node(state)
    return state
