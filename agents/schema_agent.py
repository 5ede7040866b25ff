# agents/schema_agent.py

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from bs4 import BeautifulSoup

from models.site_models import SkippedBlock, StructuredDataRecord, StructuredDataResult

logger = logging.getLogger(__name__)

LD_JSON_SELECTOR = 'script[type="application/ld+json"]'


def _type_name(data: Any) -> Optional[str]:
    """"@type" が空でない文字列のときだけ type 名として採用する。"""
    if not isinstance(data, dict):
        return None
    value = data.get("@type")
    if isinstance(value, str) and value:
        # "\ud800" のような孤立サロゲートは JSON 出力できないので置換する
        return value.encode("utf-8", "replace").decode("utf-8")
    return None


def read_structured_data(soup: BeautifulSoup) -> StructuredDataResult:
    """
    ページ内の JSON-LD ブロックをすべて読み取る。

    - 文書順に json.loads を試みる
    - パースできないブロックは SkippedBlock として記録し、警告ログだけ出して続行
    - ここから例外が外に出ることはない
    """
    result = StructuredDataResult()

    for index, tag in enumerate(soup.select(LD_JSON_SELECTOR)):
        text = tag.string if tag.string is not None else tag.get_text()
        try:
            data = json.loads(text)
        except (TypeError, ValueError, RecursionError) as e:
            logger.warning("[schema_agent] Invalid schema JSON index=%s error=%s", index, e)
            result.skipped.append(SkippedBlock(index=index, reason=str(e)))
            continue

        result.records.append(StructuredDataRecord(type_name=_type_name(data), raw=data))

    logger.info(
        "[schema_agent] blocks=%s skipped=%s types=%s",
        len(result.records),
        len(result.skipped),
        result.schema_types,
    )
    return result
