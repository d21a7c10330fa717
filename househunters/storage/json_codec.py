"""
JSON Codec
{"weights": {...}, "houses": [...]} 형식의 데이터 파일을 읽고 씁니다.
"""

import json
from typing import Iterable

from househunters.domain.criteria import CriteriaSet
from househunters.schemas.house import House
from .base import BaseCodec, ImportFormatError, ImportedData, parse_score, to_number, to_text


class JsonCodec(BaseCodec):
    """JSON 내보내기/가져오기 (엑셀과 같은 가져오기 규칙 적용)"""

    name = "json"
    extension = ".json"
    media_type = "application/json"

    def dumps(self, criteria: CriteriaSet, houses: Iterable[House]) -> bytes:
        data = {
            "weights": criteria.weights,
            "houses": [h.model_dump() for h in houses],
        }
        return json.dumps(data, ensure_ascii=False, indent=2).encode("utf-8")

    def _parse(self, data: bytes, criteria: CriteriaSet) -> ImportedData:
        payload = json.loads(data.decode("utf-8"))

        if not isinstance(payload, dict):
            raise ImportFormatError("JSON root must be an object")
        if not isinstance(payload.get("weights"), dict):
            raise ImportFormatError("Missing 'weights' object")
        if not isinstance(payload.get("houses"), list):
            raise ImportFormatError("Missing 'houses' list")

        weights = {}
        for cid, value in payload["weights"].items():
            weight = to_number(value)
            if weight is not None and cid in criteria:
                weights[cid] = weight

        houses = []
        for i, item in enumerate(payload["houses"]):
            house_id = to_text(item.get("id")) if isinstance(item, dict) else None
            if house_id is None:
                self.logger.warning(f"houses[{i}]: missing id, skipped")
                continue

            raw_scores = item.get("scores")
            if not isinstance(raw_scores, dict):
                raw_scores = {}

            houses.append(House(
                id=house_id,
                title=to_text(item.get("title")) or "",
                scores={cid: parse_score(raw_scores.get(cid)) for cid in criteria.ids},
                comments=to_text(item.get("comments")) or None,
            ))

        return ImportedData(weights=weights, houses=houses)
