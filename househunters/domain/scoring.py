"""
점수화 엔진
항목별 평점과 가중치로 매물 점수(100점 만점)를 산정합니다.
"""

import math
from typing import Iterable
from loguru import logger

from househunters.config import settings
from househunters.domain.criteria import CriteriaSet
from househunters.schemas.house import House
from househunters.schemas.results import ScoreBreakdown, ScoredHouse


class ScoringEngine:
    """
    가중 평균 점수화 엔진

    점수 = sum(가중치 * 평점) / (sum(가중치) * 5) * 100
    평점이 없는 항목은 0점으로 계산되며, 가중치는 분모에 그대로 포함됩니다.
    """

    def __init__(self, max_rating: int | None = None):
        self.max_rating = max_rating or settings.MAX_RATING

    def compute_score(self, house: House, criteria: CriteriaSet) -> float:
        """
        매물 점수를 산정합니다.

        Args:
            house: 매물
            criteria: 현재 가중치가 반영된 항목 집합

        Returns:
            float: 점수 (%). 가중치 합이 0이면 0.0
        """
        weights = criteria.weights
        total_weight = math.fsum(weights.values())
        if total_weight == 0:
            return 0.0

        # 평점을 만점 대비 비율로 바꿔 합산 (모두 만점이면 정확히 100)
        actual = math.fsum(
            weight * (house.scores.get(cid, 0) / self.max_rating)
            for cid, weight in weights.items()
        )
        return (actual / total_weight) * 100

    def breakdown(self, house: House, criteria: CriteriaSet) -> list[ScoreBreakdown]:
        """항목별 가중 점수 내역"""
        result = []
        for criterion in criteria.criteria:
            rating = house.scores.get(criterion.id, 0)
            result.append(ScoreBreakdown(
                criterion_id=criterion.id,
                name=criterion.name,
                weight=criterion.weight,
                rating=rating,
                points=criterion.weight * rating,
                max_points=criterion.weight * self.max_rating,
            ))
        return result

    def rank(
        self, houses: Iterable[House], criteria: CriteriaSet
    ) -> list[ScoredHouse]:
        """
        점수 내림차순으로 순위를 매깁니다.
        동점이면 매물 ID 오름차순으로 정렬합니다.
        """
        scored = [(self.compute_score(h, criteria), h) for h in houses]
        scored.sort(key=lambda item: (-item[0], item[1].id))

        result = [
            ScoredHouse(house=house, score=score, rank=i)
            for i, (score, house) in enumerate(scored, start=1)
        ]
        logger.debug(f"Ranked {len(result)} houses")
        return result
