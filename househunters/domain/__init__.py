"""
House Hunters 도메인 로직 패키지
항목 가중치, 점수화, 매물 저장소를 담당합니다.
"""

from .criteria import CriteriaSet, UnknownCriterionError, DEFAULT_CATEGORIES
from .scoring import ScoringEngine
from .store import HouseStore

__all__ = [
    "CriteriaSet",
    "UnknownCriterionError",
    "DEFAULT_CATEGORIES",
    "ScoringEngine",
    "HouseStore",
]
