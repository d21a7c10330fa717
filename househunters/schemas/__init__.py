"""
House Hunters 스키마 패키지
항목, 매물, 점수 결과 모델을 정의합니다.
"""

from .criteria import Criterion
from .house import House
from .results import ScoreBreakdown, ScoredHouse

__all__ = [
    "Criterion",
    "House",
    "ScoreBreakdown",
    "ScoredHouse",
]
