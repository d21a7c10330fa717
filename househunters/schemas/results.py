"""
결과 스키마
점수 계산과 순위 결과를 정의합니다.
"""

from pydantic import BaseModel, Field

from .house import House


class ScoreBreakdown(BaseModel):
    """항목별 점수 상세 내역"""
    criterion_id: str = Field(description="항목 ID")
    name: str = Field(description="항목 이름")
    weight: float = Field(description="적용된 가중치")
    rating: float = Field(description="매물 평점 (없으면 0)")
    points: float = Field(description="가중 점수 (weight * rating)")
    max_points: float = Field(description="가중 만점 (weight * 5)")


class ScoredHouse(BaseModel):
    """
    순위가 매겨진 매물
    현재 가중치 기준의 점수(100점 만점)와 순위를 포함합니다.
    """
    house: House
    score: float = Field(description="총점 (%)")
    rank: int = Field(description="순위 (1부터)", ge=1)
