"""
매물(집) 스키마
사용자가 직접 평가한 후보 매물입니다.
"""

from typing import Optional
from pydantic import BaseModel, Field


class House(BaseModel):
    """
    후보 매물

    scores는 일부 항목이 빠져 있을 수 있습니다.
    빠진 항목은 점수 계산 시 0점으로 취급됩니다.
    """

    id: str = Field(
        description="매물 고유 ID (생성 후 변경 불가)",
        examples=["1718000000000"]
    )
    title: str = Field(
        default="",
        description="이름 또는 주소",
        examples=["목동 7단지 704동"]
    )
    scores: dict[str, float] = Field(
        default_factory=dict,
        description="항목 ID별 평점 (1~5)",
        examples=[{"location": 5, "floor": 3}]
    )
    comments: Optional[str] = Field(
        default=None,
        description="추가 메모"
    )
