"""
평가 항목 스키마
매물을 비교하는 기준 항목과 가중치를 정의합니다.
"""

from pydantic import BaseModel, Field


class Criterion(BaseModel):
    """
    평가 항목

    가중치 0은 "점수 계산에서 제외"를 의미하며 항목 자체는 유지됩니다.
    범위(0~3) 검증은 입력 화면의 책임이므로 여기서는 하지 않습니다.
    """

    id: str = Field(
        description="항목 고유 ID (내보내기 파일의 컬럼명으로 사용)",
        examples=["location"]
    )
    name: str = Field(
        description="화면 표시 이름",
        examples=["위치"]
    )
    weight: float = Field(
        default=1.0,
        description="가중치",
        examples=[1.0]
    )
