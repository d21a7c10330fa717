"""
평가 항목 집합
고정된 항목 목록과 항목별 가중치를 관리합니다.
"""

from typing import Iterable, Optional
from loguru import logger

from househunters.config import settings
from househunters.schemas.criteria import Criterion


class UnknownCriterionError(Exception):
    """등록되지 않은 항목 ID 예외"""

    def __init__(self, criterion_id: str):
        self.criterion_id = criterion_id
        super().__init__(f"Unknown criterion: {criterion_id}")


# 기본 항목 (순서 고정)
DEFAULT_CATEGORIES: list[tuple[str, str]] = [
    ("location", "위치"),
    ("building", "건물"),
    ("floor", "층"),
    ("view", "전망"),
    ("proximity", "학교/상권/문화시설 접근성"),
    ("rooms", "방 개수"),
    ("roomSize", "방 크기"),
    ("livingSpace", "거실/주방 크기"),
    ("masterBedroom", "안방(부부욕실)"),
    ("elevator", "엘리베이터"),
    ("neighborhood", "동네"),
    ("buildingAge", "건물 연식"),
    ("bathrooms", "화장실/욕실 수"),
    ("neighbors", "이웃"),
    ("parking", "주차"),
    ("shelter", "대피 공간"),
    ("storage", "창고"),
    ("balcony", "발코니"),
]


class CriteriaSet:
    """
    평가 항목 집합

    항목 목록(universe)은 생성 시점에 고정되며 가중치만 바뀝니다.
    가중치 범위는 검사하지 않습니다. (입력 화면에서 0~3으로 제한)
    """

    def __init__(
        self,
        categories: Optional[Iterable[tuple[str, str]]] = None,
        default_weight: Optional[float] = None,
    ):
        """
        Args:
            categories: (항목 ID, 표시 이름) 목록. 없으면 기본 항목 사용
            default_weight: 초기 가중치. 없으면 settings.DEFAULT_WEIGHT
        """
        pairs = list(categories) if categories is not None else DEFAULT_CATEGORIES
        self._names: dict[str, str] = {}
        for criterion_id, name in pairs:
            if criterion_id in self._names:
                raise ValueError(f"Duplicate criterion id: {criterion_id}")
            self._names[criterion_id] = name

        self.default_weight = (
            settings.DEFAULT_WEIGHT if default_weight is None else default_weight
        )
        self._weights: dict[str, float] = {}
        self.logger = logger.bind(component="CriteriaSet")
        self.reset()

    @classmethod
    def from_weights(cls, weights: dict[str, float]) -> "CriteriaSet":
        """항목 ID를 표시 이름으로 사용하는 집합 생성 (테스트/스크립트용)"""
        criteria = cls(categories=[(cid, cid) for cid in weights])
        for cid, value in weights.items():
            criteria.set_weight(cid, value)
        return criteria

    @property
    def ids(self) -> list[str]:
        """항목 ID 목록 (고정 순서)"""
        return list(self._names)

    @property
    def criteria(self) -> list[Criterion]:
        """현재 가중치가 반영된 항목 목록"""
        return [
            Criterion(id=cid, name=name, weight=self._weights[cid])
            for cid, name in self._names.items()
        ]

    @property
    def weights(self) -> dict[str, float]:
        """항목별 가중치 (복사본)"""
        return dict(self._weights)

    def __contains__(self, criterion_id: object) -> bool:
        return criterion_id in self._names

    def __len__(self) -> int:
        return len(self._names)

    def name_of(self, criterion_id: str) -> str:
        """표시 이름 조회"""
        if criterion_id not in self._names:
            raise UnknownCriterionError(criterion_id)
        return self._names[criterion_id]

    def get_weight(self, criterion_id: str) -> float:
        """가중치 조회"""
        if criterion_id not in self._weights:
            raise UnknownCriterionError(criterion_id)
        return self._weights[criterion_id]

    def set_weight(self, criterion_id: str, value: float) -> None:
        """
        가중치를 변경합니다.

        Raises:
            UnknownCriterionError: 등록되지 않은 항목 ID
        """
        if criterion_id not in self._names:
            raise UnknownCriterionError(criterion_id)
        self._weights[criterion_id] = value

    def replace_weights(self, weights: dict[str, float]) -> None:
        """
        가중치 전체 교체 (가져오기용)

        등록되지 않은 항목은 무시하고, 언급되지 않은 항목은 기본값으로 돌아갑니다.
        """
        updated = {cid: self.default_weight for cid in self._names}
        for cid, value in weights.items():
            if cid in updated:
                updated[cid] = value
            else:
                self.logger.debug(f"Ignoring unknown criterion: {cid}")
        self._weights = updated

    def reset(self) -> None:
        """모든 가중치를 기본값으로 초기화"""
        self._weights = {cid: self.default_weight for cid in self._names}

    def total_weight(self) -> float:
        """가중치 합계"""
        return sum(self._weights.values())
