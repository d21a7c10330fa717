"""
매물 저장소
메모리 내 매물 목록을 ID 기준으로 관리합니다.
"""

from typing import Iterable, Iterator, Optional
from loguru import logger

from househunters.domain.criteria import CriteriaSet
from househunters.domain.scoring import ScoringEngine
from househunters.schemas.house import House
from househunters.schemas.results import ScoredHouse


class HouseStore:
    """
    매물 저장소

    - upsert: 같은 ID가 있으면 통째로 교체, 없으면 추가
    - replace_all: 가져오기 시 전체 교체 (중복 ID는 마지막 값 사용)
    - 삭제 기능은 없습니다. (가져오기로만 목록이 바뀜)
    """

    def __init__(
        self,
        houses: Optional[Iterable[House]] = None,
        engine: Optional[ScoringEngine] = None,
    ):
        self._houses: dict[str, House] = {}
        self.engine = engine or ScoringEngine()
        self.logger = logger.bind(component="HouseStore")
        if houses is not None:
            self.replace_all(houses)

    def __len__(self) -> int:
        return len(self._houses)

    def __iter__(self) -> Iterator[House]:
        return iter(list(self._houses.values()))

    def __contains__(self, house_id: object) -> bool:
        return house_id in self._houses

    def get(self, house_id: str) -> Optional[House]:
        """ID로 매물 조회"""
        return self._houses.get(house_id)

    def upsert(self, house: House) -> House:
        """매물 추가 또는 교체"""
        if house.id in self._houses:
            self.logger.info(f"Updated house {house.id}")
        else:
            self.logger.info(f"Added house {house.id}")
        self._houses[house.id] = house
        return house

    def replace_all(self, houses: Iterable[House]) -> None:
        """전체 매물 교체"""
        replaced: dict[str, House] = {}
        for house in houses:
            if house.id in replaced:
                self.logger.warning(f"Duplicate house id {house.id}, keeping last")
            replaced[house.id] = house
        self._houses = replaced

    def ranked_view(self, criteria: CriteriaSet) -> list[ScoredHouse]:
        """현재 가중치 기준 순위 목록 (매번 새로 계산)"""
        return self.engine.rank(self._houses.values(), criteria)
