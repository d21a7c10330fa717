"""
House Hunt Session
항목 가중치와 매물 목록을 하나의 세션으로 묶어 관리합니다.
화면(UI/API)은 이 객체를 통해서만 상태를 변경합니다.
"""

import time
from pathlib import Path
from typing import Optional, Union
from loguru import logger

from househunters.config import settings
from househunters.domain.criteria import CriteriaSet
from househunters.domain.store import HouseStore
from househunters.schemas.house import House
from househunters.schemas.results import ScoredHouse
from househunters.storage import ImportFormatError, ImportedData, codec_for_path, get_codec


class HouseHuntSession:
    """
    세션 상태 관리

    - 매물 추가/수정 (ID는 생성 시각 기반)
    - 가중치 변경/초기화
    - 내보내기/가져오기 (가져오기는 전체 교체, 실패 시 기존 상태 유지)
    """

    def __init__(
        self,
        criteria: Optional[CriteriaSet] = None,
        store: Optional[HouseStore] = None,
    ):
        self.criteria = criteria if criteria is not None else CriteriaSet()
        self.store = store if store is not None else HouseStore()
        self._last_id = 0
        self._import_seq = 0
        self.logger = logger.bind(component="Session")

    # === 매물 ===

    def new_scores(self) -> dict[str, float]:
        """새 매물 입력 폼의 기본 평점"""
        return {cid: settings.DEFAULT_RATING for cid in self.criteria.ids}

    def _generate_id(self) -> str:
        """밀리초 타임스탬프 ID (같은 밀리초에 호출되면 1씩 증가)"""
        candidate = int(time.time() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        while str(candidate) in self.store:
            candidate += 1
        self._last_id = candidate
        return str(candidate)

    def save_house(
        self,
        title: str,
        scores: dict[str, float],
        comments: Optional[str] = None,
        house_id: Optional[str] = None,
    ) -> House:
        """
        매물 추가 또는 수정

        Args:
            title: 이름 또는 주소 (필수)
            scores: 항목별 평점
            comments: 메모
            house_id: 수정할 매물 ID. 없으면 새 매물

        Raises:
            ValueError: 제목이 비어 있는 경우
        """
        if not title or not title.strip():
            raise ValueError("House title is required")

        house = House(
            id=house_id or self._generate_id(),
            title=title,
            scores=dict(scores),
            comments=comments,
        )
        return self.store.upsert(house)

    def ranked(self) -> list[ScoredHouse]:
        """현재 가중치 기준 순위 목록"""
        return self.store.ranked_view(self.criteria)

    # === 가중치 ===

    def set_weight(self, criterion_id: str, value: float) -> None:
        self.criteria.set_weight(criterion_id, value)

    def reset_weights(self) -> None:
        self.criteria.reset()
        self.logger.info("Weights reset to defaults")

    # === 내보내기 ===

    def export_bytes(self, fmt: str = "xlsx") -> bytes:
        """현재 상태를 파일 내용으로 변환"""
        return get_codec(fmt).dumps(self.criteria, self.store)

    def export_filename(self, fmt: str = "xlsx") -> str:
        """내보내기 파일 이름 (고정 이름 + 확장자)"""
        return f"{settings.EXPORT_BASE_FILENAME}{get_codec(fmt).extension}"

    def export_file(
        self,
        directory: Optional[Union[str, Path]] = None,
        fmt: str = "xlsx",
    ) -> Path:
        """현재 상태를 파일로 저장"""
        directory = Path(directory or settings.EXPORT_DIR)
        path = directory / self.export_filename(fmt)
        return get_codec(fmt).write(path, self.criteria, self.store)

    # === 가져오기 ===

    def begin_import(self) -> int:
        """가져오기 시작 (번호 발급). 나중에 시작한 가져오기가 우선합니다."""
        self._import_seq += 1
        return self._import_seq

    def apply_import(self, ticket: int, data: ImportedData) -> bool:
        """
        가져오기 결과 적용

        ticket 이후에 다른 가져오기가 시작되었으면 적용하지 않습니다.

        Returns:
            bool: 적용 여부
        """
        if ticket != self._import_seq:
            self.logger.info(f"Import #{ticket} superseded by #{self._import_seq}")
            return False

        data.apply_to(self.criteria, self.store)
        self.logger.info(
            f"Import #{ticket} applied: {len(self.store)} houses"
        )
        return True

    def import_bytes(self, data: bytes, fmt: str = "xlsx") -> ImportedData:
        """
        파일 내용을 가져와 상태를 교체합니다.

        Raises:
            ImportFormatError: 파일 오류 또는 지원하지 않는 형식 (기존 상태 유지)
        """
        ticket = self.begin_import()
        try:
            codec = get_codec(fmt)
        except ValueError as e:
            raise ImportFormatError(str(e)) from e
        imported = codec.loads(data, self.criteria)
        self.apply_import(ticket, imported)
        return imported

    def import_file(self, path: Union[str, Path]) -> ImportedData:
        """
        파일 경로에서 가져오기 (확장자로 형식 판단)

        Raises:
            ImportFormatError: 읽기 실패, 파일 오류 또는 지원하지 않는 확장자
        """
        ticket = self.begin_import()
        try:
            codec = codec_for_path(path)
        except ValueError as e:
            raise ImportFormatError(str(e)) from e
        imported = codec.read(path, self.criteria)
        self.apply_import(ticket, imported)
        return imported
