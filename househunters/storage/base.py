"""
Codec 기본 클래스
모든 내보내기/가져오기 형식이 상속받는 추상 기본 클래스입니다.
"""

import math
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, Optional, Union
from loguru import logger
from pydantic import BaseModel, Field

from househunters.domain.criteria import CriteriaSet
from househunters.domain.store import HouseStore
from househunters.schemas.house import House


class ImportFormatError(Exception):
    """가져오기 파일 형식 오류 (읽기 실패, 시트 누락, 파일 손상)"""
    pass


class ImportedData(BaseModel):
    """
    가져오기 결과

    파일을 끝까지 읽은 뒤에만 만들어지며,
    세션은 이 값으로 가중치와 매물 목록을 한 번에 교체합니다.
    """
    weights: dict[str, float] = Field(
        default_factory=dict,
        description="항목 ID별 가중치 (등록된 항목만)"
    )
    houses: list[House] = Field(
        default_factory=list,
        description="매물 목록 (파일 순서)"
    )

    def apply_to(self, criteria: CriteriaSet, store: HouseStore) -> None:
        """가중치와 매물 목록 전체 교체"""
        criteria.replace_weights(self.weights)
        store.replace_all(self.houses)


def to_number(value: Any) -> Optional[float]:
    """숫자 변환. 비어 있거나 숫자가 아니면 None"""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def parse_score(value: Any) -> float:
    """평점 셀 변환. 비어 있거나 숫자가 아니면 0"""
    number = to_number(value)
    return 0.0 if number is None else number


def to_text(value: Any) -> Optional[str]:
    """
    텍스트 셀 변환

    엑셀에서 숫자로 저장된 ID(예: 1718000000000.0)는 정수 문자열로 되돌립니다.
    """
    if value is None or (isinstance(value, str) and value == ""):
        return None
    if isinstance(value, float):
        if math.isnan(value):
            return None
        if value.is_integer():
            return str(int(value))
    return str(value)


class BaseCodec(ABC):
    """
    Codec 기본 클래스

    - dumps: 현재 상태를 파일 내용(bytes)으로 변환
    - loads: 파일 내용을 ImportedData로 변환 (상태는 건드리지 않음)
    구조적 오류는 모두 ImportFormatError 하나로 전달됩니다.
    """

    name: str = "base"
    extension: str = ""
    media_type: str = "application/octet-stream"

    def __init__(self):
        self.logger = logger.bind(codec=self.name)

    @abstractmethod
    def dumps(self, criteria: CriteriaSet, houses: Iterable[House]) -> bytes:
        """상태를 파일 내용으로 변환"""
        pass

    @abstractmethod
    def _parse(self, data: bytes, criteria: CriteriaSet) -> ImportedData:
        """
        실제 파싱 로직 (서브클래스에서 구현)
        """
        pass

    def loads(self, data: bytes, criteria: CriteriaSet) -> ImportedData:
        """
        파일 내용을 읽습니다.

        Raises:
            ImportFormatError: 파일 손상 또는 필수 시트/키 누락
        """
        try:
            result = self._parse(data, criteria)
        except ImportFormatError as e:
            self.logger.error(f"{self.name} import failed: {e}")
            raise
        except Exception as e:
            self.logger.error(f"{self.name} import failed: {e}")
            raise ImportFormatError(f"Invalid {self.name} file: {e}") from e

        self.logger.info(
            f"Imported {len(result.houses)} houses, {len(result.weights)} weights"
        )
        return result

    def write(
        self,
        path: Union[str, Path],
        criteria: CriteriaSet,
        houses: Iterable[House],
    ) -> Path:
        """파일로 저장"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.dumps(criteria, houses))
        self.logger.info(f"Exported to {path}")
        return path

    def read(self, path: Union[str, Path], criteria: CriteriaSet) -> ImportedData:
        """파일에서 읽기"""
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            self.logger.error(f"Cannot read {path}: {e}")
            raise ImportFormatError(f"Cannot read file: {path}") from e
        return self.loads(data, criteria)
