"""
House Hunters API 라우터
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from pydantic import BaseModel, Field

from househunters.domain.criteria import UnknownCriterionError
from househunters.pipeline import HouseHuntSession
from househunters.schemas.criteria import Criterion
from househunters.schemas.house import House
from househunters.schemas.results import ScoredHouse
from househunters.storage import CODECS, ImportFormatError, get_codec

router = APIRouter()

_session: HouseHuntSession | None = None


def get_session() -> HouseHuntSession:
    """싱글톤 세션 반환"""
    global _session
    if _session is None:
        _session = HouseHuntSession()
    return _session


class WeightUpdate(BaseModel):
    """가중치 변경 요청"""
    weight: float = Field(description="가중치 (화면에서는 0~3)", examples=[1.5])


class HouseRequest(BaseModel):
    """매물 추가/수정 요청"""
    title: str = Field(description="이름 또는 주소", examples=["목동 7단지 704동"])
    scores: dict[str, float] = Field(
        default_factory=dict,
        description="항목 ID별 평점 (1~5)",
        examples=[{"location": 5, "floor": 3}]
    )
    comments: Optional[str] = None


def _check_format(fmt: str) -> str:
    if fmt not in CODECS:
        raise HTTPException(status_code=400, detail=f"지원하지 않는 형식: {fmt}")
    return fmt


@router.get("/criteria", response_model=list[Criterion])
async def list_criteria(session: HouseHuntSession = Depends(get_session)):
    """평가 항목과 현재 가중치"""
    return session.criteria.criteria


@router.put("/criteria/{criterion_id}/weight", response_model=Criterion)
async def update_weight(
    criterion_id: str,
    request: WeightUpdate,
    session: HouseHuntSession = Depends(get_session),
):
    """가중치 변경"""
    try:
        session.set_weight(criterion_id, request.weight)
    except UnknownCriterionError:
        raise HTTPException(status_code=404, detail=f"알 수 없는 항목: {criterion_id}")

    return Criterion(
        id=criterion_id,
        name=session.criteria.name_of(criterion_id),
        weight=session.criteria.get_weight(criterion_id),
    )


@router.post("/criteria/reset", response_model=list[Criterion])
async def reset_weights(session: HouseHuntSession = Depends(get_session)):
    """가중치 초기화"""
    session.reset_weights()
    return session.criteria.criteria


@router.get("/houses", response_model=list[ScoredHouse])
async def list_houses(session: HouseHuntSession = Depends(get_session)):
    """점수순 매물 목록"""
    return session.ranked()


@router.post("/houses", response_model=House, status_code=201)
async def create_house(
    request: HouseRequest,
    session: HouseHuntSession = Depends(get_session),
):
    """매물 추가"""
    try:
        return session.save_house(request.title, request.scores, request.comments)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.put("/houses/{house_id}", response_model=House)
async def update_house(
    house_id: str,
    request: HouseRequest,
    session: HouseHuntSession = Depends(get_session),
):
    """매물 수정 (전체 교체)"""
    if house_id not in session.store:
        raise HTTPException(status_code=404, detail=f"매물 없음: {house_id}")
    try:
        return session.save_house(
            request.title, request.scores, request.comments, house_id=house_id
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/export")
async def export_data(
    fmt: str = "xlsx",
    session: HouseHuntSession = Depends(get_session),
):
    """현재 상태 내보내기 (파일 다운로드)"""
    codec = get_codec(_check_format(fmt))
    filename = session.export_filename(fmt)
    return Response(
        content=session.export_bytes(fmt),
        media_type=codec.media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/import")
async def import_data(
    request: Request,
    fmt: str = "xlsx",
    session: HouseHuntSession = Depends(get_session),
):
    """파일 가져오기 (요청 본문 = 파일 내용). 실패 시 기존 상태 유지"""
    _check_format(fmt)
    data = await request.body()
    try:
        imported = session.import_bytes(data, fmt)
    except ImportFormatError:
        raise HTTPException(status_code=400, detail="잘못된 파일입니다")

    return {
        "houses": len(imported.houses),
        "weights": len(imported.weights),
    }
