"""
House Hunters FastAPI 메인
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from househunters import __version__
from househunters.api.routes import router

app = FastAPI(
    title="House Hunters",
    description="가중치 기반 매물 비교 및 엑셀 내보내기/가져오기",
    version=__version__,
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root():
    """헬스 체크"""
    return {
        "name": "House Hunters",
        "status": "running",
        "version": __version__,
    }


@app.get("/health")
async def health():
    """상세 헬스 체크"""
    from househunters.api.routes import get_session

    session = get_session()

    return {
        "status": "healthy",
        "houses": len(session.store),
        "criteria": len(session.criteria),
    }
