"""
Transit Catalogue DB - FastAPI Application

정류장 / 버스 노선 정의를 받아 노선 통계와 정류장 경유 버스를 조회
요청 한 건이 독립된 in-memory 세션 하나
"""

import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from transit_db.core.config import settings
from transit_db.core.exceptions import TransitDBException
from transit_db.api.v1.router import api_router

# 로깅 설정
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format=settings.LOG_FORMAT,
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


# FastAPI 애플리케이션 생성
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    ## 버스 노선 / 정류장 in-memory 데이터베이스

    ### 주요 기능
    - 정류장 좌표 및 도로 거리 등록
    - 왕복 / 순환 노선 등록
    - 노선 통계 (정류장 수, 고유 정류장 수, 노선 길이, 곡률)
    - 정류장 경유 버스 조회
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API 라우터 등록
app.include_router(api_router, prefix="/api/v1")


# ========== Health Check Endpoints ==========


@app.get("/health")
async def health_check():
    """헬스 체크 엔드포인트"""
    return {"status": "ok", "version": settings.VERSION}


# ========== Exception Handlers ==========


@app.exception_handler(TransitDBException)
async def transit_db_exception_handler(request: Request, exc: TransitDBException):
    """도메인 예외 => ErrorResponse 형태로 변환"""
    logger.error(f"요청 처리 실패: [{exc.code}] {exc.message}")

    return JSONResponse(
        status_code=400,
        content={"error": exc.message, "code": exc.code},
    )


# ========== Development Server ==========

if __name__ == "__main__":
    import uvicorn

    logger.info("개발 서버 시작...")

    uvicorn.run(
        "transit_db.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )
