"""FastAPI 애플리케이션 메인"""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from ..audit import AuditMiddleware
from ..core import get_default_catalog
from ..database import init_db
from .routers import rules, companies, assessments

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    # 시작 시 데이터베이스 초기화 및 규칙 카탈로그 로드
    init_db()
    catalog = get_default_catalog()
    logger.info("규칙 카탈로그 로드: %s", catalog)
    yield


# FastAPI 앱 생성
app = FastAPI(
    title="조특법 세액공제 자동 판정 API",
    description="조세특례제한법 기반 세액공제·감면 적용 여부 및 공제액 판정",
    version="0.1.0",
    lifespan=lifespan
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 프로덕션에서는 특정 도메인만 허용
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(AuditMiddleware)

# 라우터 등록
app.include_router(
    rules.router,
    prefix="/api/rules",
    tags=["세액공제규칙"]
)

app.include_router(
    companies.router,
    prefix="/api/companies",
    tags=["사업자"]
)

app.include_router(
    assessments.router,
    prefix="/api",
    tags=["판정"]
)


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": "조특법 세액공제 자동 판정 API",
        "version": "0.1.0",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """헬스체크 엔드포인트"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000"))
    )
