import os
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from job_portal.config import settings
from job_portal.database.mongo import init_mongo, close_mongo
from job_portal.routers import jobs, apply, notifications
from job_portal.utils.exceptions import AppException, create_error_response
from job_portal.utils.logger import app_logger

# 앱 시작 시 MongoDB(Beanie) 초기화, 종료 시 연결 정리
@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_mongo()
    app_logger.info(f"Server is running on port {settings.PORT}")
    yield
    await close_mongo()

# FastAPI 앱 생성
app = FastAPI(
    title="Job Portal API",
    lifespan=lifespan
)

@app.get("/", response_class=PlainTextResponse)
async def root():
    """서버 상태 확인용 루트 경로"""
    return "Job Portal server is running"

# CORS 설정 (기본 전체 허용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.status_code, exc.detail, exc.error_code),
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    app_logger.warning(f"요청 검증 실패: {request.url.path}")
    return JSONResponse(
        status_code=422,
        content=create_error_response(422, "Invalid request", "VALIDATION_ERROR"),
    )

# 업로드 파일 정적 서빙
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

# 라우터 등록
app.include_router(jobs.router)
app.include_router(apply.router)
app.include_router(notifications.router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "job_portal.main:app",
        host=settings.HOST,
        port=settings.PORT,
    )
