import os
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()

class Settings(BaseSettings):
    # MongoDB 설정 (채용공고/지원서/알림 저장)
    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "jobPortalDB")
    # 스토리지 호출 타임아웃 (ms)
    MONGO_TIMEOUT_MS: int = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

    # 서버 설정
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "5000"))

    # 로그 레벨 (DEBUG/INFO/WARNING/ERROR)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # 업로드 파일 저장 경로 (/uploads 로 정적 서빙)
    UPLOAD_DIR: str = os.getenv("UPLOAD_DIR", "uploads")

    # CORS 설정 (기본: 전체 허용)
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")  # 쉼표 구분

settings = Settings()
