import os
from dotenv import load_dotenv

load_dotenv()  # 환경변수 읽어오기


class Settings:
    PROJECT_NAME: str = "Transit Catalogue DB"
    VERSION: str = "1.0.0"

    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", 8001))

    # stdin 입력 기본 프로토콜 => text | json
    DEFAULT_PROTOCOL: str = os.getenv("DEFAULT_PROTOCOL", "text").lower()

    # curvature 출력 유효숫자 (원본 출력과 동일하게 6자리)
    CURVATURE_PRECISION: int = int(os.getenv("CURVATURE_PRECISION", 6))

    # CORS 설정
    ALLOWED_ORIGINS: list[str] = os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000",
    ).split(",")

    @property
    def LOG_FORMAT(self) -> str:
        return "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


settings = Settings()  # 모듈화


SUPPORTED_PROTOCOLS = ("text", "json")

# 응답에 사용하는 에러 메시지
NOT_FOUND_MESSAGE = "not found"
MISSING_DISTANCE_MESSAGE = "missing distance"
UNDEFINED_STOP_MESSAGE = "undefined stop"
DEGENERATE_CURVATURE_MESSAGE = "degenerate curvature"
