import os

from domain.policies import LIMITS


def _csv(v: str):
    return [x.strip() for x in (v or "").split(",") if x.strip()]


def _env_bool(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    try:
        return int(v.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    try:
        return float(v.strip())
    except ValueError:
        return default


class Config:
    SERVICE_NAME = os.getenv("SERVICE_NAME", "auto-cs-backend")
    PORT = _env_int("PORT", 3000)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # 요청 본문 1MB 제한
    MAX_CONTENT_LENGTH = _env_int("MAX_CONTENT_LENGTH", 1024 * 1024)

    # -------------------------
    # OpenAI (Responses API)
    # -------------------------
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-5-mini")
    OPENAI_TIMEOUT = _env_float("OPENAI_TIMEOUT", 60.0)
    OPENAI_MAX_RETRIES = _env_int("OPENAI_MAX_RETRIES", 2)

    # -------------------------
    # 라이선스 / 일일 한도
    # -------------------------
    PRO_LICENSE_KEY = os.getenv("PRO_LICENSE_KEY", "GOOD_SELLER_2025")
    FREE_DAILY_LIMIT = _env_int("FREE_DAILY_LIMIT", LIMITS["free"]["daily"])
    PRO_DAILY_LIMIT = _env_int("PRO_DAILY_LIMIT", LIMITS["pro"]["daily"])

    # -------------------------
    # CORS (확장 프로그램 호출용, 기본 전체 허용)
    # -------------------------
    CORS_ORIGINS = _csv(os.getenv("CORS_ORIGINS", "*")) or ["*"]

    # -------------------------
    # Rate limiting (Flask-Limiter 표준 키)
    # -------------------------
    REDIS_URL = os.getenv("REDIS_URL", "")
    RATELIMIT_ENABLED = _env_bool("RATELIMIT_ENABLED", default=True)
    RATELIMIT_STORAGE_URI = REDIS_URL if REDIS_URL else "memory://"
    GENERATE_RATE_LIMIT = os.getenv("GENERATE_RATE_LIMIT", "60/minute")
