# -------------------- 라우트 --------------------
import logging

from flask import Blueprint, current_app, g

from core.extensions import limiter
from core.http_utils import _json_envelope
from domain.models import GenerationRequest, GenerationResponse
from domain.policies import MESSAGES
from domain.schema import api_generate_schema
from security.security import require_safe_input

logger = logging.getLogger(__name__)

api_generate_bp = Blueprint("api_generate", __name__)


def _generate_rate_limit():
    return current_app.config.get("GENERATE_RATE_LIMIT") or "60/minute"


# 블루프린트 단위 IP 레이트리밋 (POST 만, preflight 제외)
limiter.limit(_generate_rate_limit, methods=["POST"])(api_generate_bp)


# JSON API: 결과와 무관하게 항상 200 + 같은 모양의 JSON
# /api/generate/generate 는 구버전 확장 프로그램 호환용
@api_generate_bp.route("/api/generate", methods=["POST"])
@api_generate_bp.route("/api/generate/", methods=["POST"])
@api_generate_bp.route("/api/generate/generate", methods=["POST"])
@require_safe_input(api_generate_schema)
async def api_generate():
    service = current_app.extensions["generation_service"]
    try:
        req = GenerationRequest.from_payload(g.safe_input)
    except Exception:
        logger.exception("[GENERATE] request normalization failed")
        return _json_envelope(GenerationResponse.fallback())

    result = await service.handle(req)
    return _json_envelope(result)


# 레이트리밋 초과 / 본문 과대 → 상태코드 대신 공통 응답
@api_generate_bp.errorhandler(429)
def _rate_limited(e):
    logger.info("[GENERATE] rate limited: %s", e)
    return _json_envelope(GenerationResponse.fallback(MESSAGES["rate_limited"]))


@api_generate_bp.errorhandler(413)
def _too_large(e):
    logger.info("[GENERATE] payload too large")
    return _json_envelope(GenerationResponse.fallback())
