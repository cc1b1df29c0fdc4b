"""
generation.py — /api/generate 처리 흐름

  사용량 게이트 → 프롬프트 조립 → LLM 호출 → output_text 추출 → 공통 응답

어떤 경우에도 예외를 밖으로 던지지 않고 GenerationResponse 하나로 돌려준다.
확장 프로그램은 HTTP 상태가 아니라 ok 필드로만 분기한다.
"""
import logging

from domain.models import GenerationRequest, GenerationResponse, Rejected
from domain.policies import MESSAGES
from prompt_management.build_prompt import build_prompt
from services.ai.output_postprocess import collect_output_text

logger = logging.getLogger(__name__)


class GenerationService:
    def __init__(self, gate, provider):
        self.gate = gate
        self.provider = provider

    async def handle(self, req: GenerationRequest, now=None) -> GenerationResponse:
        try:
            # ===== 1. 라이선스 / 일일 사용량 체크 =====
            decision = self.gate.admit(req.license_key, req.client_id, now)
            if isinstance(decision, Rejected):
                # 무료 유저: 한도 초과 시 LLM 호출 없이 바로 차단
                return GenerationResponse.failure(decision, MESSAGES["quota_exceeded"])

            # ===== 2. 프롬프트 조립 =====
            system_prompt, user_prompt = build_prompt(req.tone, req.scenario, req.customer_text)

            # ===== 3. LLM 호출 + output 파싱 =====
            response = await self.provider.generate(system_prompt, user_prompt)
            reply = collect_output_text(response)

            if not reply:
                logger.warning(
                    "[GENERATE] empty output client=%s tone=%s scenario=%s",
                    req.client_id, req.tone.value, req.scenario.value,
                )
                return GenerationResponse.failure(decision, MESSAGES["empty_output"])

            logger.info(
                "[GENERATE] ok client=%s pro=%s usage=%s/%s text_len=%s",
                req.client_id, decision.is_pro, decision.used, decision.limit, len(req.customer_text),
            )
            return GenerationResponse.success(reply, decision)

        except Exception:
            # 에러가 나도 프론트는 항상 같은 형태의 JSON을 받도록 통일
            logger.exception("[GENERATE] internal failure client=%s", req.client_id)
            return GenerationResponse.fallback()
