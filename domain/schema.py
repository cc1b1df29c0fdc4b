from domain.models import Scenario, Tone

# ===== 입력 검증: 허용 값(enum) =====
TONE_ALLOW = [t.value for t in Tone]
SCENARIO_ALLOW = [s.value for s in Scenario]

# ===== JSON API( /api/generate ) POST 스키마 =====
# 모든 필드 선택. 필드 단위로 검사해서 실패한 값은 버리고 기본값을 쓴다.
api_generate_schema = {
    "type": "object",
    "properties": {
        "licenseKey": {"type": "string", "maxLength": 200},
        "tone": {"type": "string", "enum": TONE_ALLOW},
        "scenario": {"type": "string", "enum": SCENARIO_ALLOW},
        "clipboardText": {"type": "string"},
        "clientId": {"type": "string", "minLength": 1},
    },
    "additionalProperties": True,
}
