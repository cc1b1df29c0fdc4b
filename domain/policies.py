# policies.py
LIMITS = {
    "free": {"daily": 5},
    "pro": {"daily": 999},  # 사실상 무제한
}

DEFAULT_CLIENT_ID = "anon"

# 응답 메시지 (확장 프로그램에 그대로 노출)
MESSAGES = {
    "quota_exceeded": "무료 사용량(하루 5회)을 초과했습니다.",
    "empty_output": "응답 생성에 실패했습니다. 잠시 후 다시 시도해 주세요.",
    "done": "생성 완료",
    "done_pro": "생성 완료(프로)",
    "server_error": "서버 오류가 발생했습니다. 잠시 후 다시 시도해 주세요.",
    "rate_limited": "요청이 너무 많습니다. 잠시 후 다시 시도해 주세요.",
}

# 내부 오류 시 고정 응답값 (확장 프로그램 호환용)
FALLBACK_USAGE = {"todayUsage": 0, "todayLimit": LIMITS["free"]["daily"], "isPro": False}
