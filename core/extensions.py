# extensions.py
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from auth.quota import EntitlementGate, InMemoryUsageStore
from services.ai.openai_service import OpenAIResponsesProvider
from services.generation import GenerationService

# limiter는 객체만 만들고, 실제 설정(storage/enabled)은 app.config에서 가져오도록
limiter = Limiter(key_func=get_remote_address)

cors = CORS()


def init_extensions(app, *, provider=None, usage_store=None):
    cfg = app.config

    # 레이트리밋 초기화
    limiter.init_app(app)

    # CORS: /api/*만 허용 (확장 프로그램 호출용)
    cors.init_app(
        app,
        resources={
            r"/api/*": {
                "origins": cfg.get("CORS_ORIGINS") or ["*"],
                "methods": ["POST", "OPTIONS"],
                "allow_headers": ["Content-Type"],
                # origins 에 "*" 가 있으면 요청 Origin 을 되돌려주지 않고 "*" 로 응답
                "send_wildcard": "*" in (cfg.get("CORS_ORIGINS") or ["*"]),
            }
        },
    )

    # 사용량 카운터는 앱 단위로 소유 (테스트마다 새 인스턴스)
    store = usage_store if usage_store is not None else InMemoryUsageStore()
    gate = EntitlementGate(
        store,
        cfg.get("PRO_LICENSE_KEY"),
        free_limit=cfg.get("FREE_DAILY_LIMIT"),
        pro_limit=cfg.get("PRO_DAILY_LIMIT"),
    )
    provider = provider if provider is not None else OpenAIResponsesProvider.from_config(cfg)

    app.extensions["usage_store"] = store
    app.extensions["entitlement_gate"] = gate
    app.extensions["generation_service"] = GenerationService(gate, provider)
