# domain/models.py
from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Optional

from domain.policies import DEFAULT_CLIENT_ID, FALLBACK_USAGE, MESSAGES


class _ParsableEnum(str, Enum):
    """문자열 enum. 알 수 없는 값은 예외 대신 기본값으로 정규화한다."""

    @classmethod
    def default(cls):
        raise NotImplementedError

    @classmethod
    def parse(cls, value: Any):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        return cls.default()


class Tone(_ParsableEnum):
    FRIENDLY = "friendly"
    BUSINESS = "business"
    PRINCIPLE = "principle"

    @classmethod
    def default(cls):
        return cls.FRIENDLY


class Scenario(_ParsableEnum):
    GENERAL = "general"
    CLAIM = "claim"
    REVIEW = "review"

    @classmethod
    def default(cls):
        return cls.GENERAL


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class GenerationRequest:
    tone: Tone = Tone.FRIENDLY
    scenario: Scenario = Scenario.GENERAL
    customer_text: str = ""
    client_id: str = DEFAULT_CLIENT_ID
    license_key: str = ""

    @classmethod
    def from_payload(cls, payload: Optional[dict]) -> "GenerationRequest":
        """확장 프로그램 JSON(camelCase) → 정규화된 요청. 잘못된 값은 기본값으로."""
        data = payload if isinstance(payload, dict) else {}
        return cls(
            tone=Tone.parse(data.get("tone")),
            scenario=Scenario.parse(data.get("scenario")),
            customer_text=_as_str(data.get("clipboardText")).strip(),
            client_id=_as_str(data.get("clientId")) or DEFAULT_CLIENT_ID,
            license_key=_as_str(data.get("licenseKey")),
        )


@dataclass(frozen=True)
class Entitlement:
    is_pro: bool
    daily_limit: int


@dataclass(frozen=True)
class Admitted:
    used: int  # 증가 이후 값
    limit: int
    is_pro: bool


@dataclass(frozen=True)
class Rejected:
    used: int
    limit: int
    is_pro: bool


@dataclass(frozen=True)
class GenerationResponse:
    ok: bool
    reply: str
    todayUsage: int
    todayLimit: int
    isPro: bool
    message: str

    def __post_init__(self):
        if not self.ok and self.reply:
            raise ValueError("failed response must not carry a reply")

    def to_dict(self) -> dict:
        return asdict(self)

    # -------------------- 생성 헬퍼 --------------------
    @classmethod
    def success(cls, reply: str, decision: Admitted) -> "GenerationResponse":
        return cls(
            ok=True,
            reply=reply,
            todayUsage=decision.used,
            todayLimit=decision.limit,
            isPro=decision.is_pro,
            message=MESSAGES["done_pro"] if decision.is_pro else MESSAGES["done"],
        )

    @classmethod
    def failure(cls, decision, message: str) -> "GenerationResponse":
        return cls(
            ok=False,
            reply="",
            todayUsage=decision.used,
            todayLimit=decision.limit,
            isPro=decision.is_pro,
            message=message,
        )

    @classmethod
    def fallback(cls, message: Optional[str] = None) -> "GenerationResponse":
        # 실제 사용량/티어를 알 수 없을 때의 고정 응답
        return cls(ok=False, reply="", message=message or MESSAGES["server_error"], **FALLBACK_USAGE)
