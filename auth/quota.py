"""
quota.py — 일일 사용량 게이트

clientId + UTC 날짜 단위로 카운트를 올리고, 무료 사용자는 하루 한도를 넘으면 차단한다.
카운트는 LLM 호출 전에 올라가며, 생성이 실패해도 되돌리지 않는다.
"""
import logging
import threading
from typing import NamedTuple, Union

from auth.entitlements import resolve_entitlement
from domain.models import Admitted, Rejected
from domain.policies import DEFAULT_CLIENT_ID
from utils.time_utils import _day_str, _utcnow

logger = logging.getLogger(__name__)


class UsageKey(NamedTuple):
    client_id: str
    day: str

    @classmethod
    def for_client(cls, client_id, now=None) -> "UsageKey":
        return cls(client_id or DEFAULT_CLIENT_ID, _day_str(now))

    def __str__(self):
        return f"usage:{self.client_id}:{self.day}"


class InMemoryUsageStore:
    """
    프로세스 메모리 카운터 (재시작 시 초기화)
      - get / increment_and_get 은 키 단위로 원자적
      - increment_if_below 는 "조회 → 한도 확인 → 증가" 를 하나의 잠금 안에서 처리
    """

    def __init__(self):
        self._counts = {}
        self._lock = threading.Lock()

    def get(self, key: UsageKey) -> int:
        with self._lock:
            return self._counts.get(key, 0)

    def increment_and_get(self, key: UsageKey) -> int:
        with self._lock:
            value = self._counts.get(key, 0) + 1
            self._counts[key] = value
            return value

    def increment_if_below(self, key: UsageKey, limit=None):
        """limit 이 None 이면 무제한. (증가 여부, 현재 값) 반환."""
        with self._lock:
            used = self._counts.get(key, 0)
            if limit is not None and used >= limit:
                return False, used
            self._counts[key] = used + 1
            return True, used + 1

    def __len__(self):
        with self._lock:
            return len(self._counts)


class EntitlementGate:
    def __init__(self, store, pro_license_key, *, free_limit=None, pro_limit=None):
        self.store = store
        self.pro_license_key = pro_license_key
        self.free_limit = free_limit
        self.pro_limit = pro_limit

    def admit(self, license_key, client_id, now=None) -> Union[Admitted, Rejected]:
        ent = resolve_entitlement(
            license_key,
            self.pro_license_key,
            free_limit=self.free_limit,
            pro_limit=self.pro_limit,
        )
        key = UsageKey.for_client(client_id, now or _utcnow())

        # pro 는 한도를 보고만 하고 차단하지 않는다
        admitted, used = self.store.increment_if_below(key, None if ent.is_pro else ent.daily_limit)
        if not admitted:
            logger.info("[QUOTA] rejected key=%s used=%s limit=%s", key, used, ent.daily_limit)
            return Rejected(used=used, limit=ent.daily_limit, is_pro=ent.is_pro)

        logger.debug("[QUOTA] admitted key=%s used=%s limit=%s pro=%s", key, used, ent.daily_limit, ent.is_pro)
        return Admitted(used=used, limit=ent.daily_limit, is_pro=ent.is_pro)
