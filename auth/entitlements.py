from domain.models import Entitlement
from domain.policies import LIMITS


# 라이선스 키 → pro/free 판정
# 저장하지 않고 요청마다 계산한다 (정확히 일치할 때만 pro)
# limit 이 None 이면 정책 기본값, 0 은 그대로 0
def resolve_entitlement(license_key, pro_license_key, *, free_limit=None, pro_limit=None) -> Entitlement:
    is_pro = bool(pro_license_key) and license_key == pro_license_key
    if is_pro:
        limit = LIMITS["pro"]["daily"] if pro_limit is None else pro_limit
        return Entitlement(is_pro=True, daily_limit=limit)
    limit = LIMITS["free"]["daily"] if free_limit is None else free_limit
    return Entitlement(is_pro=False, daily_limit=limit)
