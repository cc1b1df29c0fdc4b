"""
security.py — 입력 검증 유틸
auto-cs-backend (Flask)

확장 프로그램은 ok 필드로만 분기하므로, 잘못된 입력도 400으로 끊지 않는다.
스키마에 맞지 않는 필드는 버리고(→ 기본값), 나머지만 g.safe_input 에 담는다.
고객 텍스트는 프롬프트에 그대로 들어가야 하므로 escape 하지 않는다.
"""

import inspect
import logging
from functools import wraps

from flask import request, g
from jsonschema import Draft7Validator

logger = logging.getLogger(__name__)


def _filter_by_schema(payload, schema):
    """
    필드 단위 검증:
      - schema.properties 에 있는 키는 각자의 서브스키마로 검사, 실패하면 제거
      - properties 에 없는 키는 그대로 둔다 (additionalProperties: True)
    """
    if not isinstance(payload, dict):
        return {}
    if not schema:
        return dict(payload)

    props = schema.get("properties") or {}
    safe = {}
    for key, value in payload.items():
        prop = props.get(key)
        if prop is None:
            safe[key] = value
            continue
        if Draft7Validator(prop).is_valid(value):
            safe[key] = value
        else:
            logger.debug("[INPUT] dropped invalid field=%s", key)
    return safe


def _load_safe_input(json_schema):
    payload = request.get_json(silent=True, force=True)
    g.safe_input = _filter_by_schema(payload, json_schema)


# -------------------- 메인 데코레이터 --------------------
def require_safe_input(json_schema=None, *, only_methods=("POST", "PUT", "PATCH")):
    """
    관대한 JSON 입력 데코레이터
      - json_schema  : JSON 스키마(dict), 필드 단위로 적용
      - only_methods : 검증을 적용할 메서드 (기본: POST/PUT/PATCH)
    본문이 없거나 JSON 이 아니면 빈 dict 로 취급한다.
    """
    only_methods = tuple(m.upper() for m in (only_methods or ()))

    def _prepare():
        if only_methods and request.method.upper() not in only_methods:
            g.safe_input = None
            return
        _load_safe_input(json_schema)

    def deco(f):
        if inspect.iscoroutinefunction(f):
            @wraps(f)
            async def async_wrapped(*args, **kwargs):
                _prepare()
                return await f(*args, **kwargs)
            return async_wrapped

        @wraps(f)
        def wrapped(*args, **kwargs):
            _prepare()
            return f(*args, **kwargs)
        return wrapped
    return deco
