# build_prompt.py
from __future__ import annotations

from typing import NamedTuple

from domain.models import Scenario, Tone
from prompt_management import category_templates


class PromptPair(NamedTuple):
    system: str
    user: str


def _get_system_prompt(tone: Tone, scenario: Scenario) -> str:
    """
    공통 규칙 → 문체 가이드 → tone 보정 → scenario 구조 순서로 조립.
    tone/scenario 는 이미 정규화된 값이어야 한다.
    """
    parts = [
        category_templates.SYSTEM_PROMPT_BASE,
        category_templates.SELLER_STYLE_GUIDE,
        category_templates.HUMANIZE_GUIDE,
        category_templates.OPENING_VARIATION_GUIDE,
        category_templates.TONE_GUIDE_MAP[tone.value],
        category_templates.SCENARIO_GUIDE_MAP[scenario.value],
    ]
    return "\n\n".join(parts)


def build_prompt(tone, scenario, customer_text) -> PromptPair:
    """
    Builds (system_prompt, user_prompt) for the Responses API.

    tone / scenario:
      - Tone / Scenario enum or raw string; unknown values fall back to friendly / general.
    customer_text:
      - inserted verbatim (already trimmed by the request normalizer).
    """
    tone = Tone.parse(tone)
    scenario = Scenario.parse(scenario)
    text = customer_text if isinstance(customer_text, str) else ""

    system_prompt = _get_system_prompt(tone, scenario)

    final_user_prompt = f"""
[tone]: {tone.value}
[scenario]: {scenario.value}

[고객 텍스트]:
{text}

{category_templates.USER_PROMPT_INSTRUCTIONS}
""".strip()

    return PromptPair(system_prompt, final_user_prompt)
