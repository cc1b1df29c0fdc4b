def _field(obj, name):
    # SDK 객체와 dict(테스트/raw JSON) 모두 지원
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def collect_output_text(response) -> str:
    """
    Responses API 결과에서 답변 텍스트만 추출:
      - output[] 순서대로, 각 content[] 순서대로
      - type == "output_text" 이고 text 가 문자열인 것만 이어 붙임
      - output/content 가 없거나 다른 타입(reasoning 등)이면 건너뜀
      - 마지막에 trim
    """
    output = _field(response, "output") if response is not None else None
    if not isinstance(output, (list, tuple)):
        return ""

    chunks = []
    for item in output:
        content = _field(item, "content") if item is not None else None
        if not isinstance(content, (list, tuple)):
            continue
        for part in content:
            if part is None or _field(part, "type") != "output_text":
                continue
            text = _field(part, "text")
            if isinstance(text, str):
                chunks.append(text)
    return "".join(chunks).strip()
