from flask import make_response, jsonify


def _no_store(resp):
    resp.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
    resp.headers["Pragma"] = "no-cache"
    resp.headers["Expires"] = "0"
    return resp


# api 공통 응답: 성공/실패 모두 200, 결과는 ok 필드로만 구분
def _json_envelope(result):
    return _no_store(make_response(jsonify(result.to_dict()), 200))
