from core.http_utils import _no_store


def init_security_headers(app):

    @app.after_request
    def add_security_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        # JSON API 전용 서버, 아무 것도 프레임/스크립트로 로드하지 않는다
        resp.headers.setdefault("Content-Security-Policy", "default-src 'none'; frame-ancestors 'none'")
        if "Cache-Control" not in resp.headers:
            _no_store(resp)
        return resp
