from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

import routes
from core.config import Config
from core.extensions import init_extensions
from core.hooks import register_hooks
from core.log import init_logging
from security.headers import init_security_headers


def create_app(test_config=None, *, provider=None, usage_store=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    init_logging(app)
    init_extensions(app, provider=provider, usage_store=usage_store)
    init_security_headers(app)

    # 프록시 뒤에서 레이트리밋 키(remote_addr)가 실제 클라이언트 IP가 되도록
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1)

    routes.register_routes(app)
    register_hooks(app)

    if not app.config.get("OPENAI_API_KEY"):
        app.logger.warning("[OPENAI] OPENAI_API_KEY is empty; generation requests will fail")

    app.logger.info("[%s] app ready model=%s", app.config.get("SERVICE_NAME"), app.config.get("OPENAI_MODEL"))
    return app


if __name__ == "__main__":
    application = create_app()
    port = application.config.get("PORT", 3000)
    application.logger.info("[%s] Server running on http://localhost:%s", application.config.get("SERVICE_NAME"), port)
    application.run(host="0.0.0.0", port=port, threaded=True)
