# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import atexit

from flask import Flask
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from authdesk.container import Container
from authdesk.infrastructure.observability import configure_metrics
from authdesk.infrastructure.resilience import call_with_retries
from authdesk.shared.logging import logger, setup_logging
from authdesk.shared.middleware.error_handler import configure_error_handling
from authdesk.shared.middleware.request_logger import configure_request_logging


def create_app(container: Container | None = None) -> Flask:
    container = container or Container()
    config = container.config

    setup_logging(level=config.log_level, log_file=config.log_file)
    call_with_retries(container.database.init_schema, config.resilience)

    app = Flask(__name__)
    app.extensions["authdesk.container"] = container
    hops = config.security.trusted_proxy_hops
    if hops:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=hops, x_proto=hops)  # type: ignore[method-assign]
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_metrics(app, enabled=config.observability.metrics_enabled)

    CORS(app, resources={r"/api/*": {"origins": config.security.allowed_origins}})

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.profile_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    atexit.register(container.close)

    logger.info(
        f"Flask app initialized service={config.observability.service_name} env={config.app_env}"
    )
    return app
