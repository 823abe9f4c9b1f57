# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import atexit

from flask import Flask
from flask_cors import CORS

from shoplists.container import Container
from shoplists.shared.config import AppConfig, load_config
from shoplists.shared.logging import logger, setup_logging
from shoplists.shared.middleware.error_handler import configure_error_handling
from shoplists.shared.middleware.request_logger import configure_request_logging


def create_app(
    config: AppConfig | None = None,
    *,
    container: Container | None = None,
) -> Flask:
    if container is not None:
        config = container.config
    config = config or load_config()
    container = container or Container(config)

    setup_logging(config.log_level, config.log_file)

    app = Flask(__name__)
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    CORS(
        app,
        resources={
            r"/v1/*": {"origins": config.security.allowed_origins},
            r"/login": {"origins": config.security.allowed_origins},
        },
    )
    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.lists_controller.as_blueprint())

    if config.session.sweep_interval > 0:
        container.session_sweeper.start()
        atexit.register(container.session_sweeper.stop)

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info("Flask app initialized")
    return app
