# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from authdesk.infrastructure.db import Database
from authdesk.infrastructure.health import check_database
from authdesk.infrastructure.observability import render_metrics
from authdesk.shared.logging import logger


class MiscController:
    def __init__(
        self,
        *,
        database: Database,
        service_name: str = "authdesk",
        metrics_enabled: bool = True,
    ) -> None:
        self._database = database
        self._service_name = service_name
        self._metrics_enabled = metrics_enabled

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        if self._metrics_enabled:
            bp.add_url_rule("/api/metrics", view_func=render_metrics, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True, "service": self._service_name}
        try:
            check_database(self._database)
            status["database"] = "ok"
        except SQLAlchemyError as exc:
            logger.error(f"health: database check failed ({type(exc).__name__})")
            status["ok"] = False
            status["database"] = "error"
            return jsonify(status), 503
        return jsonify(status), 200
