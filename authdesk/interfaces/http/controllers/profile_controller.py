# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from authdesk.application.services.session_verifier import SessionVerifier
from authdesk.application.use_cases.users.get_dashboard import \
    GetDashboardUseCase
from authdesk.application.use_cases.users.get_profile import GetProfileUseCase
from authdesk.interfaces.http.auth import auth_required, current_claims
from authdesk.interfaces.http.dto.profile import DashboardDTO, ProfileDTO


class ProfileController:
    def __init__(
        self,
        *,
        verifier: SessionVerifier,
        get_profile: GetProfileUseCase,
        get_dashboard: GetDashboardUseCase,
    ) -> None:
        self._verifier = verifier
        self._get_profile = get_profile
        self._get_dashboard = get_dashboard

    def profile(self) -> tuple[Response, int]:
        user = self._get_profile.execute(current_claims().user_id)
        dto = ProfileDTO.from_domain(user)
        return jsonify(dto.model_dump(mode="json", by_alias=True)), 200

    def dashboard(self) -> tuple[Response, int]:
        stats = self._get_dashboard.execute()
        dto = DashboardDTO.from_domain(stats)
        return jsonify(dto.model_dump(mode="json", by_alias=True)), 200

    def as_blueprint(self) -> Blueprint:
        guard = auth_required(self._verifier)
        bp = Blueprint("profile", __name__, url_prefix="/api")
        bp.add_url_rule("/profile", view_func=guard(self.profile), methods=["GET"])
        bp.add_url_rule("/dashboard", view_func=guard(self.dashboard), methods=["GET"])
        return bp
