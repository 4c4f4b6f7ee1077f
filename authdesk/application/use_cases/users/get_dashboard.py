# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authdesk.domain.users.entities import ActivityItem, DashboardStats
from authdesk.domain.users.repositories import UserRepository

# No data source exists for these yet; they are fixed placeholders.
PLACEHOLDER_REVENUE = 45678
PLACEHOLDER_ACTIVE_SESSIONS = 892
PLACEHOLDER_ACTIVITY = (
    ActivityItem(id=1, description="New user registered", time="2 hours ago"),
    ActivityItem(id=2, description="Payment received", time="3 hours ago"),
    ActivityItem(id=3, description="Profile updated", time="5 hours ago"),
)


class GetDashboardUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self) -> DashboardStats:
        return DashboardStats(
            total_users=self._users.count(),
            revenue=PLACEHOLDER_REVENUE,
            active_sessions=PLACEHOLDER_ACTIVE_SESSIONS,
            recent_activity=PLACEHOLDER_ACTIVITY,
        )


__all__ = ["GetDashboardUseCase"]
