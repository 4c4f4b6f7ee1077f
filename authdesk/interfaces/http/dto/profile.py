from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from authdesk.domain.users.entities import DashboardStats, User


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, validate_by_name=True)


class ProfileDTO(_CamelModel):
    id: int
    name: str
    email: str
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> ProfileDTO:
        return cls(id=user.id, name=user.name, email=user.email, created_at=user.created_at)


class ActivityDTO(_CamelModel):
    id: int
    description: str
    time: str


class DashboardDTO(_CamelModel):
    total_users: int
    revenue: int
    active_sessions: int
    recent_activity: list[ActivityDTO]

    @classmethod
    def from_domain(cls, stats: DashboardStats) -> DashboardDTO:
        return cls(
            total_users=stats.total_users,
            revenue=stats.revenue,
            active_sessions=stats.active_sessions,
            recent_activity=[
                ActivityDTO(id=item.id, description=item.description, time=item.time)
                for item in stats.recent_activity
            ],
        )
