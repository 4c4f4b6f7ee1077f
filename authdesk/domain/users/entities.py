# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from authdesk.domain.exceptions import InvariantViolation


def normalize_email(email: str) -> str:
    return email.strip().lower()


@dataclass(slots=True, frozen=True)
class PublicUser:
    id: int
    name: str
    email: str


@dataclass(slots=True, frozen=True)
class User:

    id: int
    name: str
    email: str
    password_hash: str
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise InvariantViolation("must not be empty", field="name")
        if "@" not in self.email:
            raise InvariantViolation("must be an email address", field="email")
        if not self.password_hash:
            raise InvariantViolation("must not be empty", field="password_hash")

    def public(self) -> PublicUser:
        return PublicUser(id=self.id, name=self.name, email=self.email)


@dataclass(slots=True, frozen=True)
class SessionClaims:
    """Identity asserted by a verified session token."""

    user_id: int
    email: str


@dataclass(slots=True, frozen=True)
class SessionToken:

    token: str
    user_id: int
    email: str
    issued_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


@dataclass(slots=True, frozen=True)
class ActivityItem:
    id: int
    description: str
    time: str


@dataclass(slots=True, frozen=True)
class DashboardStats:
    total_users: int
    revenue: int
    active_sessions: int
    recent_activity: tuple[ActivityItem, ...] = field(default_factory=tuple)
