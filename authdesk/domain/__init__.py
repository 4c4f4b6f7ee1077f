# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation, InvariantViolationError
from .users.entities import (
    ActivityItem,
    DashboardStats,
    PublicUser,
    SessionClaims,
    SessionToken,
    User,
)

__all__ = [
    "ActivityItem",
    "DashboardStats",
    "InvariantViolation",
    "InvariantViolationError",
    "PublicUser",
    "SessionClaims",
    "SessionToken",
    "User",
]
