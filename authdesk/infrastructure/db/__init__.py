# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .models import User
from .session import Base, Database

__all__ = ["Base", "Database", "User"]
