# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from authdesk.domain.users.entities import User as DomainUser
from authdesk.domain.users.exceptions import EmailAlreadyRegisteredError
from authdesk.domain.users.repositories import UserRepository
from authdesk.infrastructure.db.models import User
from authdesk.infrastructure.unit_of_work import unit_of_work_scope
from authdesk.shared.errors import InfrastructureError
from authdesk.shared.logging import logger


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except IntegrityError:
        raise
    except SQLAlchemyError as exc:
        logger.exception(f"users.{operation}: database failure")
        raise InfrastructureError() from exc


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with _store_errors("find_by_email"), unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.email == email).first()
            return self._to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with _store_errors("find_by_id"), unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return self._to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with _store_errors("add"), unit_of_work_scope(self._session_factory) as session:
                row = User(
                    name=user.name,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                return self._to_domain(row)
        except IntegrityError as exc:
            logger.info("users.add: unique constraint rejected duplicate email")
            raise EmailAlreadyRegisteredError() from exc

    def count(self) -> int:
        with _store_errors("count"), unit_of_work_scope(self._session_factory) as session:
            return session.query(func.count(User.id)).scalar() or 0

    def _to_domain(self, row: User) -> DomainUser:
        return DomainUser(
            id=row.id,
            name=row.name,
            email=row.email,
            password_hash=row.password_hash,
            created_at=_as_utc(row.created_at),
        )
