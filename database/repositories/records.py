"""
Repositories for per-user readiness records.

Every query is scoped by user_id; a record owned by someone else is
invisible, including to delete.
"""

import logging
from typing import Any, List, Optional, Tuple, Type

from sqlalchemy import select, delete

from database.models import Skill, Project, MockTest, Certification
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class UserRecordRepository(BaseRepository):
    """CRUD for one record type, always filtered to a single owner."""

    model: Type = None
    order_by: Tuple = ()

    def list_for_user(self, user_id: int) -> List[Any]:
        stmt = select(self.model).where(self.model.user_id == user_id)
        if self.order_by:
            stmt = stmt.order_by(*self.order_by)
        else:
            stmt = stmt.order_by(self.model.id)
        return list(self.db.execute(stmt).scalars().all())

    def get_for_user(self, record_id: int, user_id: int) -> Optional[Any]:
        stmt = select(self.model).where(
            self.model.id == record_id,
            self.model.user_id == user_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def add(self, user_id: int, **fields) -> Any:
        record = self.model(user_id=user_id, **fields)
        self.db.add(record)
        self.flush()  # Generate ID
        return record

    def delete_for_user(self, record_id: int, user_id: int) -> int:
        """Delete a record if the user owns it. Returns the number of rows removed."""
        stmt = delete(self.model).where(
            self.model.id == record_id,
            self.model.user_id == user_id
        )
        result = self.db.execute(stmt)
        if result.rowcount == 0:
            logger.debug(
                f"No {self.model.__tablename__} row {record_id} owned by user {user_id}"
            )
        return result.rowcount


class SkillRepository(UserRecordRepository):
    model = Skill


class ProjectRepository(UserRecordRepository):
    model = Project


class MockTestRepository(UserRecordRepository):
    model = MockTest
    order_by = (MockTest.date.desc(), MockTest.id.desc())


class CertificationRepository(UserRecordRepository):
    model = Certification
