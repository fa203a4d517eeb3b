#!/usr/bin/env python3
"""
Record service - CRUD for a user's skills, projects, mock tests and certifications.
"""

import logging
from typing import Any, Dict, List

from database.repositories import UserRecordRepository
from ..exceptions import RecordNotFoundException

logger = logging.getLogger(__name__)


class RecordService:
    """Owner-scoped operations over one record type."""

    def __init__(self, repository: UserRecordRepository, label: str):
        self.repository = repository
        self.label = label

    def list_records(self, user_id: int) -> List[Any]:
        return self.repository.list_for_user(user_id)

    def get_record(self, record_id: int, user_id: int) -> Any:
        """
        Raises:
            RecordNotFoundException: If the record is missing or owned by another user.
        """
        record = self.repository.get_for_user(record_id, user_id)
        if record is None:
            raise RecordNotFoundException(f"{self.label} {record_id} not found")
        return record

    def create_record(self, user_id: int, fields: Dict[str, Any]) -> Any:
        record = self.repository.add(user_id, **fields)
        logger.info(f"User {user_id} added {self.label} {record.id}")
        return record

    def delete_record(self, record_id: int, user_id: int) -> bool:
        """Delete a record owned by the user. Deleting a missing record is not an error."""
        removed = self.repository.delete_for_user(record_id, user_id)
        if removed:
            logger.info(f"User {user_id} deleted {self.label} {record_id}")
        return removed > 0
