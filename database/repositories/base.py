from sqlalchemy.orm import Session


class BaseRepository:
    """Repository bound to a caller-owned Session; transactions belong to the caller."""

    def __init__(self, db: Session):
        self.db = db

    def flush(self) -> None:
        self.db.flush()

    def rollback(self) -> None:
        self.db.rollback()
