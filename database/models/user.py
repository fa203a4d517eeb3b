from sqlalchemy import Column, Integer, Text, TIMESTAMP, func, Index
from sqlalchemy.orm import relationship

from .base import Base


class User(Base):
    """
    Student account. Owns every readiness record through user_id.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, unique=True)
    password_hash = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    skills = relationship("Skill", back_populates="owner", cascade="all, delete-orphan")
    projects = relationship("Project", back_populates="owner", cascade="all, delete-orphan")
    mock_tests = relationship("MockTest", back_populates="owner", cascade="all, delete-orphan")
    certifications = relationship("Certification", back_populates="owner", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_users_email', 'email'),
    )
