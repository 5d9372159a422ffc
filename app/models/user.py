"""User model: one registered account. Write-once."""
from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String, Text
from sqlalchemy.sql import func

from app.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    # unique index is the uniqueness guard; the lookup before insert is only a fast path
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    gender = Column(String(32), nullable=False)
    age = Column(Float, nullable=False)
    bio = Column(Text, nullable=True)
    profile_picture = Column(String(512), nullable=True)  # path returned by file intake
    referrer = Column(String(255), nullable=True)
    terms_accepted = Column(Boolean, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
