"""User store: lookup by email, insert."""
from typing import Annotated, Protocol

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import UserExistsError
from app.db.session import get_db
from app.models.user import User


class UserStore(Protocol):
    async def find_by_email(self, email: str) -> User | None: ...

    async def add(self, user: User) -> User: ...


class SqlUserStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def add(self, user: User) -> User:
        """Insert user; a unique-index violation on email becomes UserExistsError."""
        email = user.email
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            raise UserExistsError(email) from exc
        await self.db.refresh(user)
        return user


def get_user_store(db: Annotated[AsyncSession, Depends(get_db)]) -> UserStore:
    return SqlUserStore(db)
