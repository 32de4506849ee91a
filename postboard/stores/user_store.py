from typing import Dict, Iterable, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
import logging

from postboard.models.user import User

logger = logging.getLogger(__name__)

class UserStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, name: str, email: str, user_id: Optional[str] = None) -> User:
        """Register a display identity (used by seeding and tests)"""
        user = User(id=user_id, name=name, email=email) if user_id else User(name=name, email=email)
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def find_many(self, user_ids: Iterable[str]) -> Dict[str, User]:
        """Load users by id in one query, keyed by id"""
        ids = set(user_ids)
        if not ids:
            return {}

        stmt = select(User).where(User.id.in_(ids))
        result = await self.db.execute(stmt)
        return {user.id: user for user in result.scalars().all()}
