from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.integrity import flush_or_conflict
from src.app.repositories.profile_repository import IProfileRepository
from src.domain.entities import Profile


class ProfileRepository(IProfileRepository):
    """Profile repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, profile: Profile) -> Profile:
        self.session.add(profile)
        await flush_or_conflict(
            self.session, "USERNAME_TAKEN", "Username is already taken"
        )
        await self.session.refresh(profile)
        return profile
