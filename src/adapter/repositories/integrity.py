from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.errors import ConflictError


async def flush_or_conflict(session: AsyncSession, code: str, message: str) -> None:
    """Flush pending writes, translating store uniqueness violations into ConflictError"""
    try:
        await session.flush()
    except IntegrityError as exc:
        raise ConflictError(code, message) from exc
