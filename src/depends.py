from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.email_service import LoggingEmailService, SmtpEmailService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.email_service import IEmailService

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_email_service() -> IEmailService:
    """SMTP delivery when SMTP_HOST is configured, log-only otherwise"""
    if ApplicationConfig.SMTP_HOST:
        return SmtpEmailService(
            host=ApplicationConfig.SMTP_HOST,
            port=ApplicationConfig.SMTP_PORT,
            user=ApplicationConfig.SMTP_USER,
            password=ApplicationConfig.SMTP_PASSWORD,
            from_email=ApplicationConfig.EMAIL_FROM,
            webapp_url=ApplicationConfig.WEBAPP_URL,
        )
    return LoggingEmailService(webapp_url=ApplicationConfig.WEBAPP_URL)


def get_team_billing_enabled() -> bool:
    return ApplicationConfig.IS_TEAM_BILLING_ENABLED
