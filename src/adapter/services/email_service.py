"""
Email delivery adapters.

LoggingEmailService is used when no SMTP host is configured; it only logs
what would have been sent.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import Optional
from uuid import UUID

from src.app.errors import CollaboratorFailure
from src.app.services.email_service import IEmailService

logger = logging.getLogger(__name__)


def build_signup_to_organization_message(
    username_or_email: str, org_name: str, webapp_url: str
) -> tuple[str, str]:
    subject = f"You have been invited to join {org_name}"
    body = f"""Hello {username_or_email},

You have been added to the organization {org_name}.

Set a password for your account to get started:

{webapp_url}/auth/forgot-password

If you were not expecting this invitation, you can ignore this email.
"""
    return subject, body


class LoggingEmailService(IEmailService):
    """Development email service - logs emails instead of sending them"""

    def __init__(self, webapp_url: str = "http://localhost:3000"):
        self.webapp_url = webapp_url

    async def send_signup_to_organization_email(
        self,
        to: str,
        username_or_email: str,
        org_name: str,
        org_id: UUID,
        locale: Optional[str] = None,
    ) -> bool:
        subject, _ = build_signup_to_organization_message(
            username_or_email, org_name, self.webapp_url
        )
        logger.info(
            f"Email not sent (no SMTP host): to={to} org_id={org_id} locale={locale} subject={subject!r}"
        )
        return True


class SmtpEmailService(IEmailService):
    """SMTP email service for production"""

    def __init__(
        self,
        host: str,
        port: int,
        user: str,
        password: str,
        from_email: str,
        webapp_url: str,
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.from_email = from_email
        self.webapp_url = webapp_url

    def _send(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port) as server:
            server.starttls()
            if self.user and self.password:
                server.login(self.user, self.password)
            server.send_message(message)

    async def send_signup_to_organization_email(
        self,
        to: str,
        username_or_email: str,
        org_name: str,
        org_id: UUID,
        locale: Optional[str] = None,
    ) -> bool:
        subject, body = build_signup_to_organization_message(
            username_or_email, org_name, self.webapp_url
        )
        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = self.from_email
        message["To"] = to
        message.set_content(body)
        # set_content resets Content-* headers
        if locale:
            message["Content-Language"] = locale

        try:
            await asyncio.to_thread(self._send, message)
        except (smtplib.SMTPException, OSError) as exc:
            raise CollaboratorFailure(
                "EMAIL_DELIVERY_FAILED", f"Could not send email to {to}: {exc}"
            ) from exc

        logger.info(f"Signup email sent to {to} for organization {org_id}")
        return True
