# 📄 File: app/shared/infrastructure/email/email_service.py

# 🧭 Purpose (Layman Explanation):
# Sends the emails people get from Clubbera: the "confirm your address" link after signing up
# and the "reset your password" link when they forget it.

# 🧪 Purpose (Technical Summary):
# Async SMTP adapter built on aiosmtplib. Delivery is best-effort: SMTP and network failures
# are logged and swallowed, never retried and never surfaced to the API caller.

# 🔗 Dependencies:
# - aiosmtplib: Async SMTP client
# - email.message: MIME message construction
# - app.shared.config.settings: SMTP and branding configuration

# 🔄 Connected Modules / Calls From:
# Called by: auth_service.py (signup, verification resend, password reset)
# Replaced in tests through FastAPI dependency overrides

from email.message import EmailMessage
from functools import lru_cache
from typing import Optional

import aiosmtplib

from app.shared.config.settings import Settings, get_settings
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


class EmailService:
    """
    Best-effort transactional email sender.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    async def send_email(
        self,
        to: str,
        subject: str,
        text: str,
        html: Optional[str] = None
    ) -> bool:
        """
        Send one email.

        Returns:
            True when the server accepted the message, False otherwise
        """
        message = EmailMessage()
        message["From"] = f"{self.settings.COMPANY_NAME} <{self.settings.EMAIL_FROM}>"
        message["To"] = to
        message["Subject"] = subject
        message.set_content(text)
        if html:
            message.add_alternative(html, subtype="html")

        implicit_tls = self.settings.SMTP_PORT == 465
        try:
            async with aiosmtplib.SMTP(
                hostname=self.settings.SMTP_HOST,
                port=self.settings.SMTP_PORT,
                use_tls=implicit_tls,
                start_tls=self.settings.SMTP_USE_TLS and not implicit_tls,
                timeout=self.settings.SMTP_TIMEOUT,
            ) as smtp:
                if self.settings.SMTP_USERNAME:
                    await smtp.login(self.settings.SMTP_USERNAME, self.settings.SMTP_PASSWORD or "")
                await smtp.send_message(message)
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error(
                f"❌ Email not sent to {to}: {e}",
                event_type="email_failure",
                subject=subject,
            )
            return False

        logger.info(f"✅ Email sent: {subject}", event_type="email_sent")
        return True

    async def send_confirmation_email(self, to: str, token: str) -> bool:
        link = f"{self.settings.FRONTEND_URL}/confirmation/{token}"
        return await self.send_email(
            to,
            "Email Confirmation",
            f"Click on this link to confirm your email: {link}",
            html=f'<p>Welcome to {self.settings.COMPANY_NAME}!</p>'
                 f'<p><a href="{link}">Confirm your email</a></p>',
        )

    async def send_password_reset_email(self, to: str, token: str) -> bool:
        link = f"{self.settings.FRONTEND_URL}/reset-password/{token}"
        minutes = self.settings.PASSWORD_RESET_EXPIRE_MINUTES
        return await self.send_email(
            to,
            "Password Reset",
            f"Click on this link to reset your password: {link}\n"
            f"The link expires in {minutes} minutes.",
        )


@lru_cache()
def get_email_service() -> EmailService:
    return EmailService(get_settings())
