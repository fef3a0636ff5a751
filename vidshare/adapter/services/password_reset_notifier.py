"""Password reset delivery over SMTP."""

import asyncio
import logging
import smtplib
from email.message import EmailMessage

from vidshare.app.services.password_reset_notifier import IPasswordResetNotifier

logger = logging.getLogger(__name__)

RESET_EMAIL_SUBJECT = "Password Reset Request"


def render_reset_email(reset_url: str, ttl_minutes: int) -> tuple[str, str]:
    """Returns (plain text body, html body)"""
    text = (
        "You requested a password reset. Open the link below to set a new password:\n\n"
        f"{reset_url}\n\n"
        f"This link will expire in {ttl_minutes} minutes.\n"
        "If you didn't request this, you can ignore this email.\n"
    )
    html = f"""
<div style="max-width: 600px; margin: 0 auto; font-family: Arial, sans-serif;">
  <h2 style="color: #333;">Password Reset Request</h2>
  <p>You requested a password reset. Click the button below to reset your password:</p>
  <a href="{reset_url}" style="display: inline-block; background-color: #3b82f6; color: white; padding: 12px 24px; text-decoration: none; border-radius: 8px; margin: 16px 0;">Reset Password</a>
  <p>This link will expire in {ttl_minutes} minutes.</p>
  <p>If you didn't request this, please ignore this email.</p>
</div>
"""
    return text, html


class SmtpPasswordResetNotifier(IPasswordResetNotifier):
    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        user: str = "",
        password: str = "",
        use_tls: bool = True,
        ttl_minutes: int = 10,
    ):
        self.host = host
        self.port = port
        self.sender = sender
        self.user = user
        self.password = password
        self.use_tls = use_tls
        self.ttl_minutes = ttl_minutes

    def build_message(self, email: str, reset_url: str) -> EmailMessage:
        text, html = render_reset_email(reset_url, self.ttl_minutes)
        msg = EmailMessage()
        msg["Subject"] = RESET_EMAIL_SUBJECT
        msg["From"] = self.sender
        msg["To"] = email
        msg.set_content(text)
        msg.add_alternative(html, subtype="html")
        return msg

    def _send(self, msg: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=10) as smtp:
            if self.use_tls:
                smtp.starttls()
            if self.user and self.password:
                smtp.login(self.user, self.password)
            smtp.send_message(msg)

    async def send_reset_link(self, email: str, reset_url: str) -> None:
        # smtplib blocks; keep it off the event loop
        await asyncio.to_thread(self._send, self.build_message(email, reset_url))
        logger.info("Password reset email sent")


class UnconfiguredPasswordResetNotifier(IPasswordResetNotifier):
    """Used when no SMTP host is configured; the token is still created"""

    async def send_reset_link(self, email: str, reset_url: str) -> None:
        logger.warning("SMTP_HOST not configured, password reset email not sent")


def build_password_reset_notifier(config) -> IPasswordResetNotifier:
    if not config.SMTP_HOST:
        return UnconfiguredPasswordResetNotifier()
    return SmtpPasswordResetNotifier(
        host=config.SMTP_HOST,
        port=config.SMTP_PORT,
        sender=config.SMTP_FROM,
        user=config.SMTP_USER,
        password=config.SMTP_PASSWORD,
        use_tls=config.SMTP_USE_TLS,
        ttl_minutes=config.RESET_TOKEN_TTL_MINUTES,
    )
