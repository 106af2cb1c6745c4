# services/email_service.py
import smtplib
from email.message import EmailMessage
from typing import Optional

from expiry_tracker.config import Settings, settings as default_settings
from expiry_tracker.utils.logger import logger


class EmailService:
    """Outbound mail over SMTP, configured from process settings"""

    def __init__(self, cfg: Optional[Settings] = None, timeout: float = 10.0):
        self.cfg = cfg or default_settings
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self.cfg.smtp_host)

    def build_password_reset_message(self, to_address: str, reset_link: str) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = "Password reset"
        message["From"] = self.cfg.mail_from
        message["To"] = to_address
        message.set_content(
            "You asked to reset your password.\n\n"
            f"Open the link below to choose a new one:\n{reset_link}\n\n"
            f"The link expires in {self.cfg.reset_token_ttl_minutes} minutes. "
            "If you did not ask for this, ignore this email.\n"
        )
        return message

    def send(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.cfg.smtp_host, self.cfg.smtp_port, timeout=self.timeout) as smtp:
            if self.cfg.smtp_use_tls:
                smtp.starttls()
            if self.cfg.smtp_user:
                smtp.login(self.cfg.smtp_user, self.cfg.smtp_password)
            smtp.send_message(message)

    def send_password_reset(self, to_address: str, reset_link: str) -> None:
        """
        Deliver the reset link. Runs after the response has been sent, so a
        delivery failure is logged instead of raised.
        """
        if not self.enabled:
            logger.warning("SMTP_HOST is not configured; password reset email not sent")
            return
        try:
            self.send(self.build_password_reset_message(to_address, reset_link))
            logger.info("Password reset email sent")
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Error sending password reset email: {e}")
