"""
Outgoing SMTP mail: inquiry notifications and temporary admin passwords.
"""

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import List, Optional

from app.config import settings

logger = logging.getLogger(__name__)


class EmailService:
    def __init__(self, config=None):
        self.config = config or settings

    def is_enabled(self) -> bool:
        return self.config.is_mail_enabled

    def send_email(
        self,
        to_addresses: List[str],
        subject: str,
        body: str,
        html_body: Optional[str] = None,
        from_address: Optional[str] = None,
    ) -> bool:
        """
        Send an email via SMTP.

        Returns:
            True if the message was handed to the server, False otherwise.
            Failures are logged, never raised.
        """
        if not self.is_enabled():
            logger.warning("Email service is disabled; not sending %r", subject)
            return False

        recipients = [a for a in to_addresses if a]
        if not recipients:
            logger.error("No recipient addresses provided")
            return False

        sender = from_address or self.config.mail_from or self.config.mail_admin_from

        try:
            msg = MIMEMultipart("alternative")
            msg["Subject"] = subject
            msg["From"] = sender
            msg["To"] = ", ".join(recipients)
            msg.attach(MIMEText(body, "plain", "utf-8"))
            if html_body:
                msg.attach(MIMEText(html_body, "html", "utf-8"))

            server = smtplib.SMTP(self.config.mail_host, self.config.mail_port, timeout=self.config.mail_timeout)
            try:
                if self.config.mail_use_tls:
                    server.starttls()
                if self.config.mail_user and self.config.mail_pass:
                    server.login(self.config.mail_user, self.config.mail_pass)
                server.send_message(msg, sender, recipients)
                logger.info("Email sent to %s", ", ".join(recipients))
                return True
            finally:
                server.quit()
        except Exception as e:
            logger.error("Failed to send email: %s", e)
            return False


def get_email_service() -> EmailService:
    return EmailService()
