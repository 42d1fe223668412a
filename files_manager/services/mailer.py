# files_manager/services/mailer.py
import smtplib
from email.message import EmailMessage
from email.utils import formatdate
from typing import Optional

from loguru import logger

from files_manager.core.config import Settings


class Mailer:
    """
    Sends HTML mail over SMTP.

    Configuration comes from Settings:
    - smtp_host / smtp_port: SMTP server
    - smtp_username / smtp_password: optional login
    - smtp_use_tls: STARTTLS before login
    - mail_sender: authorized sender identity (required to build a message)
    """

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: bool = True,
        sender: Optional[str] = None,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.sender = sender

    @classmethod
    def from_settings(cls, settings: Settings) -> "Mailer":
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
            sender=settings.mail_sender,
        )

    def build_message(self, dest: str, subject: str, html_body: str) -> EmailMessage:
        if not self.sender:
            raise ValueError("Sender email is not configured")

        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = self.sender
        msg["To"] = dest
        msg["Date"] = formatdate(localtime=True)
        msg.set_content(html_body, subtype="html", charset="utf-8")
        return msg

    def send(self, msg: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=30) as server:
            if self.use_tls:
                server.starttls()
            if self.username and self.password:
                server.login(self.username, self.password)
            server.send_message(msg)

        logger.info(f"Email sent to {msg['To']}")
