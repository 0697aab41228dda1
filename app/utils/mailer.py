import smtplib
from email.message import EmailMessage
from loguru import logger

from app.core.config import settings
from app.core.exceptions import UpstreamError


class Mailer:
    """
    Outbound SMTP transport. One instance is shared by the whole process,
    see app.core.dependencies.get_mailer.
    """

    def __init__(self, host: str, port: int, username: str, password: str):
        self.host = host
        self.port = port
        self.username = username
        self.password = password

    def send(self, to: str, subject: str, html: str) -> None:
        message = EmailMessage()
        message["From"] = self.username
        message["To"] = to
        message["Subject"] = subject
        message.set_content("This message requires an HTML capable mail client.")
        message.add_alternative(html, subtype="html")

        try:
            with smtplib.SMTP(self.host, self.port, timeout=30) as smtp:
                smtp.starttls()
                if self.username:
                    smtp.login(self.username, self.password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Sending mail to {to} failed: {e}")
            raise UpstreamError("Failed to send email")

        logger.info(f"Email sent to {to}: {subject}")


mailer = Mailer(
    host=settings.smtp_host,
    port=settings.smtp_port,
    username=settings.email_user,
    password=settings.email_pass,
)
