import logging
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from consult_admin.core.config import Settings, settings

logger = logging.getLogger(__name__)

# 메일 본문 템플릿 경로
TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
)


def render(template_name: str, **context) -> str:
    return templates.get_template(template_name).render(**context)


class Mailer:
    """
    SMTP 메일 발송 클래스 (OTP / 문의 메일)
    """
    def __init__(self, config: Settings):
        self.config = config

    # 메일 발송, 성공 여부 반환
    def send(
        self,
        to: str,
        subject: str,
        text: str,
        html: Optional[str] = None,
        reply_to: Optional[str] = None,
        sender_name: Optional[str] = None,
    ) -> bool:
        message = EmailMessage()
        message["From"] = formataddr((sender_name or "", self.config.EMAIL_USERNAME))
        message["To"] = to
        message["Subject"] = subject
        if reply_to:
            message["Reply-To"] = reply_to
        message.set_content(text)
        if html:
            message.add_alternative(html, subtype="html")

        try:
            if self.config.EMAIL_USE_SSL:
                with smtplib.SMTP_SSL(
                    self.config.EMAIL_HOST,
                    self.config.EMAIL_PORT,
                    context=ssl.create_default_context(),
                ) as smtp:
                    smtp.login(self.config.EMAIL_USERNAME, self.config.EMAIL_PASSWORD)
                    smtp.send_message(message)
            else:
                with smtplib.SMTP(self.config.EMAIL_HOST, self.config.EMAIL_PORT) as smtp:
                    smtp.starttls(context=ssl.create_default_context())
                    smtp.login(self.config.EMAIL_USERNAME, self.config.EMAIL_PASSWORD)
                    smtp.send_message(message)
        except (smtplib.SMTPException, OSError):
            logger.exception("Error sending email to %s", to)
            return False

        logger.info("Email sent to %s (%s)", to, subject)
        return True


_mailer = Mailer(settings)


# 메일러 의존성 (테스트에서 교체)
def get_mailer() -> Mailer:
    return _mailer
