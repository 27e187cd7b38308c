import logging

from consult_admin.core.config import Settings
from consult_admin.core.exceptions import AdminError, MailDeliveryError
from consult_admin.core.mailer import Mailer, render
from consult_admin.schemas.contact_schema import ConsultForm, ContactForm

logger = logging.getLogger(__name__)

NO_MESSAGE = "No additional message provided"


class ContactService:
    """
    문의 폼 → 관리자 메일 전달
    """
    def __init__(self, mailer: Mailer, config: Settings):
        self.mailer = mailer
        self.config = config

    # 문의하기
    def send_contact(self, form: ContactForm):
        if not (form.name and form.email and form.subject and form.message):
            raise AdminError("Please fill in all required fields")

        context = form.model_dump()
        sent = self.mailer.send(
            to=self.config.CONTACT_RECEIVER,
            subject=f"Contact Form: {form.subject}",
            text=render("contact_email.txt", **context),
            html=render("contact_email.html", **context),
            reply_to=form.email,
            sender_name=form.name,
        )
        if not sent:
            raise MailDeliveryError("Failed to send message. Please try again later.")

    # 전문가 상담 신청
    def send_consult(self, form: ConsultForm):
        if not (form.name and form.email and form.city and form.requirement and form.phone):
            raise AdminError(
                "Please fill in all required fields (name, email, city, requirement, phone)"
            )

        context = form.model_dump()
        context["message"] = form.message or NO_MESSAGE
        sent = self.mailer.send(
            to=self.config.CONSULT_RECEIVER,
            subject=f"Contact Form Submission from {form.name}",
            text=render("consult_email.txt", **context),
            html=render("consult_email.html", **context),
            reply_to=form.email,
            sender_name=form.name,
        )
        if not sent:
            raise MailDeliveryError("Failed to send message. Please try again later.")
