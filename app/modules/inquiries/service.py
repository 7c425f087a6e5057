import logging
from html import escape

from postgrest.types import ReturnMethod
from supabase import Client

from app.config import settings
from app.core.email import EmailService
from app.core.repository import run_query
from app.modules.inquiries.schemas import InquiryCreate

logger = logging.getLogger(__name__)

NOTIFICATION_FIELDS = (
    ("Company", "company_name"),
    ("Name", "person_name"),
    ("Email", "email"),
    ("Phone", "phone"),
    ("Type", "inquiry_type"),
    ("Category", "product_category"),
)


class InquiryService:
    def __init__(self, supabase: Client, email_service: EmailService):
        self.supabase = supabase
        self.email_service = email_service

    def submit_inquiry(self, inquiry_data: InquiryCreate) -> None:
        """Store the inquiry, then notify the sales mailbox.

        The notification is best effort: once the row is stored the inquiry counts
        as submitted even if the mail server is down.
        """
        fields = inquiry_data.model_dump()
        # No returning select: anonymous callers may insert but not read inquiries
        run_query(
            self.supabase.table("inquiries").insert(fields, returning=ReturnMethod.minimal),
            "inquiries", "create",
        )
        logger.info("Inquiry received: %s", inquiry_data.inquiry_type)
        if not self.email_service.send_email(
            [settings.mail_to],
            f"[New Inquiry] {inquiry_data.inquiry_type} - {inquiry_data.person_name}",
            self._text_body(fields),
            html_body=self._html_body(fields),
        ):
            logger.warning("Inquiry notification was not sent")

    @staticmethod
    def _text_body(fields: dict) -> str:
        lines = ["New Inquiry Received:", ""]
        lines += [f"{label}: {fields.get(key) or ''}" for label, key in NOTIFICATION_FIELDS]
        lines += ["", "Message:", fields["message"]]
        return "\n".join(lines)

    @staticmethod
    def _html_body(fields: dict) -> str:
        items = "".join(
            f"<li><strong>{label}:</strong> {escape(str(fields.get(key) or ''))}</li>"
            for label, key in NOTIFICATION_FIELDS
        )
        return (
            f"<h2>New Inquiry Received</h2><ul>{items}</ul>"
            f"<h3>Message:</h3><p style=\"white-space: pre-wrap;\">{escape(fields['message'])}</p>"
        )
