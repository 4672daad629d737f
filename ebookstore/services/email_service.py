import logging

from ebookstore.models.user import User
from ebookstore.utils.template import render_template

logger = logging.getLogger(__name__)

CHARSET = "UTF-8"
PASSWORD_RESET_SUBJECT = "Your Password has been Reset!"
PASSWORD_RESET_TEMPLATE = "password_reset.html"


class SESEmailClient:
    """Transactional e-mail through AWS SES."""

    def __init__(self, client, source_email: str):
        self.client = client
        self.source_email = source_email

    def send_email(self, to: str, subject: str, html: str) -> str:
        response = self.client.send_email(
            Source=self.source_email,
            Destination={"ToAddresses": [to], "CcAddresses": []},
            Message={
                "Subject": {"Charset": CHARSET, "Data": subject},
                "Body": {"Html": {"Charset": CHARSET, "Data": html}},
            },
        )
        message_id = response.get("MessageId", "")
        logger.info("email sent | subject=%s | message_id=%s", subject, message_id)
        return message_id

    def send_password_reset_email(self, user: User, new_password: str) -> None:
        html = render_template(
            PASSWORD_RESET_TEMPLATE,
            FirstName=user.first_name,
            NewPassword=new_password,
        )
        self.send_email(to=user.email, subject=PASSWORD_RESET_SUBJECT, html=html)
