from django.core.exceptions import ValidationError
from django.core.mail import EmailMessage
from django.core.validators import validate_email
from django.template.loader import render_to_string

BODY_TEMPLATE = "contact/email/contact.txt"


def _reply_to(address):
    if not address:
        return None
    try:
        validate_email(address)
    except ValidationError:
        return None
    return [address]


def build_contact_email(fields, config, connection=None):
    """Build the notification for one submission.

    The recipient always comes from ``config``; nothing in ``fields`` can
    change where the message goes.
    """
    body = render_to_string(BODY_TEMPLATE, {"fields": fields})
    return EmailMessage(
        subject=config.subject,
        body=body,
        from_email=config.from_email,
        to=[config.send_email_to],
        reply_to=_reply_to(fields.get("email")),
        connection=connection,
    )


class ContactMailer:
    """Sends contact notifications through a Django mail connection."""

    def __init__(self, config, connection=None):
        self.config = config
        self.connection = connection

    def send(self, fields):
        message = build_contact_email(fields, self.config, connection=self.connection)
        return message.send(fail_silently=False)
