import logging
from smtplib import SMTPException

from celery import shared_task

from .conf import get_contact_settings
from .mail import build_contact_email

logger = logging.getLogger("django")


@shared_task(
    bind=True, max_retries=3, default_retry_delay=60
)  # Retry up to 3 times with a 60-second delay
def send_contact_email(self, fields):
    """Deliver a contact notification outside the request cycle."""
    config = get_contact_settings()
    message = build_contact_email(fields, config)
    try:
        message.send(fail_silently=False)
    except (SMTPException, OSError) as e:
        logger.error(
            f"Queued contact email to {config.send_email_to} failed: {e}",
            exc_info=True,
        )
        raise self.retry(exc=e)

    logger.info(f"Queued contact email sent to {config.send_email_to}")
    return f"Contact email sent to {config.send_email_to}"


class QueuedContactMailer:
    """Hands contact notifications to Celery instead of sending inline."""

    def __init__(self, config):
        self.config = config

    def send(self, fields):
        send_contact_email.delay(dict(fields))
        return 1
