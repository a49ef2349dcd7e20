import logging

from django.db import DatabaseError

from .conf import get_contact_settings
from .mail import ContactMailer
from .repositories import ContactSubmissionRepository
from .tasks import QueuedContactMailer

logger = logging.getLogger("django")


class ContactService:
    """Runs one contact submission: notify the recipient, then store the record.

    The two steps are not wrapped in a transaction. If the insert fails after
    the email went out, the email is not recalled; failures of either step are
    logged and re-raised.
    """

    def __init__(self, mailer, repository, config):
        self.mailer = mailer
        self.repository = repository
        self.config = config

    def send(self, fields):
        try:
            self.mailer.send(fields)
        except Exception as e:
            logger.error(
                f"Contact email to {self.config.send_email_to} failed: {e}",
                exc_info=True,
            )
            raise

        try:
            submission = self.repository.create(fields)
        except DatabaseError as e:
            logger.error(f"Storing contact submission failed: {e}", exc_info=True)
            raise

        logger.info(
            "Contact submission stored.",
            extra={"submission_id": submission.pk},
        )
        return submission


def build_contact_service(config=None):
    config = config or get_contact_settings()
    if config.queue_mail:
        mailer = QueuedContactMailer(config)
    else:
        mailer = ContactMailer(config)
    return ContactService(mailer, ContactSubmissionRepository(), config)
