import logging
import os
from smtplib import SMTPException

from django.conf import settings
from django.test import TestCase

from contact.conf import ContactSettings
from contact.repositories import ContactSubmissionRepository
from contact.services import ContactService


class FailingMailer:
    def send(self, fields):
        raise SMTPException("mail server unreachable")


class LoggingTest(TestCase):
    def setUp(self):
        self.log_file_path = os.path.join(settings.LOGS_DIR, "django_errors.log")

    def read_log(self):
        with open(self.log_file_path, "r") as log_file:
            return log_file.read()

    def clear_message(self, message):
        contents = self.read_log()
        with open(self.log_file_path, "w") as log_file:
            log_file.write(contents.replace(message, ""))

    def test_error_logging_to_file(self):
        test_message = "This is a test error message for logging."

        logger = logging.getLogger("django")
        logger.error(test_message)

        self.assertTrue(os.path.exists(self.log_file_path), "Log file does not exist.")
        self.assertIn(test_message, self.read_log())
        self.clear_message(test_message)

    def test_failed_contact_delivery_is_logged_to_file(self):
        config = ContactSettings(
            send_email_to="logging-check@example.com",
            from_email="noreply@example.com",
        )
        service = ContactService(FailingMailer(), ContactSubmissionRepository(), config)

        with self.assertRaises(SMTPException):
            service.send({"name": "Ada", "email": "ada@example.com", "message": "hi"})

        expected = "Contact email to logging-check@example.com failed"
        self.assertIn(expected, self.read_log())
        self.clear_message(expected)

    def test_info_messages_stay_out_of_error_file(self):
        test_message = "Contact submission info line that must not be persisted."

        logging.getLogger("django").info(test_message)

        if os.path.exists(self.log_file_path):
            self.assertNotIn(test_message, self.read_log())
