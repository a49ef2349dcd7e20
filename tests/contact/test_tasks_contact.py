from smtplib import SMTPException
from unittest.mock import MagicMock, patch

import pytest
from celery.exceptions import Retry

from contact.conf import ContactSettings
from contact.tasks import QueuedContactMailer, send_contact_email

FIELDS = {"name": "Ada", "email": "ada@example.com", "message": "hello"}


def test_send_contact_email_delivers_to_configured_recipient(settings, mailoutbox):
    settings.CONTACT = {"SEND_EMAIL_TO": "owner@example.com"}

    result = send_contact_email(FIELDS)

    assert result == "Contact email sent to owner@example.com"
    assert len(mailoutbox) == 1
    assert mailoutbox[0].to == ["owner@example.com"]
    assert "Ada" in mailoutbox[0].body


@patch("contact.tasks.build_contact_email")
def test_send_contact_email_raises_transport_errors(mock_build, settings):
    settings.CONTACT = {"SEND_EMAIL_TO": "owner@example.com"}
    message = MagicMock()
    message.send.side_effect = SMTPException("connection refused")
    mock_build.return_value = message

    with pytest.raises(SMTPException):
        send_contact_email(FIELDS)

    message.send.assert_called_once_with(fail_silently=False)


def test_send_contact_email_retry_policy():
    assert send_contact_email.max_retries == 3
    assert send_contact_email.default_retry_delay == 60


@patch("contact.tasks.send_contact_email.retry", side_effect=Retry("retry scheduled"))
@patch("contact.tasks.build_contact_email")
def test_send_contact_email_schedules_retry_on_transport_error(
    mock_build, mock_retry, settings, mailoutbox
):
    settings.CONTACT = {"SEND_EMAIL_TO": "owner@example.com"}
    error = SMTPException("connection refused")
    message = MagicMock()
    message.send.side_effect = error
    mock_build.return_value = message

    with pytest.raises(Retry):
        send_contact_email(FIELDS)

    mock_retry.assert_called_once_with(exc=error)
    assert len(mailoutbox) == 0


@patch("contact.tasks.send_contact_email.retry")
@patch("contact.tasks.build_contact_email")
def test_send_contact_email_does_not_retry_on_success(mock_build, mock_retry, settings):
    settings.CONTACT = {"SEND_EMAIL_TO": "owner@example.com"}
    mock_build.return_value = MagicMock()

    send_contact_email(FIELDS)

    mock_retry.assert_not_called()


@patch("contact.tasks.send_contact_email.delay")
def test_queued_mailer_enqueues_fields(mock_delay):
    config = ContactSettings(
        send_email_to="owner@example.com",
        from_email="noreply@example.com",
        queue_mail=True,
    )

    sent = QueuedContactMailer(config).send(FIELDS)

    assert sent == 1
    mock_delay.assert_called_once_with(FIELDS)
