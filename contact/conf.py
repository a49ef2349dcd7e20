"""
Contact form configuration.

``settings.CONTACT`` is read once per process into an immutable
``ContactSettings``. The cached value is only dropped when Django reports a
change to the setting (``override_settings`` in tests).
"""
from dataclasses import dataclass
from functools import lru_cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.signals import setting_changed
from django.dispatch import receiver


@dataclass(frozen=True)
class ContactSettings:
    send_email_to: str
    from_email: str
    subject: str = "New contact form submission"
    validate: bool = False
    queue_mail: bool = False
    rate_limit: str = "5/m"

    @classmethod
    def from_dict(cls, values):
        recipient = values.get("SEND_EMAIL_TO")
        if not recipient:
            raise ImproperlyConfigured(
                "CONTACT['SEND_EMAIL_TO'] must name the address that receives "
                "contact form notifications."
            )
        return cls(
            send_email_to=recipient,
            from_email=values.get("FROM_EMAIL") or settings.DEFAULT_FROM_EMAIL,
            subject=values.get("SUBJECT") or cls.subject,
            validate=bool(values.get("VALIDATE", cls.validate)),
            queue_mail=bool(values.get("QUEUE_MAIL", cls.queue_mail)),
            rate_limit=values.get("RATE_LIMIT") or cls.rate_limit,
        )


@lru_cache(maxsize=None)
def get_contact_settings():
    return ContactSettings.from_dict(getattr(settings, "CONTACT", {}))


@receiver(setting_changed)
def reset_contact_settings(sender, setting, **kwargs):
    if setting in ("CONTACT", "DEFAULT_FROM_EMAIL"):
        get_contact_settings.cache_clear()
