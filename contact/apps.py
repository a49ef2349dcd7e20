from django.apps import AppConfig


class ContactConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "contact"
    verbose_name = "Contact"

    def ready(self):
        # connects the setting_changed receiver that refreshes ContactSettings
        import contact.conf  # noqa
