"""
https://docs.celeryq.dev/en/stable/django/first-steps-with-django.html
"""

import os

from django.conf import settings

from celery import Celery

# set the default Django settings module for the 'celery' app.
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "contactsite.settings")

app = Celery("contactsite_celery_app")

# the CELERY namespace makes celery config keys take the `CELERY` prefix
app.config_from_object("django.conf:settings", namespace="CELERY")

# discover and load tasks.py from all registered Django apps
app.autodiscover_tasks(lambda: settings.INSTALLED_APPS)
