from django.contrib import admin
from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

from contact.admin import ContactSubmissionAdmin
from contact.models import ContactSubmission


class ContactSubmissionAdminTests(TestCase):
    def setUp(self):
        self.superuser = get_user_model().objects.create_superuser(
            username="admin", email="admin@example.com", password="pAssw0rd!"
        )
        self.client.force_login(self.superuser)
        ContactSubmission.objects.create(
            name="Ada", email="ada@example.com", message="hello"
        )
        ContactSubmission.objects.create(
            name="Grace", email="grace@example.com", message="compilers"
        )

    def test_contact_submission_is_registered(self):
        assert admin.site.is_registered(ContactSubmission)
        assert isinstance(admin.site._registry[ContactSubmission], ContactSubmissionAdmin)

    def test_changelist_lists_submissions(self):
        response = self.client.get(
            reverse("admin:contact_contactsubmission_changelist")
        )

        assert response.status_code == 200
        self.assertContains(response, "ada@example.com")
        self.assertContains(response, "grace@example.com")

    def test_changelist_search_matches_message(self):
        response = self.client.get(
            reverse("admin:contact_contactsubmission_changelist"), {"q": "compilers"}
        )

        assert response.status_code == 200
        self.assertContains(response, "grace@example.com")
        self.assertNotContains(response, "ada@example.com")
