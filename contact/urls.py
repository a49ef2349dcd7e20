from django.urls import path

from .views import ContactSubmissionView, ContactView

urlpatterns = [
    path("contact", ContactView.as_view(), name="contact"),
    path("api/contact/", ContactSubmissionView.as_view(), name="contacts"),
    path(
        "api/contact/<int:pk>/",
        ContactSubmissionView.as_view(),
        name="contact_submission",
    ),
]
