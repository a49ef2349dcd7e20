from .models import ContactSubmission


class ContactSubmissionRepository:
    model = ContactSubmission

    def create(self, fields):
        return self.model.objects.create(**fields)
