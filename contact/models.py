from django.db import models


class ContactSubmission(models.Model):
    name = models.CharField(max_length=255, blank=True, default="")
    email = models.EmailField(blank=True, default="")
    message = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "contact_submissions"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"ContactSubmission from {self.name}"
