from django import forms

CONTACT_FIELDS = ("name", "email", "message")


class ContactForm(forms.Form):
    name = forms.CharField(max_length=255)
    email = forms.EmailField(max_length=254)
    message = forms.CharField(widget=forms.Textarea)


def submitted_fields(data):
    """Reduce posted data to the contact fields, dropping any other keys.

    Values are kept exactly as submitted; a missing field becomes an empty
    string.
    """
    return {field: data.get(field) or "" for field in CONTACT_FIELDS}
