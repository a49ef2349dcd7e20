import logging

from django.conf import settings
from django.shortcuts import redirect, render
from django.utils.decorators import method_decorator
from django.views import View
from django_ratelimit.decorators import ratelimit
from rest_framework import permissions, status
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from rest_framework.views import APIView

from .conf import get_contact_settings
from .forms import ContactForm, submitted_fields
from .models import ContactSubmission
from .serializers import ContactSubmissionSerializer
from .services import build_contact_service

logger = logging.getLogger("django")


def conditional_ratelimit(*args, **kwargs):
    def decorator(func):
        if settings.TESTING:
            return func
        return ratelimit(*args, **kwargs)(func)

    return decorator


def contact_rate(group, request):
    return get_contact_settings().rate_limit


@method_decorator(
    conditional_ratelimit(key="ip", rate=contact_rate, method="POST", block=True),
    name="post",
)
class ContactView(View):
    template_name = "contact/contact.html"
    # a prebuilt ContactService may be passed through as_view(service=...)
    service = None

    def get_service(self):
        if self.service is not None:
            return self.service
        return build_contact_service()

    def get(self, request, *args, **kwargs):
        return render(request, self.template_name, {"form": ContactForm()})

    def post(self, request, *args, **kwargs):
        service = self.get_service()

        if service.config.validate:
            form = ContactForm(request.POST)
            if not form.is_valid():
                logger.warning(
                    "Contact submission rejected due to invalid data.",
                    extra={"errors": form.errors.get_json_data()},
                )
                return render(
                    request,
                    self.template_name,
                    {"form": form},
                    status=status.HTTP_400_BAD_REQUEST,
                )
            fields = form.cleaned_data
        else:
            fields = submitted_fields(request.POST)

        service.send(fields)
        return redirect("contact")


class StandardResultsSetPagination(PageNumberPagination):
    page_size = 5
    page_size_query_param = "page_size"
    max_page_size = 100


class ContactSubmissionView(APIView):
    permission_classes = [permissions.IsAdminUser]

    def get(self, request, pk=None, *args, **kwargs):
        if pk is not None:
            try:
                submission = ContactSubmission.objects.get(pk=pk)
            except ContactSubmission.DoesNotExist:
                return Response(status=status.HTTP_404_NOT_FOUND)
            serializer = ContactSubmissionSerializer(submission)
            return Response(serializer.data)

        submissions = ContactSubmission.objects.all()
        paginator = StandardResultsSetPagination()
        page = paginator.paginate_queryset(submissions, request, view=self)
        serializer = ContactSubmissionSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)

    def delete(self, request, pk, *args, **kwargs):
        try:
            submission = ContactSubmission.objects.get(pk=pk)
        except ContactSubmission.DoesNotExist:
            return Response(status=status.HTTP_404_NOT_FOUND)

        submission.delete()
        logger.info(f"Deleted contact submission with pk={pk}.")
        return Response(status=status.HTTP_204_NO_CONTENT)
