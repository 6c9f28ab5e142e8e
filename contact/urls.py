from django.urls import re_path

from .views import ContactSubmissionView, HealthCheckView

urlpatterns = [
    re_path(r"^api/contact/?$", ContactSubmissionView.as_view(), name="contacts"),
    re_path(r"^health/?$", HealthCheckView.as_view(), name="health"),
]
