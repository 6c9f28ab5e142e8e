from django.db import models

SERVICE_NAMES = {
    "web-dev": "Web Development",
    "app-dev": "App Development",
    "crm-erp": "CRM / ERP Solutions",
    "digital-marketing": "Digital Marketing",
}


def get_service_name(service_id):
    """Readable label for a service identifier; unknown ids pass through."""
    return SERVICE_NAMES.get(service_id) or service_id


class ContactSubmission(models.Model):
    name = models.TextField()
    email = models.TextField()
    phone = models.TextField(blank=True)
    service = models.TextField(blank=True)
    message = models.TextField(blank=True)
    timestamp = models.CharField(max_length=40)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("-created_at", "-id")

    def __str__(self):
        return f"ContactSubmission from {self.name}"

    @property
    def service_name(self):
        return get_service_name(self.service)
