from django.contrib import admin

from .models import ContactSubmission


@admin.register(ContactSubmission)
class ContactSubmissionAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "service", "timestamp", "created_at")
    search_fields = ("name", "email", "message")
    readonly_fields = ("timestamp", "created_at")
