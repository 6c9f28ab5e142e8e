from rest_framework import serializers

from .models import ContactSubmission


class ContactSubmissionSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactSubmission
        fields = [
            "id",
            "name",
            "email",
            "phone",
            "service",
            "message",
            "timestamp",
            "created_at",
        ]
        read_only_fields = ["id", "timestamp", "created_at"]
        extra_kwargs = {
            "phone": {"required": False},
            "service": {"required": False},
            "message": {"required": False},
        }
