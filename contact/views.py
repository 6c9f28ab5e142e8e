import logging

from django.conf import settings
from django_ratelimit.decorators import ratelimit
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .relay import get_relay
from .serializers import ContactSubmissionSerializer

logger = logging.getLogger("contact")


def contact_rate(group, request):
    return settings.CONTACT_RATE_LIMIT


@ratelimit(key="ip", rate=contact_rate, method="POST", block=True)
def rate_limit_check(request):
    pass


class ContactSubmissionView(APIView):
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def http_method_not_allowed(self, request, *args, **kwargs):
        return Response(
            {"error": "Method not allowed"}, status=status.HTTP_405_METHOD_NOT_ALLOWED
        )

    def options(self, request, *args, **kwargs):
        # preflight: CORS headers only
        return Response(status=status.HTTP_200_OK)

    def post(self, request):
        rate_limit_check(request)

        serializer = ContactSubmissionSerializer(data=request.data)
        if not serializer.is_valid():
            logger.warning(f"Contact form validation failed: {serializer.errors}")
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            result = get_relay().submit(serializer.validated_data)
        except Exception as e:
            logger.error(f"Error processing contact form: {e}", exc_info=True)
            return Response(
                {
                    "success": False,
                    "message": str(e) or "Failed to process contact form",
                },
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        data = {"success": True, "message": result.message}
        if result.id:
            data["id"] = result.id
        return Response(data, status=status.HTTP_200_OK)


class HealthCheckView(APIView):
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        return Response({"status": "ok", "message": "Backend server is running"})
