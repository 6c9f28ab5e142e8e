import logging
from urllib.parse import urljoin

import requests
from django.conf import settings

from .exceptions import RemoteSubmissionError

logger = logging.getLogger("contact")


class ContactClient:
    """Talks to a deployed contact endpoint over HTTP."""

    def __init__(self, endpoint=None, timeout=None):
        self.endpoint = endpoint or settings.CONTACT_API_ENDPOINT
        self.timeout = timeout or settings.CONTACT_API_TIMEOUT

    def submit(self, data):
        """
        POST a contact payload to the remote endpoint.

        Args:
            data (dict): The form fields (name, email, phone, service, message).

        Returns:
            str: The id reported by the server, or ``"success"`` when it
            doesn't report one.

        Raises:
            RemoteSubmissionError: The server answered with a non-2xx status.
            requests.exceptions.RequestException: The request never completed.
        """
        headers = {"Content-Type": "application/json"}
        response = requests.post(
            self.endpoint, json=data, headers=headers, timeout=self.timeout
        )

        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = body.get("message") if isinstance(body, dict) else None
            raise RemoteSubmissionError(
                message or "Failed to submit form", status_code=response.status_code
            )

        result = response.json()
        logger.info(f"Contact form submitted successfully: {result}")
        if isinstance(result, dict) and result.get("id"):
            return result["id"]
        return "success"

    def health(self):
        response = requests.get(urljoin(self.endpoint, "/health"), timeout=self.timeout)
        response.raise_for_status()
        return response.json()
