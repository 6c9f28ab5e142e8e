"""
Submission relay strategies.

A relay takes the fields of a contact form, stamps them with the time the
server received them and hands them to its destinations. Which relay runs is
a deployment choice made through ``CONTACT_RELAY_VARIANT``:

* ``minimal``: Google Sheets, then email.
* ``extended``: document store, then Google Sheets, then email.
* ``client``: remote contact endpoint, falling back to the document store
  and finally to local storage.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

import requests
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .client import ContactClient
from .destinations import (EmailNotification, GoogleSheets, LocalStorage,
                           get_document_store)
from .exceptions import RemoteSubmissionError

logger = logging.getLogger("contact")

FORM_FIELDS = ("name", "email", "phone", "service", "message")
SUCCESS_MESSAGE = "Contact form submitted successfully"
FALLBACK_ID = "demo-id"


@dataclass
class RelayResult:
    success: bool
    message: str
    id: str = None


def get_timestamp():
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def stamp(data):
    """Copy the form fields and add the server-side receipt timestamp."""
    payload = {field: data.get(field) or "" for field in FORM_FIELDS}
    payload["timestamp"] = get_timestamp()
    return payload


class SequentialRelay:
    """
    Runs each destination in order. The first failure stops the relay and
    is raised to the caller; destinations already written are left as is.
    """

    def __init__(self, destinations):
        self.destinations = list(destinations)

    def submit(self, data):
        payload = stamp(data)
        logger.info(f"Processing contact form submission: {payload}")

        submission_id = None
        for destination in self.destinations:
            try:
                result = destination.send(payload)
            except Exception:
                logger.error(
                    f"Contact destination {destination.name} failed", exc_info=True
                )
                raise
            logger.info(f"Contact destination {destination.name} done")
            if submission_id is None:
                submission_id = result

        return RelayResult(True, SUCCESS_MESSAGE, submission_id)


class ClientRelay:
    """Remote endpoint first, then the document store, then local storage."""

    def __init__(self, client=None, store=None, local=None):
        self.client = client or ContactClient()
        self.store = store or get_document_store()
        self.local = local or LocalStorage()

    def submit(self, data):
        try:
            submission_id = self.client.submit(data)
            return RelayResult(True, SUCCESS_MESSAGE, submission_id)
        except (requests.exceptions.RequestException, RemoteSubmissionError) as e:
            logger.error(f"Error submitting contact form: {e}")

        payload = stamp(data)
        try:
            submission_id = self.store.send(payload)
            logger.info(f"Saved to {self.store.name} as fallback")
            return RelayResult(True, SUCCESS_MESSAGE, submission_id)
        except Exception as e:
            logger.error(f"{self.store.name} fallback failed: {e}", exc_info=True)

        self.local.append(payload)
        logger.info("Saved to local storage as final fallback")
        return RelayResult(True, SUCCESS_MESSAGE, FALLBACK_ID)


def build_minimal_relay():
    return SequentialRelay([GoogleSheets(), EmailNotification()])


def build_extended_relay():
    return SequentialRelay([get_document_store(), GoogleSheets(), EmailNotification()])


RELAY_VARIANTS = {
    "minimal": build_minimal_relay,
    "extended": build_extended_relay,
    "client": ClientRelay,
}


def get_relay(variant=None):
    variant = variant or settings.CONTACT_RELAY_VARIANT
    try:
        builder = RELAY_VARIANTS[variant]
    except KeyError:
        raise ImproperlyConfigured(f"Unknown contact relay variant: {variant}")
    return builder()


def list_submissions(store=None, local=None):
    """
    All stored submissions, most recent first. Falls back to the local
    storage copy when the document store can't be read.
    """
    store = store or get_document_store()
    try:
        return store.list()
    except Exception as e:
        logger.error(f"Could not list submissions from {store.name}: {e}")
        local = local or LocalStorage()
        return local.list()
