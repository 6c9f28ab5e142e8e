import logging

import firebase_admin
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from firebase_admin import credentials, firestore

from contact.models import ContactSubmission
from contact.serializers import ContactSubmissionSerializer

logger = logging.getLogger("contact")

FIELDS = ("name", "email", "phone", "service", "message", "timestamp")


class DatabaseDocumentStore:
    """Keeps a copy of every submission in the project database."""

    name = "database"

    def send(self, payload):
        submission = ContactSubmission.objects.create(
            **{field: payload.get(field) or "" for field in FIELDS}
        )
        logger.info(f"Saved submission to the database with ID: {submission.pk}")
        return str(submission.pk)

    def list(self):
        submissions = ContactSubmission.objects.order_by("-created_at", "-id")
        return ContactSubmissionSerializer(submissions, many=True).data


class FirestoreDocumentStore:
    """Keeps a copy of every submission in the Firestore ``contacts`` collection."""

    name = "firestore"
    collection = "contacts"

    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        if self._client is None:
            try:
                app = firebase_admin.get_app()
            except ValueError:
                if settings.FIREBASE_CREDENTIALS:
                    cred = credentials.Certificate(settings.FIREBASE_CREDENTIALS)
                else:
                    cred = credentials.ApplicationDefault()
                app = firebase_admin.initialize_app(cred)
            self._client = firestore.client(app)
        return self._client

    def send(self, payload):
        document = {field: payload.get(field) or "" for field in FIELDS}
        document["createdAt"] = firestore.SERVER_TIMESTAMP
        _, doc_ref = self.client.collection(self.collection).add(document)
        logger.info(f"Saved submission to Firestore with ID: {doc_ref.id}")
        return doc_ref.id

    def list(self):
        query = self.client.collection(self.collection).order_by(
            "createdAt", direction=firestore.Query.DESCENDING
        )
        return [{"id": doc.id, **doc.to_dict()} for doc in query.stream()]


DOCUMENT_STORES = {
    "database": DatabaseDocumentStore,
    "firestore": FirestoreDocumentStore,
}


def get_document_store(name=None):
    name = name or settings.CONTACT_DOCUMENT_STORE
    try:
        return DOCUMENT_STORES[name]()
    except KeyError:
        raise ImproperlyConfigured(f"Unknown contact document store: {name}")
