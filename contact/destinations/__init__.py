from .documents import DatabaseDocumentStore, FirestoreDocumentStore, get_document_store
from .mailer import EmailNotification
from .local import LocalStorage
from .sheets import GoogleSheets

__all__ = [
    "DatabaseDocumentStore",
    "EmailNotification",
    "FirestoreDocumentStore",
    "GoogleSheets",
    "LocalStorage",
    "get_document_store",
]
