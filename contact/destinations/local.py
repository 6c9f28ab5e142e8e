import json
import logging
import os
import tempfile
import threading
import time
import uuid

from django.conf import settings

logger = logging.getLogger("contact")

STORAGE_KEY = "softvex_contacts"

# one writer at a time per process; the file is replaced, never truncated
_storage_lock = threading.Lock()


class LocalStorage:
    """
    Last-resort store for submissions: a JSON array kept on local disk under
    a fixed storage key. Entries are only ever appended.
    """

    name = "local_storage"

    def __init__(self, directory=None, key=STORAGE_KEY):
        self.directory = directory or settings.CONTACT_LOCAL_STORAGE_DIR
        self.key = key

    @property
    def path(self):
        return os.path.join(self.directory, f"{self.key}.json")

    def load(self):
        if not os.path.exists(self.path):
            return []
        with open(self.path, "r") as storage_file:
            contents = storage_file.read()
        return json.loads(contents or "[]")

    def _write(self, submissions):
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as tmp_file:
                json.dump(submissions, tmp_file)
            os.replace(tmp_path, self.path)
        except Exception:
            os.remove(tmp_path)
            raise

    def append(self, payload):
        created_at = int(time.time() * 1000)
        entry_id = f"{created_at}-{uuid.uuid4().hex[:8]}"

        os.makedirs(self.directory, exist_ok=True)
        with _storage_lock:
            submissions = self.load()
            submissions.append({**payload, "id": entry_id, "createdAt": created_at})
            self._write(submissions)

        logger.info(f"Saved submission to local storage as {entry_id}")
        return entry_id

    def send(self, payload):
        return self.append(payload)

    def list(self):
        return list(reversed(self.load()))
