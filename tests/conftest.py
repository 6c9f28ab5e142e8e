import pytest


@pytest.fixture(autouse=True)
def contact_settings(settings, tmp_path):
    settings.RATELIMIT_ENABLE = False
    settings.CONTACT_RELAY_VARIANT = "minimal"
    settings.CONTACT_DOCUMENT_STORE = "database"
    settings.CONTACT_LOCAL_STORAGE_DIR = str(tmp_path / "storage")
