import logging
import os

from google.oauth2 import service_account
from googleapiclient.discovery import build

from contact.exceptions import ConfigurationError

logger = logging.getLogger("contact")

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
TOKEN_URI = "https://oauth2.googleapis.com/token"
DEFAULT_RANGE = "Contact Form!A:F"


class GoogleSheets:
    """Appends one row per submission to a shared spreadsheet."""

    name = "google_sheets"

    def get_credentials(self):
        service_account_email = os.environ.get("GOOGLE_SERVICE_ACCOUNT_EMAIL")
        private_key = os.environ.get("GOOGLE_PRIVATE_KEY")
        sheet_id = os.environ.get("GOOGLE_SHEET_ID")

        if not service_account_email or not private_key or not sheet_id:
            logger.error("Missing Google Sheets configuration")
            raise ConfigurationError("Google Sheets configuration is incomplete")

        credentials = service_account.Credentials.from_service_account_info(
            {
                "type": "service_account",
                "client_email": service_account_email,
                # keys pasted into .env files carry escaped newlines
                "private_key": private_key.replace("\\n", "\n"),
                "token_uri": TOKEN_URI,
            },
            scopes=SCOPES,
        )
        sheet_range = os.environ.get("GOOGLE_SHEET_RANGE") or DEFAULT_RANGE
        return credentials, sheet_id, sheet_range

    def send(self, payload):
        credentials, sheet_id, sheet_range = self.get_credentials()

        sheets = build("sheets", "v4", credentials=credentials, cache_discovery=False)
        row = [
            payload["timestamp"],
            payload["name"],
            payload["email"],
            payload["phone"],
            payload["service"],
            payload["message"],
        ]
        sheets.spreadsheets().values().append(
            spreadsheetId=sheet_id,
            range=sheet_range,
            valueInputOption="USER_ENTERED",
            body={"values": [row]},
        ).execute()

        logger.info(f"Saved submission from {payload['name']} to Google Sheets")
        return None
