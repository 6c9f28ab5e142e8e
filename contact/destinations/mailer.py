import logging
import os
from datetime import datetime, timezone

from django.conf import settings
from django.core.mail import EmailMultiAlternatives, get_connection
from django.utils.html import escape

from contact.exceptions import ConfigurationError
from contact.models import get_service_name

logger = logging.getLogger("contact")


def _clean_header(s):
    return (s or "").replace("\r", " ").replace("\n", " ").strip()


def build_subject(payload):
    return _clean_header(f"New Contact Form Submission - {payload['name']}")


def build_text_message(payload):
    phone = payload["phone"] or "Not provided"
    return f"""
New Contact Form Submission

Name: {payload['name']}
Email: {payload['email']}
Phone: {phone}
Service: {get_service_name(payload['service'])}
Message: {payload['message']}
Timestamp: {payload['timestamp']}

---
This is an automated message from Softvex Contact Form
""".strip()


def build_html_message(payload):
    name = escape(payload["name"])
    email = escape(payload["email"])
    phone = escape(payload["phone"] or "Not provided")
    service = escape(get_service_name(payload["service"]))
    message = escape(payload["message"])
    timestamp = escape(payload["timestamp"])
    year = datetime.now(timezone.utc).year
    return f"""
        <!DOCTYPE html>
        <html>
        <head>
            <style>
                body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; }}
                .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
                .header {{ background: linear-gradient(135deg, #dcfce7 0%, #e0f2fe 100%); padding: 20px; text-align: center; border-radius: 8px 8px 0 0; }}
                .header h1 {{ margin: 0; color: #1a1a1a; font-size: 24px; }}
                .content {{ background: #ffffff; padding: 30px; border: 1px solid #e5e5e5; }}
                .field {{ margin-bottom: 20px; }}
                .label {{ font-weight: bold; color: #555; font-size: 12px; text-transform: uppercase; letter-spacing: 1px; }}
                .value {{ margin-top: 5px; color: #1a1a1a; font-size: 16px; }}
                .message-box {{ background: #f9fafb; padding: 15px; border-left: 4px solid #22c55e; margin-top: 10px; }}
                .footer {{ background: #f9fafb; padding: 15px; text-align: center; font-size: 12px; color: #666; border-radius: 0 0 8px 8px; }}
            </style>
        </head>
        <body>
            <div class="container">
                <div class="header">
                    <h1>New Contact Form Submission</h1>
                </div>
                <div class="content">
                    <div class="field">
                        <div class="label">Name</div>
                        <div class="value">{name}</div>
                    </div>
                    <div class="field">
                        <div class="label">Email</div>
                        <div class="value"><a href="mailto:{email}">{email}</a></div>
                    </div>
                    <div class="field">
                        <div class="label">Phone</div>
                        <div class="value">{phone}</div>
                    </div>
                    <div class="field">
                        <div class="label">Service Interested In</div>
                        <div class="value">{service}</div>
                    </div>
                    <div class="field">
                        <div class="label">Message</div>
                        <div class="message-box">{message}</div>
                    </div>
                    <div class="field">
                        <div class="label">Timestamp</div>
                        <div class="value">{timestamp}</div>
                    </div>
                </div>
                <div class="footer">
                    <p>This is an automated message from Softvex Contact Form</p>
                    <p>© {year} Softvex - Digital Tech Solutions</p>
                </div>
            </div>
        </body>
        </html>
    """


class EmailNotification:
    """Sends a text + HTML notification for each submission over SMTP."""

    name = "email"

    def get_connection(self):
        host = os.environ.get("EMAIL_HOST")
        user = os.environ.get("EMAIL_USER")
        password = os.environ.get("EMAIL_PASS")
        recipient = os.environ.get("EMAIL_TO")

        if not host or not user or not password or not recipient:
            logger.error("Missing email configuration")
            raise ConfigurationError("Email configuration is incomplete")

        secure = os.environ.get("EMAIL_SECURE") == "true"
        connection = get_connection(
            fail_silently=False,
            host=host,
            port=int(os.environ.get("EMAIL_PORT") or 587),
            username=user,
            password=password,
            use_ssl=secure,
            use_tls=not secure,
            timeout=settings.EMAIL_TIMEOUT,
        )
        return connection, user, recipient

    def send(self, payload):
        connection, user, recipient = self.get_connection()

        email = EmailMultiAlternatives(
            subject=build_subject(payload),
            body=build_text_message(payload),
            from_email=f'"Softvex Contact Form" <{user}>',
            to=[recipient],
            reply_to=[_clean_header(payload["email"])] if payload["email"] else None,
            connection=connection,
        )
        email.attach_alternative(build_html_message(payload), "text/html")
        email.send()

        logger.info(f"Email notification sent to {recipient}")
        return None
