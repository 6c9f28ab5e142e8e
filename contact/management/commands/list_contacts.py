import json

from django.core.management.base import BaseCommand

from contact.models import get_service_name
from contact.relay import list_submissions


class Command(BaseCommand):
    help = "List stored contact submissions, most recent first"

    def add_arguments(self, parser):
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print the submissions as a JSON array",
        )

    def handle(self, *args, **options):
        submissions = list_submissions()

        if options["json"]:
            self.stdout.write(json.dumps(submissions, indent=2, default=str))
            return

        if not submissions:
            self.stdout.write(self.style.WARNING("No contact submissions found"))
            return

        for submission in submissions:
            self.stdout.write(
                f"{submission.get('timestamp', '')}  {submission.get('name', '')} "
                f"<{submission.get('email', '')}>  "
                f"{get_service_name(submission.get('service', ''))}"
            )
        self.stdout.write(
            self.style.SUCCESS(f"{len(submissions)} submission(s) listed")
        )
