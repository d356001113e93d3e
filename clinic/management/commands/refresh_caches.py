from django.core.management.base import BaseCommand
from django.utils import timezone

from clinic.services.reference import refresh_reference_lists


class Command(BaseCommand):
    help = "Warm and refresh the reference-data caches (patients, medicines, shifts, rooms, departments)."

    def handle(self, *args, **options):
        now = timezone.now()
        keys_refreshed = refresh_reference_lists()
        for key in keys_refreshed:
            self.stdout.write(f'refreshed {key}')
        self.stdout.write(self.style.SUCCESS(f"Refreshed {len(keys_refreshed)} keys at {now}"))
