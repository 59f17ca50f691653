import json
import os
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from vocab.models import Deck, User, Word


class Command(BaseCommand):
    help = "Replace all users, decks and words with the demo data set"

    def add_arguments(self, parser):
        parser.add_argument(
            "--file", default="MOCK_DATA.json", help="JSON file name to load data from"
        )

    def handle(self, *args, **options):
        file_name = os.path.basename(options.get("file") or "MOCK_DATA.json")
        json_file_path = os.path.join(os.path.dirname(__file__), file_name)

        try:
            with open(json_file_path, encoding="utf-8") as json_file:
                data = json.load(json_file)
        except (OSError, ValueError) as e:
            raise CommandError(f"Error loading data: {e}") from e

        with transaction.atomic():
            # Cascades to decks, words and review records
            User.objects.all().delete()
            self.stdout.write(self.style.SUCCESS("All existing user data has been deleted"))

            User.objects.create_superuser(
                "testuser", email="testuser@example.com", password="testpassword"
            )
            for username in data.get("users", []):
                User.objects.create_user(
                    username,
                    email=f"{username}@example.com",
                    password="testpassword",
                )

            for spec in data.get("decks", []):
                owner = User.objects.get(username=spec["owner"])
                deck = Deck.objects.create(
                    user=owner,
                    name=spec["name"],
                    description=spec.get("description", ""),
                )
                words = [
                    Word.objects.create(
                        user=owner,
                        word=item["word"],
                        translation=item["translation"],
                        example=item.get("example", ""),
                        pronunciation=item.get("pronunciation", ""),
                        tags=item.get("tags", []),
                    )
                    for item in spec.get("words", [])
                ]
                deck.words.add(*words)

        self.stdout.write(
            self.style.SUCCESS(f"Mock data loaded successfully from {file_name}")
        )
