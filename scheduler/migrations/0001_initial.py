import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("vocab", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ReviewRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("last_studied", models.DateTimeField(default=django.utils.timezone.now)),
                ("next_review", models.DateTimeField(default=django.utils.timezone.now)),
                ("times_studied", models.PositiveIntegerField(default=0)),
                ("times_correct", models.PositiveIntegerField(default=0)),
                ("consecutive_correct", models.PositiveIntegerField(default=0)),
                ("time_spent", models.FloatField(default=0)),
                ("history", models.JSONField(blank=True, default=list)),
                ("deck", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="review_records", to="vocab.deck")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="review_records", to=settings.AUTH_USER_MODEL)),
                ("word", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="review_records", to="vocab.word")),
            ],
            options={
                "indexes": [models.Index(fields=["user", "next_review"], name="review_user_next_idx")],
                "constraints": [models.UniqueConstraint(fields=("user", "word", "deck"), name="uniq_review_triple")],
            },
        ),
    ]
