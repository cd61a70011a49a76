import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Assignment",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("order_id", models.CharField(max_length=64, unique=True)),
                ("user_id", models.CharField(db_index=True, max_length=128)),
                ("key_value", models.CharField(max_length=255, unique=True)),
                (
                    "tier",
                    models.CharField(
                        choices=[("1 day", "1 Day"), ("7 days", "7 Days"), ("30 days", "30 Days")],
                        max_length=16,
                    ),
                ),
                ("product_type", models.CharField(max_length=64)),
                ("assigned_at", models.DateTimeField()),
                ("expires_at", models.DateTimeField()),
            ],
            options={
                "db_table": "assignments",
                "ordering": ["-assigned_at"],
                "indexes": [
                    models.Index(
                        fields=["user_id", "-assigned_at"], name="assignments_user_recent_idx"
                    ),
                    models.Index(fields=["tier"], name="assignments_tier_idx"),
                ],
            },
        ),
    ]
