import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="KeyPool",
            fields=[
                (
                    "tier",
                    models.CharField(
                        choices=[("1 day", "1 Day"), ("7 days", "7 Days"), ("30 days", "30 Days")],
                        max_length=16,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "key_pools",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="SeenKey",
            fields=[
                ("value", models.CharField(max_length=255, primary_key=True, serialize=False)),
                (
                    "first_tier",
                    models.CharField(
                        choices=[("1 day", "1 Day"), ("7 days", "7 Days"), ("30 days", "30 Days")],
                        max_length=16,
                    ),
                ),
                ("first_seen_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "seen_keys",
                "ordering": ["first_seen_at"],
            },
        ),
        migrations.CreateModel(
            name="PoolKey",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("value", models.CharField(max_length=255, unique=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("available", "Available"),
                            ("assigned", "Assigned"),
                            ("removed", "Removed"),
                        ],
                        default="available",
                        max_length=16,
                    ),
                ),
                ("added_at", models.DateTimeField()),
                ("status_changed_at", models.DateTimeField(blank=True, null=True)),
                (
                    "pool",
                    models.ForeignKey(
                        db_column="tier",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="keys",
                        to="inventory.keypool",
                    ),
                ),
            ],
            options={
                "db_table": "pool_keys",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["pool", "status"], name="pool_keys_tier_status_idx")
                ],
            },
        ),
    ]
