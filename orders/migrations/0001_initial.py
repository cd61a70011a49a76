import uuid

import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("user_id", models.CharField(db_index=True, max_length=128)),
                ("product_type", models.CharField(max_length=64)),
                (
                    "tier",
                    models.CharField(
                        choices=[("1 day", "1 Day"), ("7 days", "7 Days"), ("30 days", "30 Days")],
                        max_length=16,
                    ),
                ),
                ("amount", models.DecimalField(decimal_places=2, max_digits=12)),
                ("currency", models.CharField(max_length=3)),
                ("payment_method", models.CharField(max_length=32)),
                (
                    "payment_status",
                    models.CharField(
                        choices=[("pending", "Pending"), ("paid", "Paid"), ("failed", "Failed")],
                        default="pending",
                        max_length=16,
                    ),
                ),
                (
                    "fulfillment_status",
                    models.CharField(
                        choices=[
                            ("pending_payment", "Pending payment"),
                            ("fulfilling", "Fulfilling"),
                            ("fulfilled", "Fulfilled"),
                            ("out_of_stock", "Out of stock"),
                        ],
                        default="pending_payment",
                        max_length=20,
                    ),
                ),
                ("payment_event_id", models.CharField(blank=True, max_length=128, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("paid_at", models.DateTimeField(blank=True, null=True)),
                ("fulfilled_at", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "db_table": "orders",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["tier", "fulfillment_status"], name="orders_tier_fulfillment_idx"
                    ),
                    models.Index(fields=["user_id", "-created_at"], name="orders_user_recent_idx"),
                ],
            },
        ),
    ]
