from django.db import migrations

TIERS = ("1 day", "7 days", "30 days")


def create_pools(apps, schema_editor):
    KeyPool = apps.get_model("inventory", "KeyPool")
    for tier in TIERS:
        KeyPool.objects.get_or_create(tier=tier)


class Migration(migrations.Migration):

    dependencies = [
        ("inventory", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(create_pools, migrations.RunPython.noop),
    ]
