import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Officer",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created At")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Updated At")),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255, verbose_name="Name")),
                ("rank", models.CharField(max_length=100, verbose_name="Rank")),
                ("badge_number", models.CharField(blank=True, default="", max_length=50, verbose_name="Badge Number")),
                ("contact", models.CharField(blank=True, default="", max_length=255, verbose_name="Contact")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="%(class)s_records", to=settings.AUTH_USER_MODEL, verbose_name="Owning Account")),
            ],
            options={
                "verbose_name": "Officer",
                "verbose_name_plural": "Officers",
                "ordering": ["name"],
            },
        ),
    ]
