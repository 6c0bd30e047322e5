from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ActivityRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("key", models.CharField(max_length=255, unique=True)),
                ("value", models.CharField(blank=True, max_length=32)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-updated_at"],
            },
        ),
        migrations.CreateModel(
            name="IdlePolicySetting",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("scope", models.CharField(
                    choices=[("site", "This site"), ("network", "Whole network (shared)")],
                    default="site", max_length=16, unique=True,
                )),
                ("max_idle_seconds", models.PositiveIntegerField(default=3600)),
                ("idle_message", models.TextField(default="You have been logged out due to inactivity.")),
                ("silent_logout", models.BooleanField(default=False)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Idle logout policy",
                "verbose_name_plural": "Idle logout policies",
            },
        ),
    ]
