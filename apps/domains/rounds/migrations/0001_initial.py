# Generated manually

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Round",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("class_name", models.CharField(max_length=100)),
                ("round_number", models.PositiveIntegerField()),
                ("round_name", models.CharField(blank=True, max_length=100)),
            ],
            options={
                "db_table": "rounds",
                "ordering": ["class_name", "round_number"],
                "unique_together": {("class_name", "round_number")},
            },
        ),
    ]
