# Generated manually

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Score",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("class_name", models.CharField(max_length=100)),
                ("round", models.PositiveIntegerField()),
                ("date", models.DateField(blank=True, null=True)),
                ("student_name", models.CharField(blank=True, max_length=50)),
                ("phone", models.CharField(max_length=20)),
                ("school", models.CharField(blank=True, max_length=100)),
                ("test_score", models.FloatField(blank=True, null=True)),
                ("total_question", models.PositiveIntegerField(blank=True, null=True)),
                ("wrong_questions", models.TextField(blank=True, default="")),
                ("assignment1", models.CharField(blank=True, max_length=20)),
                ("assignment2", models.CharField(blank=True, max_length=20)),
                ("memo", models.TextField(blank=True, default="")),
            ],
            options={
                "db_table": "scores",
                "ordering": ["-date", "round", "student_name"],
                "unique_together": {("class_name", "round", "phone")},
                "indexes": [
                    models.Index(fields=["phone", "class_name", "round"], name="scores_phone_scope_idx"),
                ],
            },
        ),
    ]
