from django.contrib import admin

from .models import Score


@admin.register(Score)
class ScoreAdmin(admin.ModelAdmin):
    list_display = ("id", "class_name", "round", "student_name", "phone", "test_score", "wrong_questions")
    list_filter = ("class_name", "round")
    search_fields = ("student_name", "phone")
