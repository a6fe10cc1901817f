from django.contrib import admin

from .models import Round


@admin.register(Round)
class RoundAdmin(admin.ModelAdmin):
    list_display = ("id", "class_name", "round_number", "round_name", "created_at")
    list_filter = ("class_name",)
    ordering = ("class_name", "round_number")
