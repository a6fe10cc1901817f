from django.contrib import admin
from ..models import Material, QuestionRegion


class QuestionRegionInline(admin.TabularInline):
    model = QuestionRegion
    extra = 0
    ordering = ("question_number",)


@admin.register(Material)
class MaterialAdmin(admin.ModelAdmin):
    list_display = ("id", "material_name", "round", "total_pages", "uploaded_at")
    list_filter = ("round__class_name",)
    ordering = ("-uploaded_at",)
    inlines = [QuestionRegionInline]
