import django_filters

from .models import Material


class MaterialFilter(django_filters.FilterSet):
    roundId = django_filters.NumberFilter(field_name="round_id")
    className = django_filters.CharFilter(field_name="round__class_name")

    class Meta:
        model = Material
        fields = []
