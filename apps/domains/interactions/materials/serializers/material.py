from rest_framework import serializers
from ..models import Material


class MaterialSerializer(serializers.ModelSerializer):
    round_id = serializers.IntegerField(read_only=True)
    class_name = serializers.CharField(source="round.class_name", read_only=True)
    round_number = serializers.IntegerField(source="round.round_number", read_only=True)

    class Meta:
        model = Material
        fields = [
            "id",
            "round_id",
            "class_name",
            "round_number",
            "material_name",
            "file_key",
            "file_url",
            "total_pages",
            "uploaded_at",
        ]


class MaterialUploadSerializer(serializers.Serializer):
    materialFile = serializers.FileField()
    roundId = serializers.IntegerField(min_value=1)
    materialName = serializers.CharField(max_length=255, required=False, allow_blank=True)
    totalPages = serializers.IntegerField(min_value=1, required=False, allow_null=True)
