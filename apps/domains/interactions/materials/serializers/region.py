from rest_framework import serializers
from ..models import QuestionRegion


class QuestionRegionSerializer(serializers.ModelSerializer):
    material_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = QuestionRegion
        fields = ["id", "material_id", "question_number", "page_number", "x", "y", "width", "height"]


class RegionInputSerializer(serializers.Serializer):
    """편집기에서 그린 영역 1개 (camelCase 입력)"""
    questionNumber = serializers.IntegerField(min_value=1)
    pageNumber = serializers.IntegerField(min_value=1)
    x = serializers.FloatField(min_value=0)
    y = serializers.FloatField(min_value=0)
    width = serializers.FloatField(min_value=0)
    height = serializers.FloatField(min_value=0)


class DefineRegionsSerializer(serializers.Serializer):
    materialId = serializers.IntegerField(min_value=1)
    regions = RegionInputSerializer(many=True, allow_empty=True)

    def validate_regions(self, value):
        numbers = [r["questionNumber"] for r in value]
        if len(numbers) != len(set(numbers)):
            raise serializers.ValidationError("문항 번호가 중복되었습니다.")
        return value
