from rest_framework import serializers

from .models import Round


class RoundSerializer(serializers.ModelSerializer):
    class Meta:
        model = Round
        fields = ["id", "class_name", "round_number", "round_name"]


class RoundCreateSerializer(serializers.Serializer):
    className = serializers.CharField(max_length=100)
    roundNumber = serializers.IntegerField(min_value=1)
    roundName = serializers.CharField(max_length=100, required=False, allow_blank=True)
