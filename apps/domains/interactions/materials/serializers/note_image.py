from rest_framework import serializers


class NoteImageSerializer(serializers.Serializer):
    """
    오답노트 이미지 1개
    - imageData: 잘라낸 1페이지 PDF의 data URI (프론트에서 바로 사용)
    """
    question_number = serializers.IntegerField()
    imageData = serializers.CharField(source="image_data")
