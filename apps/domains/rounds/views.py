import logging

from django.db import IntegrityError, transaction
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import Round
from .serializers import RoundCreateSerializer, RoundSerializer

logger = logging.getLogger(__name__)


class RoundListView(APIView):
    """특정 분반의 모든 회차 (회차 번호 오름차순)"""

    def get(self, request):
        class_name = (request.query_params.get("className") or "").strip()
        if not class_name:
            return Response({"error": "분반 이름은 필수입니다."}, status=400)

        qs = Round.objects.filter(class_name=class_name).order_by("round_number")
        return Response(RoundSerializer(qs, many=True).data)


class RoundCreateView(APIView):

    def post(self, request):
        s = RoundCreateSerializer(data=request.data)
        if not s.is_valid():
            return Response({"error": "분반과 회차 번호는 필수입니다."}, status=400)

        data = s.validated_data
        try:
            with transaction.atomic():
                obj = Round.objects.create(
                    class_name=data["className"],
                    round_number=data["roundNumber"],
                    round_name=data.get("roundName") or "",
                )
        except IntegrityError:
            return Response({"error": "이미 존재하는 회차 번호입니다."}, status=409)

        logger.info("round created | id=%s | class=%s | n=%s", obj.id, obj.class_name, obj.round_number)
        return Response(
            {"id": obj.id, "round_number": obj.round_number, "round_name": obj.round_name},
            status=status.HTTP_201_CREATED,
        )
