# apps/domains/interactions/materials/views/note_image.py
from __future__ import annotations

import logging
from typing import Optional

from rest_framework.response import Response
from rest_framework.views import APIView

from academy.adapters.db.django.repositories_rounds import round_scope_get
from academy.domain.materials.errors import NoteImageError

from ..serializers import NoteImageSerializer
from ..services import note_images as note_image_service

logger = logging.getLogger(__name__)

SKIPPED_HEADER = "X-Skipped-Questions"


def _int_or_none(v) -> Optional[int]:
    if v in (None, ""):
        return None
    return int(v)


class NoteImageGenerateView(APIView):
    """
    학생 오답 + 문항 영역 좌표로 오답노트 이미지 실시간 생성

    Query Params
    - studentPhone (required)
    - roundId  또는  className + round

    Response
    - 200 [{question_number, imageData}] (문항 번호 오름차순, 없으면 [])
    - 500 {error} (원본 문서 스토리지/PDF 오류)

    좌표가 잘못된 문항은 건너뛰고, 번호를 X-Skipped-Questions 헤더로 알려준다.
    """

    def get(self, request):
        phone = (request.query_params.get("studentPhone") or "").strip()
        class_name = (request.query_params.get("className") or "").strip()

        try:
            round_id = _int_or_none(request.query_params.get("roundId"))
            round_number = _int_or_none(request.query_params.get("round"))
        except (TypeError, ValueError):
            return Response({"error": "회차 값이 올바르지 않습니다."}, status=400)

        if not phone or (round_id is None and not (class_name and round_number is not None)):
            return Response({"error": "studentPhone과 roundId(또는 className, round)는 필수입니다."}, status=400)

        scope = round_scope_get(round_id=round_id, class_name=class_name or None, round_number=round_number)
        if scope is None:
            return Response([])

        try:
            batch = note_image_service.generate_for_student(student_phone=phone, scope=scope)
        except NoteImageError:
            logger.exception("오답노트 이미지 생성 오류 | round_id=%s", scope.round_id)
            return Response({"error": "오답노트 생성 중 오류가 발생했습니다."}, status=500)

        resp = Response(NoteImageSerializer(batch.images, many=True).data)
        if batch.skipped:
            resp[SKIPPED_HEADER] = ",".join(str(n) for n in batch.skipped)
        return resp
