import logging

from rest_framework.response import Response
from rest_framework.views import APIView

from academy.adapters.db.django import repositories_materials as materials_repo
from academy.domain.materials.entities import RegionSpec

from ..serializers import DefineRegionsSerializer

logger = logging.getLogger(__name__)


class DefineRegionsView(APIView):
    """
    편집기에서 그린 문항 영역 저장 (덮어쓰기)
    - 기존 영역 전체 삭제 -> 전체 삽입, 한 트랜잭션
    """

    def post(self, request):
        s = DefineRegionsSerializer(data=request.data)
        if not s.is_valid():
            return Response({"error": "필수 정보 누락", "detail": s.errors}, status=400)

        material_id = int(s.validated_data["materialId"])
        if materials_repo.material_get(material_id) is None:
            return Response({"error": "자료를 찾을 수 없습니다."}, status=404)

        specs = [
            RegionSpec(
                question_number=r["questionNumber"],
                page_number=r["pageNumber"],
                x=r["x"],
                y=r["y"],
                width=r["width"],
                height=r["height"],
            )
            for r in s.validated_data["regions"]
        ]

        count = materials_repo.region_replace_all(material_id, specs)
        logger.info("regions replaced | material_id=%s | count=%s", material_id, count)
        return Response({"message": "문제 영역이 저장되었습니다.", "count": count}, status=200)
