import logging

from django.db import IntegrityError
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.generics import ListAPIView
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from academy.adapters.db.django import repositories_materials as materials_repo
from academy.adapters.db.django.repositories_rounds import round_scope_get
from academy.domain.materials.errors import DocumentStorageError, InvalidDocumentError

from ..filters import MaterialFilter
from ..serializers import MaterialSerializer, MaterialUploadSerializer, QuestionRegionSerializer
from ..services import note_images as note_image_service
from ..services.uploads import upload_material

logger = logging.getLogger(__name__)


class MaterialUploadView(APIView):
    """
    강의 자료(PDF) 업로드 -> 스토리지 저장 + DB 기록
    회차당 1개만 허용 (중복 시 409)
    """
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request):
        s = MaterialUploadSerializer(data=request.data)
        if not s.is_valid():
            return Response({"error": "필수 정보 누락", "detail": s.errors}, status=400)

        data = s.validated_data
        round_id = int(data["roundId"])

        if round_scope_get(round_id=round_id) is None:
            return Response({"error": "회차를 찾을 수 없습니다."}, status=404)
        if materials_repo.material_filter_round(round_id).exists():
            return Response({"error": "해당 회차에는 이미 자료가 등록되어 있습니다."}, status=409)

        upload = data["materialFile"]
        try:
            material = upload_material(
                storage=note_image_service.build_document_storage(),
                round_id=round_id,
                filename=upload.name,
                data=upload.read(),
                material_name=(data.get("materialName") or "").strip(),
                total_pages=data.get("totalPages"),
            )
        except InvalidDocumentError:
            return Response({"error": "PDF 파일을 읽을 수 없습니다."}, status=400)
        except DocumentStorageError:
            return Response({"error": "파일 저장 중 오류 발생"}, status=500)
        except IntegrityError:
            return Response({"error": "해당 회차에는 이미 자료가 등록되어 있습니다."}, status=409)

        return Response(
            {
                "message": "강의 자료가 성공적으로 업로드 되었습니다.",
                "materialId": material.id,
                "materialUrl": material.file_url,
            },
            status=status.HTTP_201_CREATED,
        )


class MaterialListView(ListAPIView):
    """등록된 자료 목록 (분반명/회차 번호 포함, 최신순)"""
    serializer_class = MaterialSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = MaterialFilter
    pagination_class = None

    def get_queryset(self):
        return materials_repo.material_list()


class MaterialDetailView(APIView):
    """에디터 페이지용: 자료 정보 + 문항 영역 좌표"""

    def get(self, request, material_id: int):
        material = materials_repo.material_get(material_id)
        if material is None:
            return Response({"error": "자료를 찾을 수 없습니다."}, status=404)

        regions = materials_repo.region_filter_material(material.id)
        return Response({
            "material": MaterialSerializer(material).data,
            "regions": QuestionRegionSerializer(regions, many=True).data,
        })
