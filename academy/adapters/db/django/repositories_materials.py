"""
Material / QuestionRegion 조회·저장 — .objects 접근은 여기로 한정.
"""
from __future__ import annotations

from typing import Iterable, List, Sequence

from django.db import transaction

from academy.application.ports.repositories import RegionRepository
from academy.domain.materials.entities import Region, RegionSpec, RoundScope


def material_filter_round(round_id: int):
    from apps.domains.interactions.materials.models import Material
    return Material.objects.filter(round_id=int(round_id))


def material_get(pk):
    from apps.domains.interactions.materials.models import Material
    return Material.objects.select_related("round").filter(pk=pk).first()


def material_list():
    from apps.domains.interactions.materials.models import Material
    return Material.objects.select_related("round").order_by("-uploaded_at", "-id")


def material_create(*, round_id: int, material_name: str, file_key: str, file_url: str, total_pages: int):
    from apps.domains.interactions.materials.models import Material
    return Material.objects.create(
        round_id=int(round_id),
        material_name=material_name,
        file_key=file_key,
        file_url=file_url,
        total_pages=int(total_pages),
    )


def region_filter_material(material_id: int):
    from apps.domains.interactions.materials.models import QuestionRegion
    return QuestionRegion.objects.filter(material_id=int(material_id)).order_by("question_number")


def region_replace_all(material_id: int, specs: Sequence[RegionSpec]) -> int:
    """자료의 영역을 전부 지우고 다시 넣는다 (트랜잭션 1개, 실패 시 롤백)."""
    from apps.domains.interactions.materials.models import QuestionRegion

    with transaction.atomic():
        QuestionRegion.objects.filter(material_id=int(material_id)).delete()
        QuestionRegion.objects.bulk_create([
            QuestionRegion(
                material_id=int(material_id),
                question_number=s.question_number,
                page_number=s.page_number,
                x=s.x,
                y=s.y,
                width=s.width,
                height=s.height,
            )
            for s in specs
        ])
    return len(specs)


def region_filter_round_questions(round_id: int, question_numbers: Iterable[int]) -> List[Region]:
    """회차 자료 JOIN 문항 영역 (question_number 오름차순)."""
    from apps.domains.interactions.materials.models import QuestionRegion

    numbers = [int(n) for n in question_numbers]
    if not numbers:
        return []

    rows = (
        QuestionRegion.objects
        .filter(material__round_id=int(round_id), question_number__in=numbers)
        .select_related("material")
        .order_by("question_number")
    )
    return [
        Region(
            question_number=int(r.question_number),
            page_number=int(r.page_number),
            x=float(r.x),
            y=float(r.y),
            width=float(r.width),
            height=float(r.height),
            document_key=str(r.material.file_key),
        )
        for r in rows
    ]


class DjangoRegionRepository(RegionRepository):

    def list_regions(self, scope: RoundScope, question_numbers: Iterable[int]) -> List[Region]:
        return region_filter_round_questions(scope.round_id, question_numbers)
