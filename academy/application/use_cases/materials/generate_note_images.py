"""
오답노트 이미지 생성 Use Case — 도메인/포트만 사용 (Django/boto3/PyPDF2 미사용)

흐름
1) 성적의 오답 문항 텍스트 -> 문항 번호
2) 회차 자료에서 해당 문항 영역 조회 (+ storage key)
3) 원본 문서는 요청당 1회만 가져와서 1회만 로드
4) 영역마다 병렬로 좌표 변환 -> 1페이지 잘라내기 -> data URI
5) 문항 번호 오름차순으로 수집

빈 결과(오답 없음, 영역 없음)는 오류가 아니다.
스토리지/문서 오류는 요청 전체 실패, 페이지 범위 오류는 해당 문항만 건너뜀.
"""
from __future__ import annotations

import base64
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Optional

from academy.application.ports.documents import DocumentCropperPort
from academy.application.ports.repositories import RegionRepository, ScoreLookupPort
from academy.application.ports.storage import DocumentStoragePort
from academy.domain.materials.entities import NoteImage, NoteImageBatch, Region, RoundScope
from academy.domain.materials.errors import PageOutOfRangeError
from academy.domain.materials.geometry import REFERENCE_PAGE_WIDTH, transform_region
from academy.domain.scores.wrong_questions import parse_wrong_questions
from academy.domain.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8
PDF_DATA_URI_PREFIX = "data:application/pdf;base64,"


def to_data_uri(pdf_bytes: bytes) -> str:
    return PDF_DATA_URI_PREFIX + base64.b64encode(pdf_bytes).decode("ascii")


def crop_region(
    cropper: DocumentCropperPort,
    document: Any,
    region: Region,
    reference_width: float = REFERENCE_PAGE_WIDTH,
) -> Result[NoteImage]:
    """영역 1개 처리. 페이지 범위 오류만 Err로 돌려주고 나머지 예외는 그대로 올린다."""
    try:
        page = cropper.page_size(document, region.page_number)
    except PageOutOfRangeError as e:
        return Err(
            message=f"question {region.question_number}: {e}",
            code="page_out_of_range",
            key=region.question_number,
        )

    box = transform_region(region, page, reference_width)
    pdf_bytes = cropper.extract(document, region.page_number, box)
    return Ok(NoteImage(question_number=region.question_number, image_data=to_data_uri(pdf_bytes)))


def generate_note_images(
    *,
    scores: ScoreLookupPort,
    regions: RegionRepository,
    storage: DocumentStoragePort,
    cropper: DocumentCropperPort,
    student_phone: str,
    scope: RoundScope,
    reference_width: float = REFERENCE_PAGE_WIDTH,
    max_workers: Optional[int] = None,
) -> NoteImageBatch:
    wrong_text = scores.get_wrong_questions_text(student_phone, scope)
    numbers = parse_wrong_questions(wrong_text)
    if not numbers:
        return NoteImageBatch.empty()

    rows: List[Region] = sorted(
        regions.list_regions(scope, numbers),
        key=lambda r: r.question_number,
    )
    if not rows:
        return NoteImageBatch.empty()

    # 한 회차의 모든 영역은 같은 문서를 가리킨다 -> fetch/load 1회
    data = storage.get_object(rows[0].document_key)
    document = cropper.load(data)

    workers = max(1, min(int(max_workers or DEFAULT_MAX_WORKERS), len(rows)))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="note-image") as pool:
        # map()은 입력 순서를 유지한다
        outcomes = list(
            pool.map(lambda region: crop_region(cropper, document, region, reference_width), rows)
        )

    images: List[NoteImage] = []
    skipped: List[int] = []
    for outcome in outcomes:
        if isinstance(outcome, Ok):
            images.append(outcome.value)
        else:
            logger.warning("note image skipped | %s", outcome.message)
            skipped.append(int(outcome.key))

    logger.info(
        "note images | round_id=%s | wrong=%d | regions=%d | produced=%d | skipped=%d",
        scope.round_id, len(numbers), len(rows), len(images), len(skipped),
    )
    return NoteImageBatch(images=images, skipped=skipped)
