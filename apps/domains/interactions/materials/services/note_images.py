# apps/domains/interactions/materials/services/note_images.py
"""
오답노트 이미지 생성 — Django 쪽 조립 지점

use case(academy.application.use_cases.materials.generate_note_images)는
포트만 알고, 여기서 Django 저장소 / S3 스토리지 / PyPDF2 어댑터를 꽂아 준다.
스토리지는 요청마다 settings로부터 명시적으로 만들되, 실제 fetch 직전까지 미룬다.
"""
from __future__ import annotations

from typing import Optional

from django.conf import settings

from academy.adapters.db.django.repositories_materials import DjangoRegionRepository
from academy.adapters.db.django.repositories_scores import DjangoScoreLookup
from academy.adapters.pdf import PyPDF2DocumentCropper
from academy.adapters.storage import LazyDocumentStorage, S3DocumentStorage
from academy.application.ports.storage import DocumentStoragePort
from academy.application.use_cases.materials.generate_note_images import (
    DEFAULT_MAX_WORKERS,
    generate_note_images,
)
from academy.domain.materials.entities import NoteImageBatch, RoundScope
from academy.domain.materials.geometry import REFERENCE_PAGE_WIDTH
from libs.s3_client import S3Config


def build_document_storage() -> DocumentStoragePort:
    return S3DocumentStorage(S3Config.from_settings(settings))


def generate_for_student(
    *,
    student_phone: str,
    scope: RoundScope,
    storage: Optional[DocumentStoragePort] = None,
) -> NoteImageBatch:
    return generate_note_images(
        scores=DjangoScoreLookup(),
        regions=DjangoRegionRepository(),
        storage=storage if storage is not None else LazyDocumentStorage(lambda: build_document_storage()),
        cropper=PyPDF2DocumentCropper(),
        student_phone=student_phone,
        scope=scope,
        reference_width=float(getattr(settings, "NOTE_REFERENCE_PAGE_WIDTH", REFERENCE_PAGE_WIDTH)),
        max_workers=int(getattr(settings, "NOTE_IMAGE_MAX_WORKERS", DEFAULT_MAX_WORKERS)),
    )
