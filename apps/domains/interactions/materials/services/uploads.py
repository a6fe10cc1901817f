# apps/domains/interactions/materials/services/uploads.py
from __future__ import annotations

import logging
import time
from typing import Optional

from django.db import transaction

from academy.adapters.db.django import repositories_materials as materials_repo
from academy.adapters.pdf import PyPDF2DocumentCropper
from academy.application.ports.storage import DocumentStoragePort

logger = logging.getLogger(__name__)


def build_file_key(filename: str, now_ms: Optional[int] = None) -> str:
    """materials/<epoch ms>_<원본 파일명>"""
    ms = int(now_ms if now_ms is not None else time.time() * 1000)
    name = (filename or "material.pdf").replace("/", "_").replace("\\", "_")
    return f"materials/{ms}_{name}"


def count_pages(data: bytes) -> int:
    cropper = PyPDF2DocumentCropper()
    return cropper.page_count(cropper.load(data))


def upload_material(
    *,
    storage: DocumentStoragePort,
    round_id: int,
    filename: str,
    data: bytes,
    material_name: str = "",
    total_pages: Optional[int] = None,
):
    """
    원본 PDF를 스토리지에 올리고 Material 레코드 생성.
    - 업로드 전에 항상 PDF로 열어 본다 (InvalidDocumentError)
    - material_name 없으면 원본 파일명, total_pages 없으면 실제 페이지 수
    - 레코드 INSERT 후 업로드, 업로드 실패 시 롤백 (중복 회차면 업로드 전에 IntegrityError)
    """
    pages = count_pages(data)
    if total_pages:
        pages = int(total_pages)

    key = build_file_key(filename)
    with transaction.atomic():
        material = materials_repo.material_create(
            round_id=round_id,
            material_name=material_name or filename,
            file_key=key,
            file_url=storage.object_url(key),
            total_pages=pages,
        )
        storage.put_object(key, data, "application/pdf")

    logger.info("material uploaded | id=%s | round_id=%s | key=%s | pages=%s", material.id, round_id, key, pages)
    return material
