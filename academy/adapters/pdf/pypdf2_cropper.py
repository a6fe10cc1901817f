"""
PDF 영역 잘라내기 어댑터 — DocumentCropperPort 구현 (PyPDF2)

새 PdfWriter에 원본 페이지 1장만 복사하고 CropBox만 지정한다.
래스터화는 하지 않으므로 벡터/텍스트는 그대로 남는다.

PdfReader는 스트림 seek/read + 객체 캐시를 가지므로 스레드 간 공유 불가.
문서 핸들은 원본 바이트와 페이지 크기만 공유하고, reader는 스레드마다 따로 연다.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from io import BytesIO
from typing import Tuple

from PyPDF2 import PdfReader, PdfWriter
from PyPDF2.errors import PdfReadError
from PyPDF2.generic import RectangleObject

from academy.application.ports.documents import DocumentCropperPort
from academy.domain.materials.entities import CropBox, PageSize
from academy.domain.materials.errors import InvalidDocumentError, PageOutOfRangeError


@dataclass(frozen=True)
class LoadedDocument:
    data: bytes
    page_sizes: Tuple[PageSize, ...]
    _local: threading.local = field(default_factory=threading.local, repr=False, compare=False)

    def reader(self) -> PdfReader:
        """현재 스레드 전용 reader (스레드당 1회 파싱)."""
        reader = getattr(self._local, "reader", None)
        if reader is None:
            reader = PdfReader(BytesIO(self.data))
            self._local.reader = reader
        return reader


def _page_size(page) -> PageSize:
    # MediaBox의 좌하단 원점과 /Rotate는 반영하지 않는다 (편집기 미리보기와 동일한 기준).
    box = page.mediabox
    return PageSize(width=float(box.width), height=float(box.height))


class PyPDF2DocumentCropper(DocumentCropperPort):

    def load(self, data: bytes) -> LoadedDocument:
        if not data:
            raise InvalidDocumentError("empty document")
        try:
            reader = PdfReader(BytesIO(data))
            sizes = tuple(_page_size(page) for page in reader.pages)
        except (PdfReadError, ValueError) as e:
            raise InvalidDocumentError(f"cannot open document: {e}") from e
        return LoadedDocument(data=bytes(data), page_sizes=sizes)

    def page_count(self, document: LoadedDocument) -> int:
        return len(document.page_sizes)

    def _check(self, document: LoadedDocument, page_number: int) -> int:
        count = len(document.page_sizes)
        if not 1 <= int(page_number) <= count:
            raise PageOutOfRangeError(page_number=int(page_number), page_count=count)
        return int(page_number) - 1

    def page_size(self, document: LoadedDocument, page_number: int) -> PageSize:
        return document.page_sizes[self._check(document, page_number)]

    def extract(self, document: LoadedDocument, page_number: int, box: CropBox) -> bytes:
        index = self._check(document, page_number)
        source = document.reader().pages[index]

        writer = PdfWriter()
        # add_page는 writer 쪽 복제본을 돌려준다 (원본 페이지는 그대로)
        copied = writer.add_page(source)
        copied.cropbox = RectangleObject(list(box.as_corners()))

        buf = BytesIO()
        writer.write(buf)
        return buf.getvalue()
