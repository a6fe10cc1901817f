"""
문서(PDF) 조작 포트 — 로드 / 페이지 크기 / 영역 잘라내기 (PDF 라이브러리 미사용)
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Any, Protocol

from academy.domain.materials.entities import CropBox, PageSize


class DocumentCropperPort(Protocol):
    """
    load()가 돌려준 문서 핸들은 여러 스레드에서 동시에 읽기 전용으로 공유된다.
    extract()는 원본 핸들을 변경하면 안 된다.
    """

    @abstractmethod
    def load(self, data: bytes) -> Any:
        """바이트 -> 문서 핸들. 열 수 없으면 InvalidDocumentError."""
        ...

    @abstractmethod
    def page_count(self, document: Any) -> int:
        ...

    @abstractmethod
    def page_size(self, document: Any, page_number: int) -> PageSize:
        """1-based page_number. 범위 밖이면 PageOutOfRangeError."""
        ...

    @abstractmethod
    def extract(self, document: Any, page_number: int, box: CropBox) -> bytes:
        """해당 페이지 1장만 담고 box를 crop 영역으로 지정한 새 문서 바이트."""
        ...
