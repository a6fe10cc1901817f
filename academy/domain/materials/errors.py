"""
강의 자료 / 오답노트 도메인 오류 — 순수 파이썬
"""
from __future__ import annotations

from typing import Optional


class NoteImageError(Exception):
    """오답노트 이미지 생성 관련 오류 베이스."""
    pass


class DocumentStorageError(NoteImageError):
    """원본 문서를 스토리지에서 가져오지 못함 (키 없음 / 스토리지 장애). 요청 전체 실패."""

    def __init__(self, message: str, *, key: str = "", code: str = "") -> None:
        super().__init__(message)
        self.key = key
        self.code = code


class InvalidDocumentError(NoteImageError):
    """가져온 바이트가 PDF로 열리지 않음. 요청 전체 실패."""
    pass


class PageOutOfRangeError(NoteImageError):
    """문항 영역이 문서 페이지 수를 벗어난 페이지를 가리킴. 해당 문항만 건너뛴다."""

    def __init__(self, *, page_number: int, page_count: int, question_number: Optional[int] = None) -> None:
        prefix = f"question {question_number}: " if question_number is not None else ""
        super().__init__(f"{prefix}page {page_number} out of range (1..{page_count})")
        self.question_number = question_number
        self.page_number = page_number
        self.page_count = page_count
