"""
강의 자료 / 문항 영역 / 오답노트 이미지 엔티티 — 순수 파이썬 (Django 미사용)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class RoundScope:
    """
    오답노트 조회의 단일 스코프 키.

    점수(class_name + round_number)와 자료(round_id)가 서로 다른 키로
    저장되어 있으므로, 요청 시점에 Round 하나로 먼저 확정한 뒤 사용한다.
    """
    round_id: int
    class_name: str
    round_number: int


@dataclass(frozen=True)
class Region:
    """
    문서의 한 페이지 위 문항 1개의 사각형 영역.

    좌표계: 좌상단 원점, 기준 페이지 폭(A4 세로, pt) 기준으로 저장됨.
    page_number는 1부터 시작.
    """
    question_number: int
    page_number: int
    x: float
    y: float
    width: float
    height: float
    document_key: str = ""


@dataclass(frozen=True)
class PageSize:
    width: float
    height: float


@dataclass(frozen=True)
class CropBox:
    """실제 페이지 좌표계(좌하단 원점)의 사각형."""
    x: float
    y: float
    width: float
    height: float

    def as_corners(self) -> Tuple[float, float, float, float]:
        """(lower-left x, lower-left y, upper-right x, upper-right y)"""
        return (self.x, self.y, self.x + self.width, self.y + self.height)


@dataclass(frozen=True)
class NoteImage:
    question_number: int
    # data URI (data:application/pdf;base64,...)
    image_data: str


@dataclass(frozen=True)
class NoteImageBatch:
    images: List[NoteImage] = field(default_factory=list)
    # 영역 좌표가 잘못되어 건너뛴 문항 번호
    skipped: List[int] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "NoteImageBatch":
        return cls()

    def question_numbers(self) -> List[int]:
        return [img.question_number for img in self.images]


@dataclass(frozen=True)
class RegionSpec:
    """편집기에서 저장 요청으로 들어온 영역 정의 (DB 저장 전)."""
    question_number: int
    page_number: int
    x: float
    y: float
    width: float
    height: float
