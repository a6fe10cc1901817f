"""
Repository 포트 — 영속화 추상화 (Django/ORM 미사용)
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Iterable, List, Optional, Protocol

from academy.domain.materials.entities import Region, RoundScope


class ScoreLookupPort(Protocol):
    """학생 성적에서 오답 문항 텍스트 조회."""

    @abstractmethod
    def get_wrong_questions_text(self, student_phone: str, scope: RoundScope) -> Optional[str]:
        """(학생 전화번호, 회차) -> 오답 문항 텍스트. 성적이 없으면 None."""
        ...


class RegionRepository(Protocol):
    """문항 영역 조회 (자료의 storage key 포함)."""

    @abstractmethod
    def list_regions(self, scope: RoundScope, question_numbers: Iterable[int]) -> List[Region]:
        """
        회차 자료에서 question_numbers에 해당하는 영역을 문항 번호 오름차순으로 반환.
        자료가 없거나 일치하는 영역이 없으면 빈 리스트.
        """
        ...
