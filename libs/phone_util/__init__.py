"""
학생 전화번호 정규화

- 입력: 010-1234-5678, 01012345678, +82 10-1234-5678 등
- 저장/조회: 01012345678
"""

from .normalizer import normalize_phone

__all__ = ["normalize_phone"]
