"""
객체 스토리지 포트 — 원본 문서 바이트 읽기/쓰기 (boto3 미사용)
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Protocol


class DocumentStoragePort(Protocol):
    """버킷은 어댑터 생성 시 주입된 설정을 사용 (호출 측은 key만 안다)."""

    @abstractmethod
    def get_object(self, key: str) -> bytes:
        """객체 전체 바이트. 키 없음/스토리지 장애 시 DocumentStorageError."""
        ...

    @abstractmethod
    def put_object(self, key: str, body: bytes, content_type: str = "application/pdf") -> None:
        """객체 업로드. 실패 시 DocumentStorageError."""
        ...

    @abstractmethod
    def object_url(self, key: str) -> str:
        """객체 위치 URL (private 버킷 — 직접 접근용 아님, 기록용)."""
        ...
