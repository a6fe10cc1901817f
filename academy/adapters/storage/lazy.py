# 첫 사용 시점에 실제 스토리지를 만든다.
# 오답/영역이 없어 fetch까지 가지 않는 요청은 설정 조회나 boto3 client 생성이 없다.

from __future__ import annotations

from typing import Callable, Optional

from academy.application.ports.storage import DocumentStoragePort


class LazyDocumentStorage(DocumentStoragePort):

    def __init__(self, factory: Callable[[], DocumentStoragePort]) -> None:
        self._factory = factory
        self._storage: Optional[DocumentStoragePort] = None

    @property
    def built(self) -> bool:
        return self._storage is not None

    def _get(self) -> DocumentStoragePort:
        if self._storage is None:
            self._storage = self._factory()
        return self._storage

    def get_object(self, key: str) -> bytes:
        return self._get().get_object(key)

    def put_object(self, key: str, body: bytes, content_type: str = "application/pdf") -> None:
        self._get().put_object(key, body, content_type)

    def object_url(self, key: str) -> str:
        return self._get().object_url(key)
