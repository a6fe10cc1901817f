# S3(또는 R2) 객체 스토리지 어댑터 — DocumentStoragePort 구현

from academy.adapters.storage.lazy import LazyDocumentStorage
from academy.adapters.storage.s3_document_storage import S3DocumentStorage

__all__ = ["LazyDocumentStorage", "S3DocumentStorage"]
