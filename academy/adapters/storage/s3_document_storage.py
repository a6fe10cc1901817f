# S3 호환 객체 스토리지 어댑터 — DocumentStoragePort 구현
# 설정(S3Config)은 생성 시 주입, 테스트에서는 client를 직접 넘길 수 있다.

from __future__ import annotations

import logging
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from academy.application.ports.storage import DocumentStoragePort
from academy.domain.materials.errors import DocumentStorageError
from libs.s3_client import S3Config, build_s3_client

logger = logging.getLogger(__name__)


def _error_code(e: ClientError) -> str:
    return str((e.response.get("Error") or {}).get("Code") or "")


class S3DocumentStorage(DocumentStoragePort):
    """원본 자료(PDF) 읽기/쓰기."""

    def __init__(self, config: S3Config, client: Optional[Any] = None) -> None:
        self.config = config
        self._client = client if client is not None else build_s3_client(config)

    def get_object(self, key: str) -> bytes:
        if not key:
            raise DocumentStorageError("empty storage key", key="", code="NoSuchKey")
        try:
            resp = self._client.get_object(Bucket=self.config.bucket, Key=key)
            return resp["Body"].read()
        except ClientError as e:
            code = _error_code(e)
            logger.exception("S3 get_object failed | bucket=%s | key=%s | code=%s", self.config.bucket, key, code)
            raise DocumentStorageError(f"cannot fetch document '{key}': {code}", key=key, code=code) from e
        except BotoCoreError as e:
            logger.exception("S3 unavailable | bucket=%s | key=%s", self.config.bucket, key)
            raise DocumentStorageError(f"storage unavailable: {e}", key=key, code="Unavailable") from e

    def put_object(self, key: str, body: bytes, content_type: str = "application/pdf") -> None:
        try:
            self._client.put_object(
                Bucket=self.config.bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        except ClientError as e:
            code = _error_code(e)
            logger.exception("S3 put_object failed | bucket=%s | key=%s | code=%s", self.config.bucket, key, code)
            raise DocumentStorageError(f"cannot upload document '{key}': {code}", key=key, code=code) from e
        except BotoCoreError as e:
            logger.exception("S3 unavailable | bucket=%s | key=%s", self.config.bucket, key)
            raise DocumentStorageError(f"storage unavailable: {e}", key=key, code="Unavailable") from e

    def object_url(self, key: str) -> str:
        if self.config.endpoint_url:
            return f"{self.config.endpoint_url.rstrip('/')}/{self.config.bucket}/{key}"
        return f"https://{self.config.bucket}.s3.{self.config.region}.amazonaws.com/{key}"
