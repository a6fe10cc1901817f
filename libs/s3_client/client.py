# libs/s3_client/client.py

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Optional

import boto3
from botocore.client import Config

# ---------------------------------------------------------------------
# Config (명시적으로 만들어서 주입 — 프로세스 전역 클라이언트 없음)
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class S3Config:
    access_key: Optional[str]
    secret_key: Optional[str]
    region: str
    bucket: str
    # R2 등 S3 호환 스토리지일 때만
    endpoint_url: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Any) -> "S3Config":
        """Django settings 우선, 없으면 os.environ."""

        def _get(name: str, default: Optional[str] = None) -> Optional[str]:
            return getattr(settings, name, None) or os.environ.get(name) or default

        bucket = _get("S3_BUCKET_NAME")
        if not bucket:
            raise RuntimeError("S3_BUCKET_NAME is not set")

        return cls(
            access_key=_get("AWS_ACCESS_KEY_ID"),
            secret_key=_get("AWS_SECRET_ACCESS_KEY"),
            region=_get("AWS_REGION", "ap-northeast-2") or "ap-northeast-2",
            bucket=bucket,
            endpoint_url=_get("S3_ENDPOINT_URL"),
        )


# ---------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------

def build_s3_client(config: S3Config) -> Any:
    return boto3.client(
        "s3",
        region_name=config.region,
        endpoint_url=config.endpoint_url,
        aws_access_key_id=config.access_key,
        aws_secret_access_key=config.secret_key,
        config=Config(
            signature_version="s3v4",
            s3={"addressing_style": "path"} if config.endpoint_url else {},
        ),
    )
