from .client import S3Config, build_s3_client

__all__ = ["S3Config", "build_s3_client"]
