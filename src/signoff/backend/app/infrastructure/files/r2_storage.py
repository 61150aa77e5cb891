from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from signoff.backend.app.domain.common.errors import StorageFailure
from signoff.backend.app.domain.files import StorageCapability

logger = logging.getLogger(__name__)


class R2ObjectStorage:
    """
    Cloudflare R2 (S3-compatible) behind a boto3 client.

    Presigning is local and does not touch the network; deletion does, so it
    runs in a worker thread to keep the event loop free.
    """

    def __init__(self, client: Any, bucket: str) -> None:
        self._client = client
        self._bucket = bucket

    async def put_capability(self, *, key: str, content_type: str, expires_in: int) -> StorageCapability:
        params = {"Bucket": self._bucket, "Key": key, "ContentType": content_type}
        url = self._presign("put_object", params, expires_in)
        return StorageCapability(url=url, key=key, expires_in=expires_in)

    async def get_capability(
            self,
            *,
            key: str,
            download_filename: str | None,
            expires_in: int,
    ) -> StorageCapability:
        params = {"Bucket": self._bucket, "Key": key}
        if download_filename:
            params["ResponseContentDisposition"] = content_disposition(download_filename)
        url = self._presign("get_object", params, expires_in)
        return StorageCapability(url=url, key=key, expires_in=expires_in)

    async def delete(self, *, key: str) -> None:
        try:
            await asyncio.to_thread(self._client.delete_object, Bucket=self._bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            logger.error("R2 delete failed for %s: %s", key, e)
            raise StorageFailure("delete object") from e

    def _presign(self, operation: str, params: dict[str, str], expires_in: int) -> str:
        try:
            return self._client.generate_presigned_url(
                ClientMethod=operation,
                Params=params,
                ExpiresIn=expires_in,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("R2 presign %s failed for %s: %s", operation, params.get("Key"), e)
            raise StorageFailure("sign URL") from e


def content_disposition(filename: str) -> str:
    # control characters would let a filename inject extra header lines
    cleaned = "".join(ch for ch in filename if ch.isprintable())
    cleaned = cleaned.replace("\\", "_").replace('"', "'").strip() or "download"
    if cleaned.isascii():
        return f'attachment; filename="{cleaned}"'
    fallback = cleaned.encode("ascii", "replace").decode("ascii").replace("?", "_")
    # RFC 6266: plain ASCII fallback plus the UTF-8 name for clients that read it
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(cleaned, safe='')}"


def create_r2_client(*, endpoint_url: str, access_key_id: str, secret_access_key: str) -> Any:
    return boto3.client(
        "s3",
        endpoint_url=endpoint_url,
        aws_access_key_id=access_key_id,
        aws_secret_access_key=secret_access_key,
        region_name="auto",
        config=Config(signature_version="s3v4"),
    )
