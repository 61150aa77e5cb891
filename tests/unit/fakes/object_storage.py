from __future__ import annotations

from typing import Optional

from signoff.backend.app.domain.common.errors import StorageFailure
from signoff.backend.app.domain.files import StorageCapability


class FakeObjectStorage:
    def __init__(self) -> None:
        self.fail = False
        self.deleted: list[str] = []
        self.signed_reads: list[tuple[str, Optional[str], int]] = []
        self.signed_writes: list[tuple[str, str, int]] = []

    async def put_capability(self, *, key: str, content_type: str, expires_in: int) -> StorageCapability:
        if self.fail:
            raise StorageFailure("sign URL")
        self.signed_writes.append((key, content_type, expires_in))
        return StorageCapability(url=f"https://storage.test/put/{key}", key=key, expires_in=expires_in)

    async def get_capability(
            self,
            *,
            key: str,
            download_filename: Optional[str],
            expires_in: int,
    ) -> StorageCapability:
        if self.fail:
            raise StorageFailure("sign URL")
        self.signed_reads.append((key, download_filename, expires_in))
        return StorageCapability(url=f"https://storage.test/get/{key}", key=key, expires_in=expires_in)

    async def delete(self, *, key: str) -> None:
        if self.fail:
            raise StorageFailure("delete object")
        self.deleted.append(key)
