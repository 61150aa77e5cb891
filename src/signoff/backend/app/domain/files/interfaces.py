from typing import Protocol, runtime_checkable

from signoff.backend.app.domain.files.entities import StorageCapability


@runtime_checkable
class ObjectStorage(Protocol):
    """
    S3-style object store. The store is never authoritative for existence:
    an object without a metadata row is an orphan, not a file.
    """

    async def put_capability(
            self,
            *,
            key: str,
            content_type: str,
            expires_in: int,
    ) -> StorageCapability:
        ...

    async def get_capability(
            self,
            *,
            key: str,
            download_filename: str | None,
            expires_in: int,
    ) -> StorageCapability:
        ...

    async def delete(self, *, key: str) -> None:
        ...


class ObjectCleanupScheduler(Protocol):
    def schedule_delete(self, key: str) -> None:
        """
        Queue removal of an object that no metadata row references any more.
        Must not raise and must not block the caller.
        """
        ...
