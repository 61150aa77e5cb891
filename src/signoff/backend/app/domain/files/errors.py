from signoff.backend.app.domain.common.errors import NotFoundError, InvalidInputError


class AttachmentNotFound(NotFoundError):
    def __init__(self, attachment_id: str = "") -> None:
        # same message whether the file is missing or owned by another project
        super().__init__("File not found")
        self.attachment_id = attachment_id


class DisallowedMimeType(InvalidInputError):
    def __init__(self, mime_type: str, allowed: tuple[str, ...]) -> None:
        super().__init__(
            f"Invalid file type {mime_type!r}. Allowed types: {', '.join(allowed)}"
        )
        self.mime_type = mime_type


class InvalidFileSize(InvalidInputError):
    def __init__(self, size: int, max_size: int) -> None:
        super().__init__(
            f"Invalid file size {size}. Maximum size is {max_size // (1024 * 1024)}MB."
        )
        self.size = size


class InvalidUpload(InvalidInputError):
    pass
