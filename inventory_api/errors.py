"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from inventory_api.utils.responses import RESPONSE_ERROR, RESPONSE_INVALID_ITEM, RESPONSE_ITEM_NOT_FOUND


@dataclass
class AppError(Exception):
    """Base application error.

    ``extra`` is merged into the JSON body next to ``message``.
    """

    message: str
    status_code: int
    details: Any | None = None
    hint: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class ValidationError(AppError):
    """Request body does not have the Item shape."""

    def __init__(self, message: str = RESPONSE_INVALID_ITEM, details: Any | None = None) -> None:
        super().__init__(message=message, status_code=400, details=details)


class NotFoundError(AppError):
    """Identifier does not resolve to a stored item."""

    def __init__(self, item_id: str, message: str = RESPONSE_ITEM_NOT_FOUND) -> None:
        super().__init__(message=message, status_code=404, extra={"id": item_id})
        self.item_id = item_id


class StorageError(AppError):
    """The document store rejected or failed an operation."""

    def __init__(self, message: str = RESPONSE_ERROR, details: Any | None = None) -> None:
        super().__init__(message=message, status_code=500, details=details)


class BulkDeleteError(AppError):
    """Some deletions of a delete-all run failed."""

    def __init__(self, deleted: int, failed: int, message: str = RESPONSE_ERROR) -> None:
        super().__init__(
            message=message,
            status_code=500,
            details=f"{failed} of {deleted + failed} deletions failed",
            extra={"deleted": deleted, "failed": failed},
        )
        self.deleted = deleted
        self.failed = failed
