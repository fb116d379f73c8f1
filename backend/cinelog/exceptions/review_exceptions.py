from uuid import UUID

from fastapi import status

from .base import AppError


class ReviewNotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, review_id: UUID | str):
        detail = f"Review with id {review_id} not found."
        super().__init__(detail)
