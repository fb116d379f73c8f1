from fastapi import status

from .base import AppError


class MissingIdentifier(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, name: str):
        detail = f"{name} is required."
        super().__init__(detail)


class InvalidAnonymousId(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, value: str):
        detail = f"Anonymous id {value!r} is not a valid UUID."
        super().__init__(detail)
